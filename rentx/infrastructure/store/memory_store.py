from __future__ import annotations

import threading

from rentx.application.ports.selection_store import SelectionStorePort
from rentx.domain.entities.selection_state import SelectionState


class MemorySelectionStore(SelectionStorePort):
    def __init__(self) -> None:
        self._states: dict[str, SelectionState] = {}
        self._lock = threading.Lock()

    def get_state(self, session_id: str) -> SelectionState:
        with self._lock:
            return self._states.get(session_id, SelectionState())

    def set_state(self, session_id: str, state: SelectionState) -> None:
        with self._lock:
            self._states[session_id] = state

    def clear(self, session_id: str) -> None:
        with self._lock:
            self._states.pop(session_id, None)
