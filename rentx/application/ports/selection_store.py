from abc import ABC, abstractmethod

from rentx.domain.entities.selection_state import SelectionState


class SelectionStorePort(ABC):
    @abstractmethod
    def get_state(self, session_id: str) -> SelectionState:
        raise NotImplementedError

    @abstractmethod
    def set_state(self, session_id: str, state: SelectionState) -> None:
        raise NotImplementedError

    @abstractmethod
    def clear(self, session_id: str) -> None:
        """Drop the session's selection, e.g. once navigation completes."""
        raise NotImplementedError
