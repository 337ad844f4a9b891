from __future__ import annotations

import logging

# extra= keys the rental flow attaches to its log calls
BOOKING_CONTEXT_FIELDS = ("session_id", "car_id", "step", "status", "date_count", "reason")

LOG_FORMAT = "%(levelname)s:%(name)s:%(message)s"


class BookingContextFormatter(logging.Formatter):
    """Appends the booking context of a record as `key=value` pairs."""

    def __init__(self, fmt: str = LOG_FORMAT, fields: tuple[str, ...] = BOOKING_CONTEXT_FIELDS) -> None:
        super().__init__(fmt)
        self._fields = fields

    def format(self, record: logging.LogRecord) -> str:
        line = super().format(record)
        context = " ".join(
            f"{field}={getattr(record, field)}"
            for field in self._fields
            if getattr(record, field, None) not in (None, "")
        )
        return f"{line} | {context}" if context else line


def configure_logging(level: str) -> logging.Handler:
    """Route all records through one stream handler at the given level name."""
    handler = logging.StreamHandler()
    handler.setFormatter(BookingContextFormatter())

    root = logging.getLogger()
    root.setLevel(getattr(logging, level.upper(), logging.INFO))
    root.handlers.clear()
    root.addHandler(handler)
    return handler
