"""
Tests for the booking-context log formatter.
"""

from __future__ import annotations

import logging

from rentx.core.logging import BookingContextFormatter


def make_record(**extra) -> logging.LogRecord:
    record = logging.LogRecord("rentx.test", logging.INFO, __file__, 1, "Booking failed", None, None)
    for key, value in extra.items():
        setattr(record, key, value)
    return record


def test_context_fields_are_appended_in_order():
    """Known context fields follow the message as key=value pairs."""
    line = BookingContextFormatter().format(make_record(step="create_user_booking", car_id="7"))

    assert line == "INFO:rentx.test:Booking failed | car_id=7 step=create_user_booking"


def test_empty_and_unknown_fields_are_skipped():
    """Blank values and fields outside the whitelist leave the line unchanged."""
    line = BookingContextFormatter().format(make_record(reason="", token="secret"))

    assert line == "INFO:rentx.test:Booking failed"
