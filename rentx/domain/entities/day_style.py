from __future__ import annotations

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class DayStyle:
    color: str
    text_color: str
    disabled: bool | None = None
    disable_touch_event: bool | None = None
    starting_day: bool | None = None
    ending_day: bool | None = None

    def to_marking(self) -> dict[str, Any]:
        """Serialize with the calendar widget's keys, omitting unset optionals."""
        marking: dict[str, Any] = {"color": self.color, "textColor": self.text_color}
        optional = {
            "disabled": self.disabled,
            "disableTouchEvent": self.disable_touch_event,
            "startingDay": self.starting_day,
            "endingDay": self.ending_day,
        }
        for key, value in optional.items():
            if value is not None:
                marking[key] = value
        return marking


MAIN_COLOR = "#DC1637"
MAIN_LIGHT_COLOR = "#FDEDEF"

START_STYLE = DayStyle(color=MAIN_COLOR, text_color=MAIN_LIGHT_COLOR, starting_day=True)
END_STYLE = DayStyle(color=MAIN_COLOR, text_color=MAIN_LIGHT_COLOR, ending_day=True)
PERIOD_STYLE = DayStyle(color=MAIN_LIGHT_COLOR, text_color=MAIN_COLOR)

# date_string -> style, insertion order is chronological
MarkedDateMap = dict[str, DayStyle]
