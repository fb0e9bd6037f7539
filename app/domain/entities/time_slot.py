from __future__ import annotations

from dataclasses import dataclass

DEFAULT_SLOT_TIMES: tuple[str, ...] = ("9am-12pm", "12pm-3pm", "3pm-6pm")


@dataclass(frozen=True)
class TimeSlot:
    time: str  # one of DEFAULT_SLOT_TIMES
    booked: bool = False

    def toggled(self) -> TimeSlot:
        return TimeSlot(time=self.time, booked=not self.booked)
