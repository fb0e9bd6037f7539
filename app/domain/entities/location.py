from __future__ import annotations

from dataclasses import dataclass

from app.domain.entities.time_slot import DEFAULT_SLOT_TIMES, TimeSlot


@dataclass(frozen=True)
class Location:
    location_name: str
    time_slots: tuple[TimeSlot, ...] = ()

    @classmethod
    def with_default_slots(cls, location_name: str) -> Location:
        """Build a location carrying the fixed slot labels, all unbooked."""
        return cls(
            location_name=location_name,
            time_slots=tuple(TimeSlot(time=label) for label in DEFAULT_SLOT_TIMES),
        )
