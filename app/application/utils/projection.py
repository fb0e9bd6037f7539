from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable

from app.domain.entities.location import Location
from app.domain.entities.reservation_state import ReservationState
from app.domain.entities.slot_row import SlotRow


@dataclass(frozen=True)
class ReservationSummary:
    destination_count: int
    booked_count: int
    unbooked_count: int


def reservation_rows(locations: Iterable[Location], wanted: bool) -> list[SlotRow]:
    """Flatten slots whose booked flag equals wanted, in location-then-slot order."""
    return [
        SlotRow(location_name=item.location_name, time=slot.time)
        for item in locations
        for slot in item.time_slots
        if slot.booked == wanted
    ]


def summarize(state: ReservationState) -> ReservationSummary:
    booked = len(reservation_rows(state.locations, True))
    total = sum(len(item.time_slots) for item in state.locations)
    return ReservationSummary(
        destination_count=len(state.locations),
        booked_count=booked,
        unbooked_count=total - booked,
    )
