from __future__ import annotations

from app.domain.entities.location import Location
from app.domain.entities.reservation_state import ReservationState

DEFAULT_LOCATION_NAMES: tuple[str, ...] = ("Grand Canyon", "CN Tower")


def default_locations() -> tuple[Location, ...]:
    """Seed locations used when no snapshot can be restored."""
    return tuple(Location.with_default_slots(name) for name in DEFAULT_LOCATION_NAMES)


def create_location(state: ReservationState, location_name: str) -> ReservationState:
    """Append a location with default slots; the same state is returned for a duplicate name."""
    if any(item.location_name == location_name for item in state.locations):
        return state
    return ReservationState(
        locations=state.locations + (Location.with_default_slots(location_name),),
        show_booked=state.show_booked,
    )


def toggle_reservation(state: ReservationState, location_name: str, slot_time: str) -> ReservationState:
    """
    Flip the booked flag of one slot.
    Unknown location names or slot labels leave the state untouched.
    """
    target = next((item for item in state.locations if item.location_name == location_name), None)
    if target is None or not any(slot.time == slot_time for slot in target.time_slots):
        return state

    updated = Location(
        location_name=target.location_name,
        time_slots=tuple(
            slot.toggled() if slot.time == slot_time else slot
            for slot in target.time_slots
        ),
    )
    return ReservationState(
        locations=tuple(updated if item is target else item for item in state.locations),
        show_booked=state.show_booked,
    )


def set_show_booked(state: ReservationState, show_booked: bool) -> ReservationState:
    """Replace the visibility flag; locations keep their identity."""
    return ReservationState(locations=state.locations, show_booked=show_booked)
