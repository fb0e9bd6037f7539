from dataclasses import dataclass

from app.domain.entities.location import Location


@dataclass(frozen=True)
class ReservationState:
    locations: tuple[Location, ...] = ()
    show_booked: bool = True  # visibility of the booked destinations table
