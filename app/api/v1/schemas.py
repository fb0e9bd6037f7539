from pydantic import BaseModel, Field

from app.application.utils.projection import ReservationSummary
from app.domain.entities.location import Location
from app.domain.entities.reservation_state import ReservationState
from app.domain.entities.slot_row import SlotRow


class TimeSlotSchema(BaseModel):
    time: str
    booked: bool


class LocationSchema(BaseModel):
    location_name: str
    time_slots: list[TimeSlotSchema]

    @classmethod
    def from_entity(cls, location: Location) -> "LocationSchema":
        return cls(
            location_name=location.location_name,
            time_slots=[TimeSlotSchema(time=s.time, booked=s.booked) for s in location.time_slots],
        )


class SlotRowSchema(BaseModel):
    location_name: str
    time: str

    @classmethod
    def from_entity(cls, row: SlotRow) -> "SlotRowSchema":
        return cls(location_name=row.location_name, time=row.time)


class SummarySchema(BaseModel):
    destination_count: int
    booked_count: int
    unbooked_count: int

    @classmethod
    def from_entity(cls, summary: ReservationSummary) -> "SummarySchema":
        return cls(
            destination_count=summary.destination_count,
            booked_count=summary.booked_count,
            unbooked_count=summary.unbooked_count,
        )


class ReservationStateSchema(BaseModel):
    locations: list[LocationSchema]
    show_booked: bool
    booked: list[SlotRowSchema] = Field(default_factory=list)
    summary: SummarySchema


class CreateLocationRequestSchema(BaseModel):
    location_name: str = Field(min_length=1)


class ToggleReservationRequestSchema(BaseModel):
    time: str


class ShowBookedRequestSchema(BaseModel):
    show_booked: bool


def state_to_schema(
    state: ReservationState,
    booked: list[SlotRow],
    summary: ReservationSummary,
) -> ReservationStateSchema:
    return ReservationStateSchema(
        locations=[LocationSchema.from_entity(item) for item in state.locations],
        show_booked=state.show_booked,
        booked=[SlotRowSchema.from_entity(row) for row in booked] if state.show_booked else [],
        summary=SummarySchema.from_entity(summary),
    )
