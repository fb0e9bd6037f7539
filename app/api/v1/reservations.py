from fastapi import APIRouter, Depends, Query

from app.api.v1.schemas import (
    CreateLocationRequestSchema, ReservationStateSchema, ShowBookedRequestSchema,
    SlotRowSchema, ToggleReservationRequestSchema, state_to_schema,
)
from app.application.use_cases.reservation_session import ReservationSession
from app.wiring.dependencies import get_reservation_session, get_session_lock

router = APIRouter()


def _snapshot(session: ReservationSession) -> ReservationStateSchema:
    return state_to_schema(session.state, session.booked_rows(), session.summary())


@router.get("/reservations", response_model=ReservationStateSchema)
def get_reservations(
    session: ReservationSession = Depends(get_reservation_session),
    lock=Depends(get_session_lock),
):
    with lock:
        return _snapshot(session)


@router.get("/reservations/rows", response_model=list[SlotRowSchema])
def get_reservation_rows(
    booked: bool = Query(True),
    session: ReservationSession = Depends(get_reservation_session),
    lock=Depends(get_session_lock),
):
    with lock:
        rows = session.booked_rows() if booked else session.unbooked_rows()
    return [SlotRowSchema.from_entity(row) for row in rows]


@router.post("/locations", response_model=ReservationStateSchema, status_code=201)
def create_location(
    req: CreateLocationRequestSchema,
    session: ReservationSession = Depends(get_reservation_session),
    lock=Depends(get_session_lock),
):
    with lock:
        session.create_location(req.location_name)
        return _snapshot(session)


@router.post("/locations/{location_name:path}/slots/toggle", response_model=ReservationStateSchema)
def toggle_reservation(
    location_name: str,
    req: ToggleReservationRequestSchema,
    session: ReservationSession = Depends(get_reservation_session),
    lock=Depends(get_session_lock),
):
    with lock:
        session.toggle_reservation(location_name, req.time)
        return _snapshot(session)


@router.put("/show-booked", response_model=ReservationStateSchema)
def set_show_booked(
    req: ShowBookedRequestSchema,
    session: ReservationSession = Depends(get_reservation_session),
    lock=Depends(get_session_lock),
):
    with lock:
        session.set_show_booked(req.show_booked)
        return _snapshot(session)
