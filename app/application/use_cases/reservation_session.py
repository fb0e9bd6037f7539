from __future__ import annotations

import logging

from app.application.use_cases.reservation_persistence import ReservationPersistence
from app.application.utils import state_helpers
from app.application.utils.projection import ReservationSummary, reservation_rows, summarize
from app.domain.entities.reservation_state import ReservationState
from app.domain.entities.restore_result import RestoreResult
from app.domain.entities.slot_row import SlotRow


class ReservationSession:
    """
    Owns the current ReservationState for one session.

    State is restored exactly once on construction. Every mutation replaces the
    state wholesale; the snapshot is written through whenever the locations
    tuple is replaced.
    """

    def __init__(self, persistence: ReservationPersistence, show_booked: bool = True) -> None:
        self._persistence = persistence
        self._logger = logging.getLogger(__name__)
        self._load_count = 0
        self._restore_result = self._restore()
        self._state = ReservationState(
            locations=self._restore_result.locations,
            show_booked=show_booked,
        )

    @property
    def state(self) -> ReservationState:
        return self._state

    @property
    def restore_result(self) -> RestoreResult:
        return self._restore_result

    @property
    def load_count(self) -> int:
        return self._load_count

    def create_location(self, location_name: str) -> ReservationState:
        self._logger.info("Create location requested", extra={"location": location_name})
        return self._replace(state_helpers.create_location(self._state, location_name))

    def toggle_reservation(self, location_name: str, slot_time: str) -> ReservationState:
        self._logger.info(
            "Toggle reservation requested",
            extra={"location": location_name, "slot": slot_time},
        )
        return self._replace(state_helpers.toggle_reservation(self._state, location_name, slot_time))

    def set_show_booked(self, show_booked: bool) -> ReservationState:
        return self._replace(state_helpers.set_show_booked(self._state, show_booked))

    def booked_rows(self) -> list[SlotRow]:
        return reservation_rows(self._state.locations, True)

    def unbooked_rows(self) -> list[SlotRow]:
        return reservation_rows(self._state.locations, False)

    def summary(self) -> ReservationSummary:
        return summarize(self._state)

    def _restore(self) -> RestoreResult:
        self._load_count += 1
        result = self._persistence.load()
        self._logger.info(
            "Reservations initialized",
            extra={
                "storage_key": self._persistence.storage_key,
                "outcome": result.outcome.value,
                "reason": result.reason,
            },
        )
        return result

    def _replace(self, new_state: ReservationState) -> ReservationState:
        """Write through first; a failed save leaves the current state in place."""
        if new_state.locations is not self._state.locations:
            self._persistence.save(new_state.locations)
        self._state = new_state
        return new_state
