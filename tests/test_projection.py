"""
Tests for booked / unbooked slot projections.
"""

from __future__ import annotations

from app.application.utils.projection import reservation_rows, summarize
from app.application.utils.state_helpers import create_location, default_locations, toggle_reservation
from app.domain.entities.reservation_state import ReservationState
from app.domain.entities.slot_row import SlotRow


def _booked_state() -> ReservationState:
    state = ReservationState(locations=default_locations())
    state = toggle_reservation(state, "CN Tower", "3pm-6pm")
    state = toggle_reservation(state, "Grand Canyon", "12pm-3pm")
    return state


def test_booked_rows_follow_declaration_order():
    rows = reservation_rows(_booked_state().locations, True)
    assert rows == [
        SlotRow(location_name="Grand Canyon", time="12pm-3pm"),
        SlotRow(location_name="CN Tower", time="3pm-6pm"),
    ]


def test_booked_and_unbooked_partition_all_slots():
    state = _booked_state()
    booked = reservation_rows(state.locations, True)
    unbooked = reservation_rows(state.locations, False)

    assert not set(booked) & set(unbooked)
    assert len(booked) + len(unbooked) == sum(len(item.time_slots) for item in state.locations)


def test_summary_counts():
    summary = summarize(_booked_state())
    assert summary.destination_count == 2
    assert summary.booked_count == 2
    assert summary.unbooked_count == 4


def test_add_and_book_scenario():
    state = ReservationState(locations=default_locations())
    state = create_location(state, "Banff")
    state = toggle_reservation(state, "Banff", "9am-12pm")

    assert reservation_rows(state.locations, True) == [SlotRow(location_name="Banff", time="9am-12pm")]
    unbooked = reservation_rows(state.locations, False)
    assert len(unbooked) == 8
    assert SlotRow(location_name="Banff", time="9am-12pm") not in unbooked
