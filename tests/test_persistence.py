"""
Tests for durable reservations snapshot persistence.
"""

from __future__ import annotations

import json
import tempfile
from pathlib import Path

from app.application.use_cases.reservation_persistence import ReservationPersistence
from app.application.utils.snapshot import encode_snapshot
from app.application.utils.state_helpers import default_locations
from app.domain.entities.location import Location
from app.domain.entities.restore_result import RestoreOutcome
from app.domain.entities.time_slot import TimeSlot
from app.infrastructure.store.json_store import JsonFileKeyValueStore
from app.infrastructure.store.memory_store import MemoryKeyValueStore


class UnreadableStore(MemoryKeyValueStore):
    def get_item(self, key: str) -> str | None:
        raise OSError("disk unavailable")


def test_json_store_persistence():
    """Test that JSON file store persists strings across instances."""
    with tempfile.TemporaryDirectory() as tmpdir:
        store = JsonFileKeyValueStore(data_dir=tmpdir)
        assert store.get_item("reservations") is None

        store.set_item("reservations", '[{"locationName": "Banff", "timeSlots": []}]')

        reopened = JsonFileKeyValueStore(data_dir=tmpdir)
        assert reopened.get_item("reservations") == '[{"locationName": "Banff", "timeSlots": []}]'
        assert (Path(tmpdir) / "reservations.json").exists()
        assert not (Path(tmpdir) / "reservations.json.tmp").exists()


def test_save_then_load_restores_locations():
    """Test that saved locations come back as a restored result."""
    with tempfile.TemporaryDirectory() as tmpdir:
        persistence = ReservationPersistence(JsonFileKeyValueStore(data_dir=tmpdir))
        locations = (
            Location(
                location_name="Banff",
                time_slots=(
                    TimeSlot(time="9am-12pm", booked=True),
                    TimeSlot(time="12pm-3pm"),
                    TimeSlot(time="3pm-6pm"),
                ),
            ),
        )
        persistence.save(locations)

        result = ReservationPersistence(JsonFileKeyValueStore(data_dir=tmpdir)).load()
        assert result.outcome is RestoreOutcome.RESTORED
        assert result.restored
        assert result.reason is None
        assert result.locations == locations


def test_snapshot_wire_format():
    """Test that only the locations array is written, with camelCase keys."""
    store = MemoryKeyValueStore()
    ReservationPersistence(store).save(default_locations())

    data = json.loads(store.get_item("reservations"))
    assert isinstance(data, list)
    assert data[0] == {
        "locationName": "Grand Canyon",
        "timeSlots": [
            {"time": "9am-12pm", "booked": False},
            {"time": "12pm-3pm", "booked": False},
            {"time": "3pm-6pm", "booked": False},
        ],
    }
    assert "showBooked" not in store.get_item("reservations")


def test_missing_snapshot_falls_back_to_defaults():
    result = ReservationPersistence(MemoryKeyValueStore()).load()
    assert result.outcome is RestoreOutcome.DEFAULTED
    assert result.reason == "missing"
    assert [item.location_name for item in result.locations] == ["Grand Canyon", "CN Tower"]


def test_malformed_snapshots_fall_back_to_defaults():
    """Test that non-array or broken snapshots are discarded wholesale without raising."""
    nested = "[" * 100000 + "]" * 100000
    for raw in ("null", "{}", "not json at all", '"reservations"', "42", "[1, 2]", '[{"locationName": "X"}]', nested):
        store = MemoryKeyValueStore({"reservations": raw})
        result = ReservationPersistence(store).load()
        assert result.outcome is RestoreOutcome.DEFAULTED, raw[:40]
        assert result.reason
        assert result.locations == default_locations()


def test_duplicate_location_names_fall_back_to_defaults():
    """Test that a snapshot repeating a location name is rejected like any malformed one."""
    raw = encode_snapshot((Location.with_default_slots("Banff"), Location.with_default_slots("Banff")))
    result = ReservationPersistence(MemoryKeyValueStore({"reservations": raw})).load()
    assert result.outcome is RestoreOutcome.DEFAULTED
    assert "duplicate" in result.reason
    assert result.locations == default_locations()


def test_unreadable_storage_falls_back_to_defaults():
    result = ReservationPersistence(UnreadableStore()).load()
    assert result.outcome is RestoreOutcome.DEFAULTED
    assert "disk unavailable" in result.reason
    assert result.locations == default_locations()


def test_empty_array_is_restored():
    """Test that an empty array is a valid snapshot, not a fallback."""
    result = ReservationPersistence(MemoryKeyValueStore({"reservations": "[]"})).load()
    assert result.outcome is RestoreOutcome.RESTORED
    assert result.locations == ()


def test_custom_storage_key():
    store = MemoryKeyValueStore()
    persistence = ReservationPersistence(store, storage_key="trip_reservations")
    persistence.save(default_locations())

    assert store.get_item("reservations") is None
    assert persistence.load().restored


if __name__ == "__main__":
    test_json_store_persistence()
    test_save_then_load_restores_locations()
    test_snapshot_wire_format()
    test_missing_snapshot_falls_back_to_defaults()
    test_malformed_snapshots_fall_back_to_defaults()
    test_duplicate_location_names_fall_back_to_defaults()
    test_unreadable_storage_falls_back_to_defaults()
    test_empty_array_is_restored()
    test_custom_storage_key()
    print("All tests passed!")
