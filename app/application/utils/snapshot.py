"""
JSON snapshot codec for the locations list.

Wire shape (no version field):
    [{"locationName": str, "timeSlots": [{"time": str, "booked": bool}, ...]}, ...]
"""

from __future__ import annotations

import json
from typing import Any, Iterable

from app.application.exceptions import SnapshotFormatError
from app.domain.entities.location import Location
from app.domain.entities.time_slot import TimeSlot


def encode_snapshot(locations: Iterable[Location]) -> str:
    return json.dumps([_serialize_location(item) for item in locations], ensure_ascii=False)


def decode_snapshot(raw: str) -> tuple[Location, ...]:
    """Parse a snapshot string; anything that is not a locations array is rejected wholesale."""
    try:
        data = json.loads(raw)
    except (json.JSONDecodeError, TypeError, RecursionError) as e:
        raise SnapshotFormatError(f"snapshot is not valid JSON: {e}") from e

    if not isinstance(data, list):
        raise SnapshotFormatError(f"snapshot is not an array (got {type(data).__name__})")

    locations = tuple(_deserialize_location(entry, index) for index, entry in enumerate(data))

    seen: set[str] = set()
    for item in locations:
        if item.location_name in seen:
            raise SnapshotFormatError(f"duplicate locationName {item.location_name}")
        seen.add(item.location_name)

    return locations


def _serialize_location(location: Location) -> dict[str, Any]:
    return {
        "locationName": location.location_name,
        "timeSlots": [{"time": slot.time, "booked": slot.booked} for slot in location.time_slots],
    }


def _deserialize_location(entry: Any, index: int) -> Location:
    if not isinstance(entry, dict):
        raise SnapshotFormatError(f"entry {index} is not an object")

    name = entry.get("locationName")
    if not isinstance(name, str):
        raise SnapshotFormatError(f"entry {index} has no locationName")

    slots = entry.get("timeSlots")
    if not isinstance(slots, list):
        raise SnapshotFormatError(f"entry {index} ({name}) has no timeSlots array")

    return Location(
        location_name=name,
        time_slots=tuple(_deserialize_slot(slot, name) for slot in slots),
    )


def _deserialize_slot(data: Any, location_name: str) -> TimeSlot:
    if not isinstance(data, dict) or not isinstance(data.get("time"), str):
        raise SnapshotFormatError(f"malformed time slot under {location_name}")

    booked = data.get("booked", False)
    if not isinstance(booked, bool):
        raise SnapshotFormatError(f"slot {data['time']} under {location_name} has non-boolean booked")

    return TimeSlot(time=data["time"], booked=booked)
