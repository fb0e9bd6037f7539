from dataclasses import dataclass


@dataclass(frozen=True)
class SlotRow:
    location_name: str
    time: str
