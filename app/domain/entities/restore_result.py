from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from app.domain.entities.location import Location


class RestoreOutcome(str, Enum):
    RESTORED = "restored"
    DEFAULTED = "defaulted"


@dataclass(frozen=True)
class RestoreResult:
    outcome: RestoreOutcome
    locations: tuple[Location, ...]
    reason: str | None = None  # why the snapshot was discarded, when defaulted

    @property
    def restored(self) -> bool:
        return self.outcome is RestoreOutcome.RESTORED
