from __future__ import annotations

import logging
from typing import Iterable

from app.application.exceptions import SnapshotFormatError
from app.application.ports.key_value_store import KeyValueStorePort
from app.application.utils.snapshot import decode_snapshot, encode_snapshot
from app.application.utils.state_helpers import default_locations
from app.domain.entities.location import Location
from app.domain.entities.restore_result import RestoreOutcome, RestoreResult


class ReservationPersistence:
    def __init__(self, store: KeyValueStorePort, storage_key: str = "reservations") -> None:
        self._store = store
        self._storage_key = storage_key
        self._logger = logging.getLogger(__name__)

    @property
    def storage_key(self) -> str:
        return self._storage_key

    def load(self) -> RestoreResult:
        """
        Restore locations from the snapshot under the storage key.
        Never raises: a missing, unreadable or malformed snapshot yields the default seed.
        """
        try:
            raw = self._store.get_item(self._storage_key)
        except (OSError, UnicodeDecodeError) as e:
            return self._defaulted(f"storage unreadable: {e}")

        if raw is None:
            return RestoreResult(
                outcome=RestoreOutcome.DEFAULTED,
                locations=default_locations(),
                reason="missing",
            )

        try:
            locations = decode_snapshot(raw)
        except SnapshotFormatError as e:
            return self._defaulted(str(e))

        return RestoreResult(outcome=RestoreOutcome.RESTORED, locations=locations)

    def save(self, locations: Iterable[Location]) -> None:
        """Write the full locations snapshot under the storage key."""
        self._store.set_item(self._storage_key, encode_snapshot(locations))

    def _defaulted(self, reason: str) -> RestoreResult:
        self._logger.warning(
            "Discarding reservations snapshot",
            extra={"storage_key": self._storage_key, "reason": reason},
        )
        return RestoreResult(
            outcome=RestoreOutcome.DEFAULTED,
            locations=default_locations(),
            reason=reason,
        )
