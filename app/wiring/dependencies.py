import logging
import threading

from app.core.config import settings
from app.application.ports.key_value_store import KeyValueStorePort
from app.application.use_cases.reservation_persistence import ReservationPersistence
from app.application.use_cases.reservation_session import ReservationSession
from app.infrastructure.store.json_store import JsonFileKeyValueStore
from app.infrastructure.store.memory_store import MemoryKeyValueStore


_key_value_store: KeyValueStorePort | None = None
_reservation_session: ReservationSession | None = None
_session_lock = threading.Lock()


def get_key_value_store() -> KeyValueStorePort:
    global _key_value_store
    if _key_value_store is None:
        if settings.STORE_PROVIDER.lower() == "memory":
            _key_value_store = MemoryKeyValueStore()
        else:
            _key_value_store = JsonFileKeyValueStore(data_dir=settings.STORE_DATA_DIR)
        logging.getLogger(__name__).info("Using %s", type(_key_value_store).__name__)
    return _key_value_store


def get_reservation_persistence() -> ReservationPersistence:
    return ReservationPersistence(
        store=get_key_value_store(),
        storage_key=settings.RESERVATIONS_STORAGE_KEY,
    )


def get_reservation_session() -> ReservationSession:
    global _reservation_session
    with _session_lock:
        if _reservation_session is None:
            _reservation_session = ReservationSession(
                persistence=get_reservation_persistence(),
                show_booked=settings.SHOW_BOOKED_DEFAULT,
            )
        return _reservation_session


def get_session_lock() -> threading.Lock:
    return _session_lock


def get_container() -> dict[str, object]:
    return {
        "session": get_reservation_session(),
        "store": get_key_value_store(),
    }
