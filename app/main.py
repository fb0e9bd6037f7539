import logging

from fastapi import FastAPI

from app.api.v1.reservations import router as reservations_router
from app.core.config import settings

class ContextFormatter(logging.Formatter):
    """
    Appends reservation context passed via `extra`: the storage key and restore
    outcome/reason from the persistence layer, the location and slot of a mutation.
    """

    def format(self, record: logging.LogRecord) -> str:
        extras = []
        for key in ("storage_key", "location", "slot", "outcome", "reason"):
            value = getattr(record, key, None)
            if value not in (None, ""):
                extras.append(f"{key}={value}")
        base = super().format(record)
        if extras:
            return f"{base} | " + " ".join(extras)
        return base


handler = logging.StreamHandler()
handler.setFormatter(ContextFormatter("%(levelname)s:%(name)s:%(message)s"))

root = logging.getLogger()
root.setLevel(getattr(logging, settings.LOG_LEVEL.upper(), logging.INFO))
root.handlers.clear()
root.addHandler(handler)

app = FastAPI(title="Destination Reservations", version="1.0.0")

app.include_router(reservations_router, prefix="/api/v1", tags=["reservations"])


@app.get("/health")
def health() -> dict[str, str]:
    return {"status": "ok"}
