import logging

from fastapi import FastAPI

from clinic_booking.api.v1.bookings import router as bookings_router
from clinic_booking.api.v1.services import router as services_router
from clinic_booking.api.v1.treatment_subcategories import router as treatment_subcategories_router
from clinic_booking.core.config import settings

class ContextFormatter(logging.Formatter):
    def format(self, record: logging.LogRecord) -> str:
        extras = []
        for key in ("service", "order_id", "reason", "count", "total", "table", "operation", "status", "error"):
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

app = FastAPI(title="Clinic Booking", version="1.0.0")

app.include_router(services_router, tags=["services"])
app.include_router(bookings_router, tags=["bookings"])
app.include_router(treatment_subcategories_router, prefix="/admin", tags=["admin"])


@app.get("/health")
def health() -> dict[str, str]:
    return {"status": "ok"}
