from fastapi import FastAPI

from rentx.api.v1.cars import router as cars_router
from rentx.api.v1.scheduling import router as scheduling_router
from rentx.core.config import settings
from rentx.core.logging import configure_logging

configure_logging(settings.LOG_LEVEL)

app = FastAPI(title="RentX Scheduling", version="1.0.0")

app.include_router(cars_router, prefix="/api/v1", tags=["cars"])
app.include_router(scheduling_router, prefix="/api/v1", tags=["scheduling"])


@app.get("/health")
def health() -> dict[str, str]:
    return {"status": "ok"}
