from datetime import datetime, timezone

from fastapi import APIRouter

from wellness_journal.core import config
from wellness_journal.system.schemas import HealthResponse

router = APIRouter(tags=["System"])


@router.get("/health", response_model=HealthResponse, summary="Liveness probe")
def health_route() -> HealthResponse:
    return HealthResponse(status="ok", time=datetime.now(timezone.utc), env=config.APP_ENV)
