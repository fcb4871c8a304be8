"""Health check endpoint with a Users store connectivity probe."""

from fastapi import APIRouter

from app.core.config import settings
from app.core.database import check_db_connected
from app.schemas.health import HealthResponse

router = APIRouter()


@router.get("/", response_model=HealthResponse)
def get_health() -> HealthResponse:
    """Report service status; a storage failure shows as disconnected, never a 500."""
    return HealthResponse(
        environment=settings.APP_ENV,
        database="connected" if check_db_connected() else "disconnected",
    )
