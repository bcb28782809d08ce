"""Health check endpoint: database connectivity and signing key presence."""

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from app.core.config import get_settings
from app.core.database import check_db_connected, get_db
from app.schemas.health import HealthResponse

router = APIRouter()


@router.get("", response_model=HealthResponse)
def get_health(db: Session = Depends(get_db)) -> HealthResponse:
    """
    Return service health status, database connectivity and whether tokens can be issued.
    Reports 'degraded' when either the database or the signing key is unavailable.
    """
    settings = get_settings()
    db_status = "connected" if check_db_connected(db) else "disconnected"
    signing_status = "configured" if settings.JWT_SECRET is not None else "missing"
    healthy = db_status == "connected" and signing_status == "configured"

    return HealthResponse(
        status="ok" if healthy else "degraded",
        environment=settings.APP_ENV,
        database=db_status,
        signing=signing_status,
    )
