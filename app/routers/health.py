"""Health check endpoint."""
from datetime import datetime, timezone
from fastapi import APIRouter, Depends
from app.config import get_settings
from app.models import HealthResponse
from app.services import LogStore, get_log_store

router = APIRouter(tags=["Health"])


@router.get(
    "/health",
    response_model=HealthResponse,
    summary="Health Check",
    description="Check health status of the API and the in-memory log store."
)
async def health_check(store: LogStore = Depends(get_log_store)):
    """
    Report service status.

    The only dependency is the in-memory store, which is healthy whenever
    the process is up; its entry count is included for quick inspection.
    """
    settings = get_settings()
    return HealthResponse(
        status="healthy",
        timestamp=datetime.now(timezone.utc).isoformat(),
        version=settings.app_version,
        dependencies={"log_store": f"healthy ({len(store)} entries)"}
    )
