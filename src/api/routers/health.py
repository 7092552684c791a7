"""Health endpoint."""

from datetime import datetime, timezone

from fastapi import APIRouter

from src.api.models import HealthResponse

router = APIRouter()


@router.get("/health", response_model=HealthResponse)
async def health() -> HealthResponse:
    """Health check."""
    timestamp = datetime.now(timezone.utc).isoformat().replace("+00:00", "Z")
    return HealthResponse(status="OK", timestamp=timestamp)
