from fastapi import APIRouter, Request
from datetime import datetime, timezone
from roktokona.schemas.health import HealthResponse

router = APIRouter()

HEALTH_MESSAGE = "সার্ভার চালু আছে"


@router.get("/health", response_model=HealthResponse)
async def health_check(request: Request):
    """Health check endpoint for monitoring."""
    timestamp = datetime.now(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")
    return HealthResponse(
        message=HEALTH_MESSAGE,
        timestamp=timestamp,
        version=request.app.state.settings.APP_VERSION,
    )
