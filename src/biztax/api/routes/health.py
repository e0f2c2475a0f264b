"""Health check endpoints."""

from datetime import datetime, timezone

from fastapi import APIRouter, Request, Response, status
from pydantic import BaseModel

from biztax.api.dependencies import State

router = APIRouter(tags=["health"])


class HealthResponse(BaseModel):
    status: str
    timestamp: datetime
    profile: str
    ai: str


@router.get("/health", response_model=HealthResponse)
async def health_check(state: State) -> HealthResponse:
    """Report onboarding progress and whether the AI service has a key."""
    return HealthResponse(
        status="healthy",
        timestamp=datetime.now(timezone.utc),
        profile="configured" if state.profile is not None else "missing",
        ai="enabled" if state.advisor.configured else "disabled",
    )


@router.get("/ready")
async def readiness_check(request: Request, response: Response) -> dict[str, str]:
    """Ready once startup has loaded the application state."""
    if getattr(request.app.state, "biztax", None) is None:
        response.status_code = status.HTTP_503_SERVICE_UNAVAILABLE
        return {"status": "starting"}
    return {"status": "ready"}


@router.get("/live")
async def liveness_check() -> dict[str, str]:
    return {"status": "alive"}
