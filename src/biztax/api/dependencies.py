"""FastAPI dependencies for dependency injection."""

from typing import Annotated

from fastapi import Depends, HTTPException, Request, status

from biztax.calculators.types import BusinessProfile
from biztax.services.app_state import AppState


def get_app_state(request: Request) -> AppState:
    """Application state created at startup."""
    state = getattr(request.app.state, "biztax", None)
    if state is None:
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail="Application state is not initialised",
        )
    return state


def get_profile(state: Annotated[AppState, Depends(get_app_state)]) -> BusinessProfile:
    """Current business profile; 404 until onboarding is complete."""
    if state.profile is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="No business profile yet. Complete onboarding first.",
        )
    return state.profile


# Type aliases for cleaner dependency injection
State = Annotated[AppState, Depends(get_app_state)]
Profile = Annotated[BusinessProfile, Depends(get_profile)]
