"""Business profile endpoints (onboarding and edit)."""

from fastapi import APIRouter, status

from biztax.api.dependencies import Profile, State
from biztax.api.schemas import ErrorResponse, ProfileResponse, ProfileUpdate
from biztax.services.onboarding import SECTORS, ProfileBuilder

router = APIRouter(prefix="/profile", tags=["profile"])


@router.get(
    "",
    response_model=ProfileResponse,
    responses={404: {"model": ErrorResponse}},
)
async def get_profile(profile: Profile) -> ProfileResponse:
    return ProfileResponse.from_profile(profile)


@router.put(
    "",
    response_model=ProfileResponse,
    status_code=status.HTTP_200_OK,
    responses={422: {"model": ErrorResponse}},
)
async def put_profile(state: State, payload: ProfileUpdate) -> ProfileResponse:
    """Complete onboarding, or replace the profile wholesale on edit."""
    builder = (
        ProfileBuilder()
        .with_company(payload.company_name, payload.sector)
        .with_financials(payload.annual_turnover, payload.employee_count)
    )

    registration_date = payload.registration_date
    if registration_date is None and state.profile is not None:
        registration_date = state.profile.registration_date

    profile = await state.replace_profile(builder.build(registration_date))
    return ProfileResponse.from_profile(profile)


@router.get("/sectors")
async def list_sectors() -> dict[str, list[str]]:
    return {"sectors": list(SECTORS)}
