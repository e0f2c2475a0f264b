"""Tax assistant endpoint."""

from fastapi import APIRouter

from biztax.ai.client import ASSISTANT_FALLBACK_MESSAGE
from biztax.api.dependencies import State
from biztax.api.schemas import AskRequest, AskResponse
from biztax.calculators.classifier import classify_turnover
from biztax.calculators.types import BusinessProfile

router = APIRouter(prefix="/assistant", tags=["assistant"])


def profile_context(profile: BusinessProfile) -> str:
    status = classify_turnover(profile.annual_turnover)
    return (
        f"{profile.company_name} ({profile.sector}), annual turnover NGN "
        f"{profile.annual_turnover:,}, {profile.employee_count} employees, "
        f"{status.label} ({status.rate_label})"
    )


@router.post("/ask", response_model=AskResponse)
async def ask_assistant(state: State, payload: AskRequest) -> AskResponse:
    """Answer a tax question; falls back to a fixed message on failure."""
    context = payload.context
    if context is None and state.profile is not None:
        context = profile_context(state.profile)

    result = await state.advisor.ask(payload.question, context)
    if result.error is not None:
        return AskResponse(answer=ASSISTANT_FALLBACK_MESSAGE, fallback=True)
    return AskResponse(answer=result.value)
