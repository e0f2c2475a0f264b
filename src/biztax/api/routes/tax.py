"""Tax status, dashboard and deadline endpoints."""

from datetime import date
from decimal import Decimal
from typing import Annotated

from fastapi import APIRouter, HTTPException, Query, status

from biztax.api.dependencies import Profile, State
from biztax.api.schemas import (
    DashboardResponse,
    DeadlineListResponse,
    DeadlineResponse,
    ErrorResponse,
    TaxStatusResponse,
)
from biztax.calculators.classifier import classify_turnover
from biztax.services.dashboard import build_dashboard

router = APIRouter(tags=["tax"])


@router.get(
    "/tax-status",
    response_model=TaxStatusResponse,
    responses={422: {"model": ErrorResponse}},
)
async def get_tax_status(turnover: Annotated[Decimal, Query()]) -> TaxStatusResponse:
    """Classify a turnover value into its business tier."""
    return TaxStatusResponse.from_status(classify_turnover(turnover))


@router.get(
    "/dashboard",
    response_model=DashboardResponse,
    responses={404: {"model": ErrorResponse}},
)
async def get_dashboard(
    state: State,
    profile: Profile,
    reference_date: Annotated[date | None, Query()] = None,
) -> DashboardResponse:
    today = reference_date or date.today()
    summary = build_dashboard(profile, state.calendar, today)
    return DashboardResponse.from_summary(summary, today)


@router.get(
    "/deadlines",
    response_model=DeadlineListResponse,
    responses={404: {"model": ErrorResponse}},
)
async def list_deadlines(
    state: State,
    profile: Profile,
    reference_date: Annotated[date | None, Query()] = None,
) -> DeadlineListResponse:
    """Upcoming VAT, PAYE and CIT obligations, soonest first."""
    today = reference_date or date.today()
    deadlines = state.calendar.deadlines(profile, today)
    return DeadlineListResponse(
        reference_date=today,
        items=[DeadlineResponse.from_deadline(d, today) for d in deadlines],
        total=len(deadlines),
    )


@router.post(
    "/deadlines/{deadline_id}/filed",
    response_model=DeadlineListResponse,
    responses={404: {"model": ErrorResponse}},
)
async def mark_deadline_filed(
    state: State,
    profile: Profile,
    deadline_id: str,
    reference_date: Annotated[date | None, Query()] = None,
) -> DeadlineListResponse:
    today = reference_date or date.today()
    if not any(d.id == deadline_id for d in state.calendar.deadlines(profile, today)):
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Deadline {deadline_id} not found",
        )

    state.calendar.mark_filed(deadline_id)
    deadlines = state.calendar.deadlines(profile, today)
    return DeadlineListResponse(
        reference_date=today,
        items=[DeadlineResponse.from_deadline(d, today) for d in deadlines],
        total=len(deadlines),
    )
