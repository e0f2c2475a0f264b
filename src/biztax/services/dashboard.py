"""Dashboard summary for a business profile."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date

from biztax.calculators.classifier import (
    TurnoverProgress,
    cit_threshold_approaching,
    classify_turnover,
    turnover_progress,
    vat_threshold_approaching,
)
from biztax.calculators.types import BusinessProfile, DeadlineStatus, TaxDeadline, TaxStatus
from biztax.services.compliance_calendar import ComplianceCalendar

VAT_APPROACHING_ALERT = (
    "You are approaching the NGN 25M VAT registration threshold. "
    "Prepare to start filing VAT monthly."
)
CIT_APPROACHING_ALERT = (
    "You are nearing the NGN 25M turnover mark. "
    "Your CIT status will change from 0% to 20% soon."
)

UPCOMING_LIMIT = 3


@dataclass(frozen=True)
class DashboardSummary:
    company_name: str
    tax_status: TaxStatus
    progress: TurnoverProgress
    alerts: tuple[str, ...]
    upcoming: tuple[TaxDeadline, ...]


def build_dashboard(
    profile: BusinessProfile,
    calendar: ComplianceCalendar,
    today: date | None = None,
    limit: int = UPCOMING_LIMIT,
) -> DashboardSummary:
    today = today or date.today()
    turnover = profile.annual_turnover

    alerts = []
    if vat_threshold_approaching(turnover):
        alerts.append(VAT_APPROACHING_ALERT)
    if cit_threshold_approaching(turnover):
        alerts.append(CIT_APPROACHING_ALERT)

    upcoming = [
        d
        for d in calendar.deadlines(profile, today)
        if d.status != DeadlineStatus.COMPLETED and d.due_date >= today
    ]

    return DashboardSummary(
        company_name=profile.company_name,
        tax_status=classify_turnover(turnover),
        progress=turnover_progress(turnover),
        alerts=tuple(alerts),
        upcoming=tuple(upcoming[:limit]),
    )
