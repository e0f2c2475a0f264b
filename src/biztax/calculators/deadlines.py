"""Statutory filing deadline generation.

Deadlines are derived from a business profile and a reference date on every
run; nothing is persisted and every generated entry starts as pending.
"""

from __future__ import annotations

import calendar
from datetime import date, datetime, timedelta
from decimal import Decimal

from dateutil.relativedelta import relativedelta

from biztax.calculators.classifier import VAT_THRESHOLD
from biztax.calculators.types import BusinessProfile, DeadlineType, TaxDeadline

VAT_FILING_DAY = 21
PAYE_REMITTANCE_DAY = 10
MONTHS_AHEAD = 3

# Fiscal year is assumed to end December 31; CIT is due six months later.
CIT_DUE_MONTH = 6
CIT_DUE_DAY = 30

VAT_DESCRIPTION = "File Form 002 via FIRS TaxPro Max."
PAYE_DESCRIPTION = "Remit employee tax deductions to State IRS."
CIT_NIL_DESCRIPTION = "File NIL returns (0% rate for small companies)."
CIT_DUE_DESCRIPTION = "File CIT returns (20% for medium companies)."


def roll_forward_weekend(day: date) -> date:
    """Move a Saturday or Sunday to the following Monday."""
    weekday = day.weekday()
    if weekday >= 5:
        return day + timedelta(days=7 - weekday)
    return day


class DeadlineScheduler:
    """Builds the upcoming VAT, PAYE and CIT obligations for a business."""

    def __init__(self, months_ahead: int = MONTHS_AHEAD):
        self.months_ahead = months_ahead

    def generate(self, profile: BusinessProfile, reference_date: date | None = None) -> list[TaxDeadline]:
        today = reference_date or date.today()
        if isinstance(today, datetime):
            today = today.date()
        deadlines: list[TaxDeadline] = []

        if profile.annual_turnover >= VAT_THRESHOLD:
            deadlines.extend(
                self._monthly(today, DeadlineType.VAT, VAT_FILING_DAY, "VAT Return", VAT_DESCRIPTION)
            )

        deadlines.extend(
            self._monthly(
                today, DeadlineType.PAYE, PAYE_REMITTANCE_DAY, "PAYE Remittance", PAYE_DESCRIPTION
            )
        )

        deadlines.append(self._cit(today, profile.annual_turnover))

        return sorted(deadlines, key=lambda d: d.due_date)

    def _monthly(
        self,
        today: date,
        deadline_type: DeadlineType,
        day_of_month: int,
        title: str,
        description: str,
    ) -> list[TaxDeadline]:
        """One entry per month in the window, labelled with the month it covers."""
        entries = []
        for i in range(self.months_ahead):
            due = roll_forward_weekend(today + relativedelta(months=i, day=day_of_month))

            # Filed in arrears: the return covers the previous month.
            covered_month = (today + relativedelta(months=i - 1)).month

            entries.append(
                TaxDeadline(
                    id=f"{deadline_type.value.lower()}-{i}",
                    title=f"{title} ({calendar.month_name[covered_month]})",
                    due_date=due,
                    type=deadline_type,
                    description=description,
                )
            )
        return entries

    def _cit(self, today: date, turnover: Decimal) -> TaxDeadline:
        due = date(today.year, CIT_DUE_MONTH, CIT_DUE_DAY)
        if due < today:
            due = date(today.year + 1, CIT_DUE_MONTH, CIT_DUE_DAY)

        # Compared against the VAT threshold, not the medium-company CIT band.
        description = CIT_NIL_DESCRIPTION if turnover < VAT_THRESHOLD else CIT_DUE_DESCRIPTION

        return TaxDeadline(
            id=f"cit-{today.year}",
            title="Companies Income Tax (CIT) Filing",
            due_date=due,
            type=DeadlineType.CIT,
            description=description,
        )


_default_scheduler = DeadlineScheduler()


def generate_deadlines(profile: BusinessProfile, reference_date: date | None = None) -> list[TaxDeadline]:
    """Generate the upcoming filing obligations, soonest first."""
    return _default_scheduler.generate(profile, reference_date)
