"""Compliance calendar: generated deadlines plus the user's filed marks."""

from __future__ import annotations

from dataclasses import replace
from datetime import date
from enum import Enum

from biztax.calculators.deadlines import DeadlineScheduler
from biztax.calculators.types import BusinessProfile, DeadlineStatus, TaxDeadline


class DisplayState(str, Enum):
    """How a deadline should be presented on a given day."""

    COMPLETED = "completed"
    OVERDUE = "overdue"
    DUE_TODAY = "due_today"
    UPCOMING = "upcoming"


def display_state(deadline: TaxDeadline, today: date) -> DisplayState:
    if deadline.status == DeadlineStatus.COMPLETED:
        return DisplayState.COMPLETED
    if deadline.due_date < today:
        return DisplayState.OVERDUE
    if deadline.due_date == today:
        return DisplayState.DUE_TODAY
    return DisplayState.UPCOMING


class ComplianceCalendar:
    """Regenerates deadlines on every read and overlays filed marks.

    Filed marks are kept by deadline id for the life of this object only;
    the scheduler itself never tracks completion.
    """

    def __init__(self, scheduler: DeadlineScheduler | None = None):
        self.scheduler = scheduler or DeadlineScheduler()
        self._filed: set[str] = set()

    def mark_filed(self, deadline_id: str) -> None:
        self._filed.add(deadline_id)

    def deadlines(self, profile: BusinessProfile, today: date | None = None) -> list[TaxDeadline]:
        generated = self.scheduler.generate(profile, today)
        return [
            replace(d, status=DeadlineStatus.COMPLETED) if d.id in self._filed else d
            for d in generated
        ]
