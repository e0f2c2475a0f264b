"""Application services around the tax calculators."""

from biztax.services.app_state import AppState
from biztax.services.compliance_calendar import ComplianceCalendar, DisplayState, display_state
from biztax.services.dashboard import DashboardSummary, build_dashboard
from biztax.services.document_vault import DocumentRecord, DocumentVault
from biztax.services.onboarding import SECTORS, ProfileBuilder
from biztax.services.payroll_sheet import PayrollSheet
from biztax.services.profile_repository import (
    InMemoryProfileRepository,
    ProfileRepository,
    SqlProfileRepository,
)

__all__ = [
    "AppState",
    "ComplianceCalendar",
    "DashboardSummary",
    "DisplayState",
    "DocumentRecord",
    "DocumentVault",
    "InMemoryProfileRepository",
    "PayrollSheet",
    "ProfileBuilder",
    "ProfileRepository",
    "SECTORS",
    "SqlProfileRepository",
    "build_dashboard",
    "display_state",
]
