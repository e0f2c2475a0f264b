"""Explicit application state handed to the API at call time."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from biztax.ai.client import TaxAdvisorClient
from biztax.calculators.types import BusinessProfile
from biztax.services.compliance_calendar import ComplianceCalendar
from biztax.services.document_vault import DocumentVault, sample_documents
from biztax.services.payroll_sheet import PayrollSheet
from biztax.services.profile_repository import ProfileRepository

logger = logging.getLogger(__name__)


@dataclass
class AppState:
    """Everything the dashboard works with for its single business."""

    repository: ProfileRepository
    advisor: TaxAdvisorClient
    profile: BusinessProfile | None = None
    calendar: ComplianceCalendar = field(default_factory=ComplianceCalendar)
    payroll: PayrollSheet = field(default_factory=PayrollSheet)
    documents: DocumentVault = field(default_factory=DocumentVault)

    @classmethod
    async def load(
        cls,
        repository: ProfileRepository,
        advisor: TaxAdvisorClient,
        seed_sample_documents: bool = False,
    ) -> AppState:
        """Read the stored profile once at startup."""
        profile = await repository.load()
        if profile is None:
            logger.info("No business profile stored yet; onboarding required")
        vault = DocumentVault(sample_documents() if seed_sample_documents else None)
        return cls(repository=repository, advisor=advisor, profile=profile, documents=vault)

    async def replace_profile(self, profile: BusinessProfile) -> BusinessProfile:
        """Persist a new profile and swap it in wholesale."""
        await self.repository.save(profile)
        self.profile = profile
        return profile
