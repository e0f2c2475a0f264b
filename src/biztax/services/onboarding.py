"""Two-step onboarding that yields a validated business profile."""

from __future__ import annotations

from datetime import date
from decimal import Decimal
from typing import Any

from biztax.calculators.types import BusinessProfile, InvalidInputError, to_decimal

DEFAULT_SECTOR = "General Trade"

SECTORS = (
    "General Trade",
    "Technology / Startup",
    "Manufacturing",
    "Professional Services",
    "Agriculture",
)


class ProfileBuilder:
    """Accumulates onboarding fields across steps.

    Step 1 collects the company name and sector, step 2 the financial
    details. Nothing is exposed as a profile until build() succeeds.
    """

    def __init__(self) -> None:
        self._company_name: str | None = None
        self._sector: str = DEFAULT_SECTOR
        self._annual_turnover: Decimal | None = None
        self._employee_count: int | None = None

    @classmethod
    def from_profile(cls, profile: BusinessProfile) -> ProfileBuilder:
        """Start an edit from an existing profile."""
        builder = cls()
        builder.with_company(profile.company_name, profile.sector)
        builder.with_financials(profile.annual_turnover, profile.employee_count)
        return builder

    @property
    def step(self) -> int:
        """Current onboarding step (1 or 2)."""
        return 1 if self._company_name is None else 2

    @property
    def is_complete(self) -> bool:
        return (
            self._company_name is not None
            and self._annual_turnover is not None
            and self._employee_count is not None
        )

    def with_company(self, company_name: str, sector: str | None = None) -> ProfileBuilder:
        name = (company_name or "").strip()
        if not name:
            raise InvalidInputError("company_name", "must not be empty")
        self._company_name = name
        if sector:
            self._sector = sector.strip()
        return self

    def with_financials(self, annual_turnover: Any, employee_count: Any) -> ProfileBuilder:
        turnover = to_decimal(annual_turnover, "annual_turnover")
        if turnover < 0:
            raise InvalidInputError("annual_turnover", "must not be negative")
        try:
            count = int(employee_count)
        except (TypeError, ValueError):
            raise InvalidInputError("employee_count", "must be a whole number") from None
        if count < 0:
            raise InvalidInputError("employee_count", "must not be negative")
        self._annual_turnover = turnover
        self._employee_count = count
        return self

    def build(self, registration_date: date | None = None) -> BusinessProfile:
        if self._company_name is None:
            raise InvalidInputError("company_name", "is required")
        if self._annual_turnover is None:
            raise InvalidInputError("annual_turnover", "is required")
        if self._employee_count is None:
            raise InvalidInputError("employee_count", "is required")

        return BusinessProfile(
            company_name=self._company_name,
            registration_date=registration_date or date.today(),
            annual_turnover=self._annual_turnover,
            sector=self._sector,
            employee_count=self._employee_count,
        )
