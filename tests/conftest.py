"""Pytest fixtures for BizTax tests."""

from __future__ import annotations

from datetime import date
from decimal import Decimal
from types import SimpleNamespace
from typing import Any

import pytest

from biztax.ai.client import TaxAdvisorClient
from biztax.calculators.types import BusinessProfile


def make_profile(turnover: Any = "5000000", **overrides: Any) -> BusinessProfile:
    """Build a valid profile with sensible defaults."""
    fields: dict[str, Any] = {
        "company_name": "Lagos Ventures Ltd",
        "registration_date": date(2024, 3, 1),
        "annual_turnover": Decimal(str(turnover)),
        "sector": "General Trade",
        "employee_count": 5,
    }
    fields.update(overrides)
    return BusinessProfile(**fields)


class FakeCompletions:
    """Stands in for client.chat.completions of the openai SDK."""

    def __init__(self, content: str | None = None, error: Exception | None = None):
        self.content = content
        self.error = error
        self.calls: list[dict[str, Any]] = []

    async def create(self, **kwargs: Any) -> SimpleNamespace:
        self.calls.append(kwargs)
        if self.error is not None:
            raise self.error
        message = SimpleNamespace(content=self.content)
        return SimpleNamespace(choices=[SimpleNamespace(message=message)])


def make_advisor(content: str | None = None, error: Exception | None = None) -> TaxAdvisorClient:
    completions = FakeCompletions(content=content, error=error)
    client = SimpleNamespace(chat=SimpleNamespace(completions=completions))
    return TaxAdvisorClient(api_key=None, model="test-model", client=client)


@pytest.fixture
def small_profile() -> BusinessProfile:
    return make_profile("5000000")


@pytest.fixture
def vat_profile() -> BusinessProfile:
    return make_profile("30000000")


@pytest.fixture
def unconfigured_advisor() -> TaxAdvisorClient:
    return TaxAdvisorClient(api_key=None, model="test-model")
