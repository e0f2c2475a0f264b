"""Business tier classification by annual turnover.

Tiers (lower bound inclusive, upper bound exclusive):
- below NGN 25M: Small Business, 0% CIT
- NGN 25M up to 100M: Medium Business, 20% CIT
- NGN 100M and above: Large Business, 30% CIT
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from typing import Any

from biztax.calculators.types import BusinessTier, InvalidInputError, TaxStatus, to_decimal

VAT_THRESHOLD = Decimal("25000000")
CIT_MEDIUM_THRESHOLD = Decimal("100000000")

# Dashboard warning bands
VAT_WARNING_RATIO = Decimal("0.9")
CIT_WARNING_FLOOR = Decimal("20000000")

SMALL_BUSINESS = TaxStatus(BusinessTier.SMALL, "Small Business", Decimal("0"))
MEDIUM_BUSINESS = TaxStatus(BusinessTier.MEDIUM, "Medium Business", Decimal("20"))
LARGE_BUSINESS = TaxStatus(BusinessTier.LARGE, "Large Business", Decimal("30"))


def _turnover(value: Any) -> Decimal:
    turnover = to_decimal(value, "annual_turnover")
    if turnover < 0:
        raise InvalidInputError("annual_turnover", "must not be negative")
    return turnover


def classify_turnover(turnover: Any) -> TaxStatus:
    """Return the tier and CIT rate for a turnover value."""
    amount = _turnover(turnover)
    if amount < VAT_THRESHOLD:
        return SMALL_BUSINESS
    if amount < CIT_MEDIUM_THRESHOLD:
        return MEDIUM_BUSINESS
    return LARGE_BUSINESS


def vat_threshold_approaching(turnover: Any) -> bool:
    """True within the last 10% below the VAT registration threshold."""
    amount = _turnover(turnover)
    return VAT_THRESHOLD * VAT_WARNING_RATIO <= amount < VAT_THRESHOLD


def cit_threshold_approaching(turnover: Any) -> bool:
    """True when the 0% CIT band is about to end."""
    amount = _turnover(turnover)
    return CIT_WARNING_FLOOR <= amount < VAT_THRESHOLD


@dataclass(frozen=True)
class TurnoverProgress:
    """Position of a turnover value against the 100M tier ceiling."""

    percent: Decimal
    remaining_to_next_tier: Decimal


def turnover_progress(turnover: Any) -> TurnoverProgress:
    amount = _turnover(turnover)
    return TurnoverProgress(
        percent=min(amount / CIT_MEDIUM_THRESHOLD * 100, Decimal("100")),
        remaining_to_next_tier=max(Decimal("0"), CIT_MEDIUM_THRESHOLD - amount),
    )
