"""PAYE (Pay As You Earn) computation for Nigerian employment income.

Reliefs and bands follow the Finance Act 2020 schedule:

- Consolidated Relief Allowance: higher of NGN 200,000 or 1% of gross,
  plus 20% of gross
- First 300,000 @ 7%
- Next 300,000 @ 11%
- Next 500,000 @ 15%
- Next 500,000 @ 19%
- Next 1,600,000 @ 21%
- Above 3,200,000 @ 24%

No minimum-tax floor is applied; the bands are the only rule.
"""

from __future__ import annotations

from collections.abc import Sequence
from decimal import Decimal

from biztax.calculators.types import (
    BandCharge,
    Employee,
    InvalidInputError,
    PayeResult,
    TaxBand,
)

CRA_FIXED_AMOUNT = Decimal("200000")
CRA_GROSS_FLOOR_RATE = Decimal("0.01")
CRA_GROSS_RATE = Decimal("0.20")

NIGERIA_PAYE_BANDS: tuple[TaxBand, ...] = (
    TaxBand(Decimal("300000"), Decimal("0.07")),
    TaxBand(Decimal("300000"), Decimal("0.11")),
    TaxBand(Decimal("500000"), Decimal("0.15")),
    TaxBand(Decimal("500000"), Decimal("0.19")),
    TaxBand(Decimal("1600000"), Decimal("0.21")),
    TaxBand(None, Decimal("0.24")),
)

ZERO = Decimal("0")
MONTHS_PER_YEAR = 12


class PayeEngine:
    """Converts an annual gross salary into PAYE liability.

    Stateless apart from the band table, so one instance can be shared.
    """

    def __init__(self, bands: Sequence[TaxBand] = NIGERIA_PAYE_BANDS):
        if not bands:
            raise ValueError("at least one tax band is required")
        self.bands = tuple(bands)

    def calculate_cra(self, gross: Decimal) -> Decimal:
        """Higher of the flat amount or 1% of gross, plus 20% of gross."""
        return max(CRA_FIXED_AMOUNT, gross * CRA_GROSS_FLOOR_RATE) + gross * CRA_GROSS_RATE

    def calculate_tax(self, taxable_income: Decimal) -> tuple[Decimal, tuple[BandCharge, ...]]:
        """Apply the bands in order, each consuming up to its width."""
        total_tax = ZERO
        charges: list[BandCharge] = []
        remaining = taxable_income

        for band in self.bands:
            if remaining <= 0:
                break

            in_band = remaining if band.width is None else min(remaining, band.width)
            tax = in_band * band.rate
            charges.append(BandCharge(band=band, amount=in_band, tax=tax))
            total_tax += tax
            remaining -= in_band

        return total_tax, tuple(charges)

    def compute(self, employee: Employee) -> PayeResult:
        gross = employee.annual_gross_salary
        if gross < 0:
            raise InvalidInputError("annual_gross_salary", "must not be negative")

        cra = self.calculate_cra(gross)
        taxable = max(ZERO, gross - cra)
        annual_tax, charges = self.calculate_tax(taxable)

        # Zero gross has no meaningful rate; report 0 instead of dividing.
        effective_rate = annual_tax / gross * 100 if gross > 0 else ZERO

        return PayeResult(
            employee_id=employee.id,
            annual_gross=gross,
            cra=cra,
            taxable_income=taxable,
            annual_tax=annual_tax,
            monthly_tax=annual_tax / MONTHS_PER_YEAR,
            effective_rate=effective_rate,
            bands=charges,
        )


_default_engine = PayeEngine()


def compute_paye(employee: Employee) -> PayeResult:
    """Compute PAYE with the statutory band table."""
    return _default_engine.compute(employee)
