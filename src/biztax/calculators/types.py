"""Type definitions for the tax calculators."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from decimal import Decimal, InvalidOperation
from enum import Enum
from typing import Any
from uuid import uuid4


class InvalidInputError(ValueError):
    """Raised when calculator input violates a domain constraint."""

    def __init__(self, field_name: str, message: str):
        self.field_name = field_name
        super().__init__(f"{field_name}: {message}")


def to_decimal(value: Any, field_name: str) -> Decimal:
    """Coerce a money amount to Decimal without going through float."""
    if isinstance(value, Decimal):
        amount = value
    elif isinstance(value, bool):
        raise InvalidInputError(field_name, "must be a number")
    else:
        try:
            amount = Decimal(str(value))
        except (InvalidOperation, ValueError):
            raise InvalidInputError(field_name, f"invalid amount {value!r}") from None
    if not amount.is_finite():
        raise InvalidInputError(field_name, "must be a finite amount")
    return amount


def _require_non_negative(amount: Decimal, field_name: str) -> None:
    if amount < 0:
        raise InvalidInputError(field_name, "must not be negative")


class DeadlineType(str, Enum):
    """Statutory obligation types."""

    VAT = "VAT"
    CIT = "CIT"
    PAYE = "PAYE"
    WHT = "WHT"
    OTHER = "Other"


class DeadlineStatus(str, Enum):
    """Filing status of a deadline."""

    PENDING = "pending"
    COMPLETED = "completed"
    OVERDUE = "overdue"


class BusinessTier(str, Enum):
    """Business size tier by annual turnover."""

    SMALL = "small"
    MEDIUM = "medium"
    LARGE = "large"


@dataclass(frozen=True)
class BusinessProfile:
    """Snapshot of one business, replaced wholesale on edit."""

    company_name: str
    registration_date: date
    annual_turnover: Decimal
    sector: str
    employee_count: int

    def __post_init__(self) -> None:
        if not isinstance(self.company_name, str) or not self.company_name.strip():
            raise InvalidInputError("company_name", "must not be empty")
        if not isinstance(self.registration_date, date):
            raise InvalidInputError("registration_date", "must be a date")
        turnover = to_decimal(self.annual_turnover, "annual_turnover")
        _require_non_negative(turnover, "annual_turnover")
        object.__setattr__(self, "annual_turnover", turnover)
        if isinstance(self.employee_count, bool) or not isinstance(self.employee_count, int):
            raise InvalidInputError("employee_count", "must be a whole number")
        if self.employee_count < 0:
            raise InvalidInputError("employee_count", "must not be negative")

    def to_dict(self) -> dict[str, Any]:
        """Return a JSON-safe dict."""
        return {
            "company_name": self.company_name,
            "registration_date": self.registration_date.isoformat(),
            "annual_turnover": str(self.annual_turnover),
            "sector": self.sector,
            "employee_count": self.employee_count,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> BusinessProfile:
        if not isinstance(data, dict):
            raise InvalidInputError("profile", f"expected an object, got {type(data).__name__}")
        try:
            raw_date = str(data["registration_date"])[:10]
            try:
                registration_date = date.fromisoformat(raw_date)
            except ValueError:
                raise InvalidInputError("registration_date", f"invalid date {raw_date!r}") from None
            try:
                employee_count = int(data.get("employee_count", 0))
            except (TypeError, ValueError, OverflowError):
                raise InvalidInputError("employee_count", "must be a whole number") from None
            return cls(
                company_name=data["company_name"],
                registration_date=registration_date,
                annual_turnover=data["annual_turnover"],
                sector=str(data.get("sector") or ""),
                employee_count=employee_count,
            )
        except KeyError as e:
            raise InvalidInputError(str(e.args[0]), "is required") from None


@dataclass(frozen=True)
class Employee:
    """Transient PAYE calculation input."""

    name: str
    annual_gross_salary: Decimal
    id: str = field(default_factory=lambda: uuid4().hex)

    def __post_init__(self) -> None:
        gross = to_decimal(self.annual_gross_salary, "annual_gross_salary")
        _require_non_negative(gross, "annual_gross_salary")
        object.__setattr__(self, "annual_gross_salary", gross)


@dataclass(frozen=True)
class TaxBand:
    """One marginal PAYE band.

    width of None means the band takes whatever taxable income is left.
    """

    width: Decimal | None
    rate: Decimal  # As decimal, e.g., 0.07 for 7%


@dataclass(frozen=True)
class BandCharge:
    """Amount of taxable income consumed by a band and the tax it produced."""

    band: TaxBand
    amount: Decimal
    tax: Decimal


@dataclass(frozen=True)
class PayeResult:
    """PAYE liability for one employee."""

    employee_id: str
    annual_gross: Decimal
    cra: Decimal  # Consolidated Relief Allowance
    taxable_income: Decimal
    annual_tax: Decimal
    monthly_tax: Decimal
    effective_rate: Decimal  # Percentage
    bands: tuple[BandCharge, ...] = ()


@dataclass(frozen=True)
class TaxDeadline:
    """A statutory filing obligation."""

    id: str
    title: str
    due_date: date
    type: DeadlineType
    description: str
    status: DeadlineStatus = DeadlineStatus.PENDING
    amount: Decimal | None = None


@dataclass(frozen=True)
class TaxStatus:
    """Turnover tier with its CIT rate."""

    tier: BusinessTier
    label: str
    cit_rate: Decimal  # Percentage

    @property
    def rate_label(self) -> str:
        return f"{self.cit_rate:f}% CIT"
