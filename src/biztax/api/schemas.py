"""Pydantic schemas for API request/response models."""

from __future__ import annotations

from datetime import date, datetime
from decimal import ROUND_HALF_UP, Decimal

from pydantic import BaseModel, Field

from biztax.calculators.types import BusinessProfile, PayeResult, TaxDeadline, TaxStatus
from biztax.services.compliance_calendar import display_state as deadline_display_state
from biztax.services.dashboard import DashboardSummary
from biztax.services.document_vault import DocumentRecord

CENTS = Decimal("0.01")


def money(amount: Decimal) -> Decimal:
    """Round for display; the calculators keep full precision."""
    return amount.quantize(CENTS, rounding=ROUND_HALF_UP)


# ============================================================================
# Errors
# ============================================================================


class ErrorResponse(BaseModel):
    """Error body returned by every failing endpoint."""

    detail: str
    code: str
    field: str | None = None


# ============================================================================
# Profile schemas
# ============================================================================


class ProfileUpdate(BaseModel):
    """Onboarding or profile edit form."""

    company_name: str
    sector: str | None = None
    annual_turnover: Decimal
    employee_count: int
    registration_date: date | None = None


class ProfileResponse(BaseModel):
    company_name: str
    registration_date: date
    annual_turnover: Decimal
    sector: str
    employee_count: int

    @classmethod
    def from_profile(cls, profile: BusinessProfile) -> ProfileResponse:
        return cls(
            company_name=profile.company_name,
            registration_date=profile.registration_date,
            annual_turnover=profile.annual_turnover,
            sector=profile.sector,
            employee_count=profile.employee_count,
        )


# ============================================================================
# Tax status / dashboard schemas
# ============================================================================


class TaxStatusResponse(BaseModel):
    tier: str
    label: str
    cit_rate: Decimal
    rate_label: str

    @classmethod
    def from_status(cls, status: TaxStatus) -> TaxStatusResponse:
        return cls(
            tier=status.tier.value,
            label=status.label,
            cit_rate=status.cit_rate,
            rate_label=status.rate_label,
        )


class DeadlineResponse(BaseModel):
    id: str
    title: str
    due_date: date
    type: str
    status: str
    amount: Decimal | None = None
    description: str
    display_state: str

    @classmethod
    def from_deadline(cls, deadline: TaxDeadline, today: date) -> DeadlineResponse:
        return cls(
            id=deadline.id,
            title=deadline.title,
            due_date=deadline.due_date,
            type=deadline.type.value,
            status=deadline.status.value,
            amount=deadline.amount,
            description=deadline.description,
            display_state=deadline_display_state(deadline, today).value,
        )


class DeadlineListResponse(BaseModel):
    reference_date: date
    items: list[DeadlineResponse]
    total: int


class DashboardResponse(BaseModel):
    company_name: str
    tax_status: TaxStatusResponse
    turnover_progress_percent: Decimal
    remaining_to_next_tier: Decimal
    alerts: list[str]
    upcoming: list[DeadlineResponse]

    @classmethod
    def from_summary(cls, summary: DashboardSummary, today: date) -> DashboardResponse:
        return cls(
            company_name=summary.company_name,
            tax_status=TaxStatusResponse.from_status(summary.tax_status),
            turnover_progress_percent=money(summary.progress.percent),
            remaining_to_next_tier=summary.progress.remaining_to_next_tier,
            alerts=list(summary.alerts),
            upcoming=[DeadlineResponse.from_deadline(d, today) for d in summary.upcoming],
        )


# ============================================================================
# PAYE schemas
# ============================================================================


class PayeRequest(BaseModel):
    annual_gross_salary: Decimal
    name: str | None = None
    employee_id: str | None = None


class BandChargeResponse(BaseModel):
    rate: Decimal
    amount: Decimal
    tax: Decimal


class PayeResponse(BaseModel):
    employee_id: str
    name: str | None = None
    annual_gross: Decimal
    cra: Decimal
    taxable_income: Decimal
    annual_tax: Decimal
    monthly_tax: Decimal
    effective_rate: Decimal
    bands: list[BandChargeResponse] = Field(default_factory=list)

    @classmethod
    def from_result(cls, result: PayeResult, name: str | None = None) -> PayeResponse:
        return cls(
            employee_id=result.employee_id,
            name=name,
            annual_gross=money(result.annual_gross),
            cra=money(result.cra),
            taxable_income=money(result.taxable_income),
            annual_tax=money(result.annual_tax),
            monthly_tax=money(result.monthly_tax),
            effective_rate=money(result.effective_rate),
            bands=[
                BandChargeResponse(rate=c.band.rate, amount=money(c.amount), tax=money(c.tax))
                for c in result.bands
            ],
        )


class PayrollResponse(BaseModel):
    items: list[PayeResponse]
    total: int
    total_monthly_remittance: Decimal
    total_annual_tax: Decimal


# ============================================================================
# Document schemas
# ============================================================================


class DocumentAnalyzeRequest(BaseModel):
    text: str = Field(min_length=1)


class DocumentResponse(BaseModel):
    id: str
    name: str
    type: str
    upload_date: datetime
    summary: str | None = None
    category: str | None = None
    has_content: bool

    @classmethod
    def from_record(cls, record: DocumentRecord) -> DocumentResponse:
        return cls(
            id=record.id,
            name=record.name,
            type=record.type,
            upload_date=record.upload_date,
            summary=record.summary,
            category=record.category,
            has_content=record.content is not None,
        )


class DocumentDetailResponse(DocumentResponse):
    content: str | None = None

    @classmethod
    def from_record(cls, record: DocumentRecord) -> DocumentDetailResponse:
        return cls(
            **DocumentResponse.from_record(record).model_dump(),
            content=record.content,
        )


class DocumentListResponse(BaseModel):
    items: list[DocumentResponse]
    total: int


# ============================================================================
# Assistant schemas
# ============================================================================


class AskRequest(BaseModel):
    question: str = Field(min_length=1)
    context: str | None = None


class AskResponse(BaseModel):
    answer: str
    fallback: bool = False
