"""Tax calculation core: PAYE, filing deadlines and turnover tiers."""

from biztax.calculators.classifier import (
    CIT_MEDIUM_THRESHOLD,
    VAT_THRESHOLD,
    classify_turnover,
    cit_threshold_approaching,
    turnover_progress,
    vat_threshold_approaching,
)
from biztax.calculators.deadlines import DeadlineScheduler, generate_deadlines, roll_forward_weekend
from biztax.calculators.paye import NIGERIA_PAYE_BANDS, PayeEngine, compute_paye
from biztax.calculators.types import (
    BusinessProfile,
    BusinessTier,
    DeadlineStatus,
    DeadlineType,
    Employee,
    InvalidInputError,
    PayeResult,
    TaxDeadline,
    TaxStatus,
)

__all__ = [
    "BusinessProfile",
    "BusinessTier",
    "CIT_MEDIUM_THRESHOLD",
    "DeadlineScheduler",
    "DeadlineStatus",
    "DeadlineType",
    "Employee",
    "InvalidInputError",
    "NIGERIA_PAYE_BANDS",
    "PayeEngine",
    "PayeResult",
    "TaxDeadline",
    "TaxStatus",
    "VAT_THRESHOLD",
    "cit_threshold_approaching",
    "classify_turnover",
    "compute_paye",
    "generate_deadlines",
    "roll_forward_weekend",
    "turnover_progress",
    "vat_threshold_approaching",
]
