"""AI text service: tax Q&A and document analysis.

The AI layer is advisory only. It never feeds the tax calculators and its
failures are returned as values for the caller to handle.
"""

from biztax.ai.base import AiError, AiErrorKind, AiResult, DocumentAnalysis
from biztax.ai.client import ASSISTANT_FALLBACK_MESSAGE, TaxAdvisorClient

__all__ = [
    "ASSISTANT_FALLBACK_MESSAGE",
    "AiError",
    "AiErrorKind",
    "AiResult",
    "DocumentAnalysis",
    "TaxAdvisorClient",
]
