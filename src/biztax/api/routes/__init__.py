"""API routes."""

from biztax.api.routes.assistant import router as assistant_router
from biztax.api.routes.documents import router as documents_router
from biztax.api.routes.health import router as health_router
from biztax.api.routes.paye import router as paye_router
from biztax.api.routes.profile import router as profile_router
from biztax.api.routes.tax import router as tax_router

__all__ = [
    "assistant_router",
    "documents_router",
    "health_router",
    "paye_router",
    "profile_router",
    "tax_router",
]
