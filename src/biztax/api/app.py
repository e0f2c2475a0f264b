"""FastAPI application factory."""

import logging
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from biztax.ai.client import TaxAdvisorClient
from biztax.api.routes import (
    assistant_router,
    documents_router,
    health_router,
    paye_router,
    profile_router,
    tax_router,
)
from biztax.calculators.types import InvalidInputError
from biztax.config import Settings, get_settings
from biztax.database import create_tables, dispose_db, init_db
from biztax.services.app_state import AppState
from biztax.services.profile_repository import SqlProfileRepository

logger = logging.getLogger(__name__)

HTTP_ERROR_CODES = {
    status.HTTP_404_NOT_FOUND: "NOT_FOUND",
    status.HTTP_502_BAD_GATEWAY: "AI_SERVICE_FAILED",
    status.HTTP_503_SERVICE_UNAVAILABLE: "UNAVAILABLE",
}


def create_app(settings: Settings | None = None, state: AppState | None = None) -> FastAPI:
    """Create and configure the FastAPI application.

    Passing a ready AppState skips database setup, which is how tests run
    against an in-memory repository.
    """
    settings = settings or get_settings()

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
        """Application lifespan handler."""
        owns_db = getattr(app.state, "biztax", None) is None
        if owns_db:
            engine, session_factory = init_db(settings.database_url)
            await create_tables(engine)
            app.state.biztax = await AppState.load(
                SqlProfileRepository(session_factory),
                TaxAdvisorClient.from_settings(settings),
                seed_sample_documents=settings.seed_sample_documents,
            )
            logger.info("BizTax API started (AI %s)", "enabled" if settings.ai_enabled else "disabled")
        yield
        if owns_db:
            await dispose_db()

    app = FastAPI(
        title="BizTax API",
        description="Tax compliance dashboard for Nigerian SMEs",
        version="0.1.0",
        lifespan=lifespan,
    )
    if state is not None:
        app.state.biztax = state

    # CORS middleware
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Exception handlers
    @app.exception_handler(InvalidInputError)
    async def invalid_input_handler(request: Request, exc: InvalidInputError) -> JSONResponse:
        return JSONResponse(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            content={"detail": str(exc), "code": "INVALID_INPUT", "field": exc.field_name},
        )

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
        return JSONResponse(
            status_code=exc.status_code,
            content={"detail": exc.detail, "code": HTTP_ERROR_CODES.get(exc.status_code, "HTTP_ERROR")},
        )

    @app.exception_handler(Exception)
    async def general_exception_handler(request: Request, exc: Exception) -> JSONResponse:
        """Handle unexpected exceptions."""
        logger.exception("Unhandled error on %s %s", request.method, request.url.path)
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={
                "detail": "An unexpected error occurred",
                "code": "INTERNAL_ERROR",
            },
        )

    # Include routers
    app.include_router(health_router)
    app.include_router(profile_router, prefix="/api/v1")
    app.include_router(tax_router, prefix="/api/v1")
    app.include_router(paye_router, prefix="/api/v1")
    app.include_router(documents_router, prefix="/api/v1")
    app.include_router(assistant_router, prefix="/api/v1")

    return app
