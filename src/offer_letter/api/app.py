"""FastAPI application factory."""

import logging

from fastapi import FastAPI, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from offer_letter.api.routes import compensation_router, health_router, offer_letters_router
from offer_letter.config import get_settings
from offer_letter.services.form_state import MissingFieldsError

logger = logging.getLogger(__name__)


def create_app() -> FastAPI:
    """Create and configure the FastAPI application."""
    app = FastAPI(
        title="Offer Letter API",
        description="Offer letter compensation breakdown and salary structure",
        version=get_settings().app_version,
    )

    # CORS middleware
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],  # The form runs in a browser on another origin
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Exception handlers
    @app.exception_handler(MissingFieldsError)
    async def missing_fields_handler(
        request: Request, exc: MissingFieldsError
    ) -> JSONResponse:
        """Report blank required fields."""
        return JSONResponse(
            status_code=422,
            content={
                "detail": str(exc),
                "code": "MISSING_FIELDS",
                "missing": exc.missing,
            },
        )

    @app.exception_handler(Exception)
    async def general_exception_handler(
        request: Request, exc: Exception
    ) -> JSONResponse:
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
    app.include_router(compensation_router, prefix="/api/v1")
    app.include_router(offer_letters_router, prefix="/api/v1")

    return app


# Default app instance for uvicorn
app = create_app()
