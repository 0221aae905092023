"""
FastAPI application entry point.

Initializes FastAPI app, registers routers, adds middleware, and configures lifespan.

Dependencies: fastapi, acquirer_backend.api, acquirer_backend.observability, acquirer_backend.configs
System role: Application initialization and configuration
"""

from contextlib import asynccontextmanager
import logging
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from acquirer_backend.api.deps.dependencies import get_service_cache
from acquirer_backend.api.routers import api_router
from acquirer_backend.boundary.db.create_tables import create_all_tables
from acquirer_backend.configs import get_settings
from acquirer_backend.observability.logger import configure_logging
from acquirer_backend.observability.middleware import (
    CorrelationMiddleware,
    RequestLoggingMiddleware,
)

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan context manager.

    Configures logging and builds the shared document client once.
    Local SQLite databases get their schema created on startup.
    """
    settings = get_settings()
    configure_logging(settings.log_level)
    logger.info("Application startup: logging configured")

    try:
        if settings.database.is_sqlite:
            await create_all_tables()
            logger.info("SQLite schema created")

        # Build the boto3 client before the first upload request
        get_service_cache().document_client
        logger.info(
            "Application startup complete",
            extra={"environment": settings.environment},
        )
    except Exception as e:
        logger.exception(
            "Failed to initialize application resources",
            extra={"error": str(e)},
        )
        raise

    yield

    get_service_cache().clear()
    logger.info("Application shutdown")


def create_app() -> FastAPI:
    """
    Create and configure FastAPI application.

    Returns:
        FastAPI: Configured application instance
    """
    settings = get_settings()

    app = FastAPI(
        title="Merchant Acquirer Back Office API",
        description="Merchant onboarding with maker/checker review",
        version="0.1.0",
        debug=settings.debug,
        lifespan=lifespan,
    )

    # Add observability middleware (added first = last to execute)
    app.add_middleware(CorrelationMiddleware)
    app.add_middleware(RequestLoggingMiddleware)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_allow_origins,
        allow_credentials=False,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(api_router, prefix="/api/v1")

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "acquirer_backend.main:app",
        host="localhost",
        port=8082,
        reload=True,
    )
