"""
FastAPI application factory.

Creates and configures the FastAPI application instance.
"""

import logging
from contextlib import asynccontextmanager
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from shared.config import get_settings
from .errors import register_error_handlers
from .routes import client_config, health, users
from modules.access.routes import router as access_router
from modules.catalog.routes import router as catalog_router
from modules.payments.routes import router as payments_router
from modules.purchases.routes import router as purchases_router

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan handler.

    Runs startup and shutdown logic.
    """
    # Startup
    settings = get_settings()
    logger.info(f"Starting {settings.app_name} on {settings.host}:{settings.port}")
    if not settings.paystack_secret_key:
        logger.warning("PAYSTACK_SECRET_KEY is not set; payment verification will fail")
    if not settings.supabase_jwt_secret:
        logger.warning("SUPABASE_JWT_SECRET is not set; authenticated routes will fail")
    yield
    # Shutdown
    logger.info(f"Shutting down {settings.app_name}")


def create_app() -> FastAPI:
    """
    Create and configure the FastAPI application.

    Returns:
        Configured FastAPI instance
    """
    settings = get_settings()

    app = FastAPI(
        title=settings.app_name,
        description="Pay-per-view video storefront API",
        version=settings.app_version,
        lifespan=lifespan,
        docs_url="/api/docs" if settings.debug else None,
        redoc_url="/api/redoc" if settings.debug else None,
    )

    # Configure CORS
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=settings.cors_allow_credentials,
        allow_methods=settings.cors_allow_methods,
        allow_headers=settings.cors_allow_headers,
    )

    register_error_handlers(app)

    # Register routes
    app.include_router(client_config.router, tags=["config"])
    app.include_router(health.router, prefix="/api", tags=["health"])
    app.include_router(payments_router, prefix="/api", tags=["payments"])
    app.include_router(purchases_router, prefix="/api/purchases", tags=["purchases"])
    app.include_router(catalog_router, prefix="/api/videos", tags=["videos"])
    app.include_router(access_router, prefix="/api/access", tags=["access"])
    app.include_router(users.router, prefix="/api/users", tags=["users"])

    return app


# Application instance for uvicorn
app = create_app()
