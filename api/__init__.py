"""
Streampass API package.

Provides the FastAPI application for the pay-per-view video storefront.
"""

from .app import app, create_app

__all__ = ["app", "create_app"]
