"""
Main entrypoint for the Product Catalog API.

This module assembles the FastAPI application: logging, the product
store, error handlers, the middleware chain and the routers.  The
``create_app`` function builds and configures the app, which is then
instantiated at module import time as ``app``, e.g.::

    uvicorn product_catalog_api.app.main:app --reload

Tests and embedders call ``create_app`` with their own ``Settings`` so
that each application owns a fresh, independent product store.
"""

from typing import Optional

from fastapi import FastAPI

from .api.endpoints import root
from .api.router import router as api_router
from .core.config import Settings, settings
from .core.errors import register_exception_handlers
from .core.logging_config import setup_logging
from .core.middleware import install_middleware
from .services.product_service import SAMPLE_PRODUCTS, ProductService


def create_app(app_settings: Optional[Settings] = None) -> FastAPI:
    """Create and configure a FastAPI application.

    Parameters
    ----------
    app_settings : Optional[Settings]
        Settings to use instead of the module‑level ``settings``
        read from the environment.

    Returns
    -------
    FastAPI
        A configured FastAPI application instance.
    """
    app_settings = app_settings or settings
    # Initialise logging before anything else so that the setup below
    # can safely log messages.
    setup_logging(app_settings.log_level, app_settings.log_file)

    app = FastAPI(
        title=app_settings.project_name,
        version=app_settings.api_version,
        debug=app_settings.debug,
    )
    app.state.settings = app_settings
    app.state.product_service = ProductService(
        SAMPLE_PRODUCTS if app_settings.seed_sample_data else ()
    )

    register_exception_handlers(app)
    install_middleware(app)

    app.include_router(root.router)
    app.include_router(api_router, prefix="/api")
    return app


# Create the application instance at import time so that tools such as
# uvicorn can discover it without calling create_app manually.
app = create_app()
