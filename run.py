"""Entry point for running the Product Catalog API.

Starts the FastAPI application with Uvicorn.  Host, port, API key and
log level are read from environment variables (or a ``.env`` file in
the working directory); see ``product_catalog_api/app/core/config.py``
for the supported variables and their defaults.

Usage:
    python run.py
"""
import asyncio
import logging

from uvicorn import Config, Server

from product_catalog_api.app.core.config import settings
from product_catalog_api.app.main import app


async def run_api() -> None:
    """Serve the API until interrupted."""
    config = Config(
        app=app,
        host=settings.host,
        port=settings.port,
        reload=False,
        log_level=settings.log_level.lower(),
    )
    server = Server(config)
    logging.getLogger(__name__).info("Product API listening on http://%s:%s", settings.host, settings.port)
    await server.serve()


if __name__ == "__main__":
    try:
        asyncio.run(run_api())
    except (KeyboardInterrupt, SystemExit):
        pass
