"""Entry point for the User REST API server.

Starts the FastAPI application under Uvicorn.  Host, port and log
level are taken from ``user_api.app.core.config.settings``, i.e. from
the ``HOST``, ``PORT`` and ``LOG_LEVEL`` environment variables
(defaults ``0.0.0.0``, ``3000`` and ``INFO``).

Usage:
    python run.py
"""
import asyncio
import logging

from uvicorn import Config, Server

from user_api.app.core.config import settings
from user_api.app.main import app

logger = logging.getLogger("user_api.run")


async def run_api() -> None:
    """Serve the API until the process is interrupted."""
    config = Config(
        app=app,
        host=settings.host,
        port=settings.port,
        reload=False,
        log_level=settings.log_level.lower(),
    )
    server = Server(config)
    logger.info("Server is running on port %s", settings.port)
    logger.info("Health check: http://localhost:%s/health", settings.port)
    logger.info("API endpoint: http://localhost:%s/api/users", settings.port)
    await server.serve()


if __name__ == "__main__":
    try:
        asyncio.run(run_api())
    except (KeyboardInterrupt, SystemExit):
        pass
