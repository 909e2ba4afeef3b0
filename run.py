"""Entry point for the Smart Home Hub server.

Starts the FastAPI application with Uvicorn on the host and port from
``home_hub_api.app.core.config.settings`` (``0.0.0.0:3000`` unless
``HOST``/``PORT`` are set).

Usage:
    python run.py
"""
import asyncio
import logging

from uvicorn import Config, Server

from home_hub_api.app.core.config import settings
from home_hub_api.app.core.logging_config import setup_logging
from home_hub_api.app.main import app

logger = logging.getLogger("home_hub_api.run")


def log_banner() -> None:
    """Log the URLs of the site pages and the health check."""
    base = f"http://localhost:{settings.port}"
    rule = "=" * 60
    logger.info(rule)
    logger.info("SMART HOME HUB SERVER STARTED")
    logger.info(rule)
    logger.info("Main App:     %s/", base)
    logger.info("Admin:        %s/admin", base)
    logger.info("User Mgmt:    %s/admin-users", base)
    logger.info("Health Check: %s/api/health", base)
    logger.info("Static root:  %s", settings.static_root)
    logger.info(rule)


async def main() -> None:
    """Serve the application until interrupted."""
    setup_logging(settings.log_level, settings.log_file or None)
    config = Config(
        app=app,
        host=settings.host,
        port=settings.port,
        reload=False,
        log_level=settings.log_level.lower(),
    )
    server = Server(config)
    log_banner()
    await server.serve()


if __name__ == "__main__":
    try:
        asyncio.run(main())
    except (KeyboardInterrupt, SystemExit):
        pass
