"""Entry point for the Company Directory API.

Starts the FastAPI application under Uvicorn.  It is intended to be
executed from the project root, for example under Docker, where you
only specify a single Python file to run.

Host, port, database location and log level are read from the
environment (``HOST``, ``PORT``, ``DATABASE_URL``, ``LOG_LEVEL``); see
``company_directory/app/core/config.py`` for the full list.

Usage:
    python run.py
"""
import asyncio
import logging

from uvicorn import Config, Server

from company_directory.app.core.config import settings
from company_directory.app.main import app


async def run_api() -> None:
    """Serve the API until interrupted."""
    config = Config(app=app, host=settings.host, port=settings.port, reload=False,
                    log_level=settings.log_level.lower())
    server = Server(config)
    logging.getLogger(__name__).info(
        "Serving %s at http://%s:%s/api/v1/companies", settings.project_name, settings.host, settings.port
    )
    await server.serve()


if __name__ == "__main__":
    try:
        asyncio.run(run_api())
    except (KeyboardInterrupt, SystemExit):
        pass
