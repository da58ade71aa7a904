"""
Main entrypoint for the Company Directory API.

This module assembles the FastAPI application, sets up logging and
includes versioned routers.  The ``create_app`` function builds and
configures the app, which is then instantiated at module import time
as ``app``, e.g.::

    uvicorn company_directory.app.main:app --reload

The application title and version are provided via ``Settings`` from
``core.config``.
"""

from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from .core.config import settings
from .core.logging_config import setup_logging
from .api.v1.router import router as v1_router
from .core.db import init_db


@asynccontextmanager
async def lifespan(app: FastAPI):
    # Creates the database file on first start and applies migrations.
    init_db()
    yield


def create_app() -> FastAPI:
    """Create and configure a FastAPI application.

    Configures logging and CORS, and mounts the versioned routers.

    Returns
    -------
    FastAPI
        A configured FastAPI application instance.
    """
    setup_logging(settings.log_level, settings.log_file or None)

    app = FastAPI(
        title=settings.project_name,
        version=settings.api_version,
        debug=settings.debug,
        lifespan=lifespan,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origin_list,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(v1_router, prefix="/api/v1")
    # Older frontends call /api/companies directly.  Both prefixes
    # expose identical endpoints; only the versioned one is documented.
    app.include_router(v1_router, prefix="/api", include_in_schema=False)

    @app.get("/", tags=["health"])
    async def health() -> dict:
        return {"message": f"{settings.project_name} is running"}

    return app


app = create_app()
