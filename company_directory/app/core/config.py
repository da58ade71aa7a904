"""
Simple configuration management.

The ``Settings`` dataclass reads configuration directly from
environment variables.  Defaults are provided for all fields so the
API can be started locally without any setup.  In a production
deployment you should override these via environment variables.
"""

import os
from dataclasses import dataclass


@dataclass
class Settings:
    """Application settings loaded from environment variables."""

    project_name: str = os.getenv("PROJECT_NAME", "Company Directory API")
    api_version: str = os.getenv("API_VERSION", "1.0.0")
    debug: bool = os.getenv("DEBUG", "false").lower() in {"1", "true", "yes"}
    log_level: str = os.getenv("LOG_LEVEL", "INFO")
    log_file: str = os.getenv("LOG_FILE", "")

    host: str = os.getenv("HOST", "0.0.0.0")
    port: int = int(os.getenv("PORT", "3002"))

    # Comma‑separated list of origins allowed by CORS.  ``*`` allows
    # any origin, which is what the single page frontend expects during
    # development.
    cors_origins: str = os.getenv("CORS_ORIGINS", "*")

    # Delay applied before every CRUD handler, in milliseconds.  Useful
    # to exercise loading states in a frontend against a local server.
    artificial_delay_ms: int = int(os.getenv("ARTIFICIAL_DELAY_MS", "0"))

    # Number of records shown per page by clients.
    page_size: int = int(os.getenv("PAGE_SIZE", "8"))

    # Path to the SQLite database file.  If a relative path is
    # provided, it will be resolved relative to the project root by the
    # ``db`` module.
    database_url: str = os.getenv("DATABASE_URL", "company_directory.db")

    @property
    def cors_origin_list(self) -> list[str]:
        return [origin.strip() for origin in self.cors_origins.split(",") if origin.strip()]


# Instantiate settings once so other modules can import it without
# repeatedly reading environment variables.  Environment variables
# should be set before importing this module.
settings = Settings()
