"""
Simple configuration management.

The ``Settings`` dataclass reads configuration directly from
environment variables.  Defaults are provided for all fields and
give the service's standard behaviour: listen on port 8000
on all interfaces, serve the routes at the root and start with the two
demo movies loaded.
"""

import os
from dataclasses import dataclass
from typing import Optional


def _env_flag(name: str, default: str) -> bool:
    return os.getenv(name, default).lower() in {"1", "true", "yes"}


@dataclass
class Settings:
    """Application settings loaded from environment variables."""

    project_name: str = os.getenv("PROJECT_NAME", "Movies CRUD API")
    api_version: str = os.getenv("API_VERSION", "1.0.0")
    log_level: str = os.getenv("LOG_LEVEL", "INFO")
    # Optional path of a log file in addition to console output.
    log_file: Optional[str] = os.getenv("LOG_FILE") or None

    host: str = os.getenv("HOST", "0.0.0.0")
    port: int = int(os.getenv("PORT", "8000"))

    # Prefix under which the v1 router is mounted.  Empty means the
    # movie routes live at the application root (``/movies``).
    api_prefix: str = os.getenv("API_PREFIX", "")

    # Load the two demo movies when an application instance is created.
    seed_demo_data: bool = _env_flag("SEED_DEMO_DATA", "true")


# Instantiate settings once so other modules can import it without
# repeatedly reading environment variables.  Environment variables
# must be set before importing this module.
settings = Settings()
