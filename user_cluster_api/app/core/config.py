"""
Simple configuration management.

The ``Settings`` dataclass reads configuration directly from
environment variables.  Defaults are provided for all fields so the
service starts with no configuration at all: a single shared port
(3000) and one worker process per CPU.
"""

import os
from dataclasses import dataclass


def _default_workers() -> str:
    return str(os.cpu_count() or 1)


@dataclass
class Settings:
    """Application settings loaded from environment variables."""

    project_name: str = os.getenv("PROJECT_NAME", "User Cluster API")
    api_version: str = os.getenv("API_VERSION", "1.0.0")
    debug: bool = os.getenv("DEBUG", "false").lower() in {"1", "true", "yes"}
    log_level: str = os.getenv("LOG_LEVEL", "INFO")

    # Optional path of a log file.  Empty means console only.
    log_file: str = os.getenv("LOG_FILE", "")

    # ``text`` for the human readable format, ``json`` for one
    # ``{"message": ..., "level": ...}`` object per line.
    log_format: str = os.getenv("LOG_FORMAT", "text")

    # Every worker process binds the same host and port.
    host: str = os.getenv("HOST", "0.0.0.0")
    port: int = int(os.getenv("PORT", "3000"))
    workers: int = int(os.getenv("WORKERS", _default_workers()))


# Instantiate settings once so other modules can import it without
# repeatedly reading environment variables.  Environment variables
# should be set before importing this module.
settings = Settings()
