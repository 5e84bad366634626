"""
Simple configuration management.

The ``Settings`` dataclass reads configuration directly from
environment variables.  Defaults are provided for all fields so the
server starts with an empty in‑memory dataset on ``localhost:4000``
when nothing is configured.
"""

import os
from dataclasses import dataclass
from typing import Optional


@dataclass
class Settings:
    """Application settings loaded from environment variables."""

    project_name: str = os.getenv("PROJECT_NAME", "Event Board API")
    api_version: str = os.getenv("API_VERSION", "1.0.0")
    debug: bool = os.getenv("DEBUG", "false").lower() in {"1", "true", "yes"}
    log_level: str = os.getenv("LOG_LEVEL", "INFO")
    log_file: Optional[str] = os.getenv("LOG_FILE") or None

    # Bind address for ``run.py``.
    host: str = os.getenv("HOST", "0.0.0.0")
    port: int = int(os.getenv("PORT", "4000"))

    # Optional JSON file with initial users, events, locations and
    # participants.  Relative paths are resolved against the current
    # working directory.  The dataset is never written back.
    seed_file: Optional[str] = os.getenv("SEED_FILE") or None


# Instantiate settings once so other modules can import it without
# repeatedly reading environment variables.
settings = Settings()
