"""
Simple configuration management.

The ``Settings`` dataclass reads configuration directly from
environment variables.  Defaults are provided for all fields, so the
service starts on port 3000 with no configuration at all.
"""

import os
from dataclasses import dataclass, field
from pathlib import Path


# home_hub_api/app/core/config.py -> project root
PROJECT_ROOT = Path(__file__).resolve().parent.parent.parent.parent


@dataclass
class Settings:
    """Application settings loaded from environment variables."""

    project_name: str = os.getenv("PROJECT_NAME", "Smart Home Hub API")
    api_version: str = os.getenv("API_VERSION", "1.0.0")
    host: str = os.getenv("HOST", "0.0.0.0")
    port: int = int(os.getenv("PORT", "3000"))
    log_level: str = os.getenv("LOG_LEVEL", "INFO")
    log_file: str = os.getenv("LOG_FILE", "")

    # Directory holding the marketing site's HTML pages.  The server
    # package sits one level below it.
    static_root: Path = field(
        default_factory=lambda: Path(os.getenv("STATIC_ROOT", str(PROJECT_ROOT))).resolve()
    )

    # Window used by the admin statistics ``recentUsers`` counter.
    recent_users_days: int = int(os.getenv("RECENT_USERS_DAYS", "7"))


# Instantiate settings once so other modules can import it without
# repeatedly reading environment variables.  Environment variables
# should be set before importing this module.
settings = Settings()
