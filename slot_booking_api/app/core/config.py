"""
Deployment settings.

The ``Settings`` dataclass reads deployment‑level configuration from
environment variables.  Defaults are provided for all fields.  These
values describe *where* the service keeps its documents and how it is
served; the booking rules themselves (cohorts, limits, dates, admin
password, mail settings) live in the editable configuration document
handled by ``services.config_service``.
"""

import os
from dataclasses import dataclass


def _get_bool(key: str, default: bool = False) -> bool:
    value = os.getenv(key)
    if value is None:
        return default
    return value.strip().lower() in {"1", "true", "yes"}


@dataclass
class Settings:
    """Application settings loaded from environment variables."""

    project_name: str = os.getenv("PROJECT_NAME", "Slot Booking API")
    api_version: str = os.getenv("API_VERSION", "1.0.0")
    log_level: str = os.getenv("LOG_LEVEL", "INFO")
    # Optional path of a log file.  Console logging is always enabled.
    log_file: str = os.getenv("LOG_FILE", "")

    host: str = os.getenv("HOST", "0.0.0.0")
    port: int = int(os.getenv("PORT", "3000"))

    # Ledger and configuration documents.  Relative paths are resolved
    # against the project root by ``core.storage.resolve_path``.
    data_file: str = os.getenv("DATA_FILE", "data.json")
    config_file: str = os.getenv("CONFIG_FILE", "config.json")

    # Directory with the public pages (index.html, admin.html).  Mounted
    # only when it exists.
    static_dir: str = os.getenv("STATIC_DIR", "static")

    # The bulk reset endpoint is refused unless this is switched on.
    allow_reset: bool = _get_bool("ALLOW_RESET", False)


# Instantiate settings once so other modules can import it without
# repeatedly reading environment variables.  Environment variables
# should be set before importing this module.
settings = Settings()
