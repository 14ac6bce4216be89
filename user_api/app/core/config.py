"""
Simple configuration management.

The ``Settings`` dataclass reads configuration directly from
environment variables.  Defaults are provided for all fields so the
service starts without any configuration at all; override them via
environment variables in a real deployment.
"""

import os
from dataclasses import dataclass, field
from typing import Optional


def _env(name: str, default: str) -> str:
    return os.getenv(name, default)


def _env_flag(name: str, default: str = "false") -> bool:
    return os.getenv(name, default).lower() in {"1", "true", "yes"}


@dataclass
class Settings:
    """Application settings loaded from environment variables.

    Values are read when an instance is created, not when this module
    is imported, so tests can set variables and build a fresh
    ``Settings()``.
    """

    project_name: str = field(default_factory=lambda: _env("PROJECT_NAME", "User REST API"))
    api_version: str = field(default_factory=lambda: _env("API_VERSION", "1.0.0"))
    debug: bool = field(default_factory=lambda: _env_flag("DEBUG"))
    log_level: str = field(default_factory=lambda: _env("LOG_LEVEL", "INFO"))

    # Optional path of a log file.  When unset only the console handler
    # is installed.
    log_file: Optional[str] = field(default_factory=lambda: os.getenv("LOG_FILE") or None)

    # Address the ASGI server binds to (see ``run.py``).
    host: str = field(default_factory=lambda: _env("HOST", "0.0.0.0"))
    port: int = field(default_factory=lambda: int(_env("PORT", "3000")))


# Instantiate settings once so other modules can import it without
# repeatedly reading environment variables.
settings = Settings()
