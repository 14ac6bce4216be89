"""
Logging setup for the API process.

``build_logging_config`` describes the handlers as a
``logging.config.dictConfig`` mapping: always a console handler, plus a
UTF-8 file handler when ``LOG_FILE`` is set.  ``setup_logging`` applies
it to the root logger unless something (uvicorn, pytest, an earlier
``create_app``) already installed handlers there.
"""

import logging
import logging.config
from pathlib import Path
from typing import Any, Dict, Optional


LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def _level_name(level: str) -> str:
    name = level.upper()
    return name if isinstance(logging.getLevelName(name), int) else "INFO"


def build_logging_config(level: str = "INFO", logfile: Optional[str] = None) -> Dict[str, Any]:
    """Return a ``dictConfig`` mapping for the root logger.

    Unknown level names fall back to ``INFO``.  A relative ``logfile``
    is resolved against the current working directory.
    """
    handlers: Dict[str, Dict[str, Any]] = {
        "console": {"class": "logging.StreamHandler", "formatter": "default"},
    }
    if logfile:
        handlers["file"] = {
            "class": "logging.FileHandler",
            "formatter": "default",
            "filename": str(Path(logfile).resolve()),
            "encoding": "utf-8",
        }
    return {
        "version": 1,
        # Module loggers such as ``user_api.app.services.user_store`` exist
        # before the app is built and must keep working.
        "disable_existing_loggers": False,
        "formatters": {"default": {"format": LOG_FORMAT, "datefmt": DATE_FORMAT}},
        "handlers": handlers,
        "root": {"level": _level_name(level), "handlers": list(handlers)},
    }


def setup_logging(level: str = "INFO", logfile: Optional[str] = None) -> None:
    """Configure the root logger once per process."""
    if logging.getLogger().handlers:
        return
    logging.config.dictConfig(build_logging_config(level, logfile))
