"""Logging configuration for the medicine image service."""

import os
from pathlib import Path

from .environment import BASE_DIR

_TRUTHY = {"1", "true", "yes", "on"}


def _flag(name: str, default: str) -> bool:
    return os.getenv(name, default).strip().lower() in _TRUTHY


def _file_handler(level: str) -> dict:
    log_dir = Path(os.getenv("LOG_DIR", str(Path(BASE_DIR) / "logs")))
    log_dir.mkdir(parents=True, exist_ok=True)
    return {
        "class": "logging.handlers.RotatingFileHandler",
        "level": level,
        "formatter": "standard",
        "filename": str(log_dir / os.getenv("LOG_FILE_NAME", "image_service.log")),
        "maxBytes": int(os.getenv("LOG_MAX_BYTES", str(10 * 1024 * 1024))),
        "backupCount": int(os.getenv("LOG_BACKUP_COUNT", "5")),
        "encoding": "utf-8",
    }


def build_logging(level: str) -> dict:
    handlers = {}
    if _flag("LOG_CONSOLE_ENABLED", "1"):
        handlers["console"] = {
            "class": "logging.StreamHandler",
            "level": level,
            "formatter": "standard",
        }
    if _flag("LOG_FILE_ENABLED", "0"):
        handlers["file"] = _file_handler(level)

    # Crawl and cache events are logged under the app packages.
    app_loggers = {name: {"level": level, "propagate": True} for name in ("image_app", "core")}
    return {
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": {
            "standard": {"format": "%(asctime)s [%(levelname)s] %(name)s - %(message)s"},
        },
        "handlers": handlers,
        "root": {"level": level, "handlers": list(handlers)},
        "loggers": {
            "django": {
                "level": os.getenv("DJANGO_LOG_LEVEL", level).upper(),
                "propagate": True,
            },
            **app_loggers,
        },
    }


LOG_ENABLED = _flag("LOG_ENABLED", "1")

if LOG_ENABLED:
    LOGGING_CONFIG = "logging.config.dictConfig"
    LOGGING = build_logging(os.getenv("LOG_LEVEL", "INFO").upper())
else:
    LOGGING_CONFIG = None
    LOGGING = {}


__all__ = ["LOGGING", "LOGGING_CONFIG", "LOG_ENABLED"]
