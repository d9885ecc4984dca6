"""Central logging configuration for Mapty."""

from __future__ import annotations

from logging.config import dictConfig
from pathlib import Path

_configured = False

VALID_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG")


def build_config(level: str, log_dir: Path | None = None) -> dict:
    fmt = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"
    handlers: dict[str, dict] = {
        "console": {
            "class": "logging.StreamHandler",
            "formatter": "standard",
            "level": level,
        },
    }
    if log_dir is not None:
        handlers["file"] = {
            "class": "logging.FileHandler",
            "filename": str(log_dir / "mapty.log"),
            "encoding": "utf-8",
            "formatter": "standard",
            "level": level,
        }
    return {
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": {
            "standard": {
                "format": fmt,
            },
        },
        "handlers": handlers,
        "root": {
            "level": level,
            "handlers": list(handlers),
        },
    }


def configure_logging(level: str = "INFO", log_dir: Path | None = None) -> None:
    """Configure application logging once per process."""

    global _configured
    if _configured:
        return

    upper = level.upper()
    if upper not in VALID_LEVELS:
        raise ValueError(f"Invalid log level '{level}'. Use one of {', '.join(VALID_LEVELS)}")
    if log_dir is not None:
        log_dir.mkdir(parents=True, exist_ok=True)

    dictConfig(build_config(upper, log_dir))
    _configured = True
