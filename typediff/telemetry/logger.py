"""Logging setup shared by every typediff subsystem."""

from __future__ import annotations

import logging
import logging.config
import os
from pathlib import Path
from threading import RLock
from typing import Any, Mapping

import yaml

LOG_LEVEL_ENV = "TYPEDIFF_LOG_LEVEL"
LOG_CONFIG_ENV = "TYPEDIFF_LOG_CONFIG"

_CONFIG_LOCK = RLock()
_CONFIGURED = False

_DEFAULT_CONFIG: dict[str, Any] = {
    "version": 1,
    "disable_existing_loggers": False,
    "formatters": {
        "standard": {
            "format": "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
        }
    },
    "handlers": {
        "console": {
            "class": "logging.StreamHandler",
            "stream": "ext://sys.stderr",
            "formatter": "standard",
        }
    },
    "root": {
        "level": "WARNING",
        "handlers": ["console"],
    },
    "loggers": {
        "typediff": {
            "level": "INFO",
        }
    },
}

_ALLOWED_KEYS = ("version", "disable_existing_loggers", "formatters", "handlers", "root", "loggers")


def _config_path() -> Path:
    override = os.environ.get(LOG_CONFIG_ENV)
    if override:
        return Path(override)
    return Path(__file__).resolve().parents[2] / "configs" / "logging.yaml"


def _load_config() -> dict[str, Any]:
    config_path = _config_path()
    if not config_path.exists():
        return dict(_DEFAULT_CONFIG)
    try:
        data = yaml.safe_load(config_path.read_text(encoding="utf-8"))
    except yaml.YAMLError as exc:  # pragma: no cover - guard rails for broken configs
        logging.basicConfig(level=logging.WARNING)
        logging.getLogger("typediff.telemetry").warning(
            "failed to parse %s: %s", config_path, exc
        )
        return dict(_DEFAULT_CONFIG)
    if not isinstance(data, Mapping):
        return dict(_DEFAULT_CONFIG)
    merged = dict(_DEFAULT_CONFIG)
    merged.update({key: value for key, value in data.items() if key in _ALLOWED_KEYS})
    return merged


def _apply_level_override(config: dict[str, Any]) -> dict[str, Any]:
    level = os.environ.get(LOG_LEVEL_ENV)
    if not level:
        return config
    loggers = dict(config.get("loggers") or {})
    package_logger = dict(loggers.get("typediff") or {})
    package_logger["level"] = level.upper()
    loggers["typediff"] = package_logger
    return {**config, "loggers": loggers}


def configure(*, force: bool = False) -> None:
    """Configure logging once; ``force`` re-reads the YAML and environment."""

    global _CONFIGURED
    with _CONFIG_LOCK:
        if _CONFIGURED and not force:
            return
        config = _apply_level_override(_load_config())
        logging.config.dictConfig(config)
        _CONFIGURED = True


def set_level(level: str | int) -> None:
    """Set the level of the package-wide ``typediff`` logger."""

    configure()
    logging.getLogger("typediff").setLevel(level.upper() if isinstance(level, str) else level)


def get_logger(name: str) -> logging.Logger:
    """Return a logger configured via ``configs/logging.yaml``."""

    if not isinstance(name, str) or not name:
        raise ValueError("logger name must be a non-empty string")
    configure()
    return logging.getLogger(name)


__all__ = ["LOG_CONFIG_ENV", "LOG_LEVEL_ENV", "configure", "get_logger", "set_level"]
