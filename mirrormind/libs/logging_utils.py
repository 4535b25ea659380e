"""
Logging setup for the MirrorMind service.

Every record is tagged with the analysis stage that produced it
(``inference``, ``reflection``, ``analysis``, ``api``) so JSON logs can be
filtered per stage. Each stage's level can be raised or lowered on its own
with ``MIRRORMIND_LOG_LEVEL_<STAGE>``.
"""

from __future__ import annotations

import json
import logging
import os
from datetime import datetime, timezone
from logging.config import dictConfig
from typing import Any, Dict, Optional

LOCAL_ENVIRONMENTS = {"local", "dev", "test"}

# Logger name prefix -> stage tag. Longest prefix wins.
STAGE_LOGGERS: Dict[str, str] = {
    "mirrormind.libs.inference": "inference",
    "mirrormind.apps.engine.remote_signals": "inference",
    "mirrormind.apps.engine.generative_reflection": "reflection",
    "mirrormind.apps.engine.reflection": "reflection",
    "mirrormind.apps.engine.analysis": "analysis",
    "mirrormind.apps.api": "api",
}
DEFAULT_STAGE = "service"

_RED = "\033[31m"
_YELLOW = "\033[33m"
_CYAN = "\033[36m"
_RESET = "\033[0m"

# Attributes every LogRecord carries; anything else arrived through ``extra``.
_RECORD_ATTRS = frozenset(logging.LogRecord("", 0, "", 0, "", (), None).__dict__) | {"message", "asctime", "stage"}


def _environment() -> str:
    return os.getenv("MIRRORMIND_ENVIRONMENT", "dev").lower()


def color_enabled() -> bool:
    flag = os.getenv("MIRRORMIND_LOG_COLOR", "")
    if flag:
        return flag == "1"
    return _environment() in LOCAL_ENVIRONMENTS


def colorize(text: str) -> str:
    """Highlight a service lifecycle message on local consoles."""
    if not color_enabled():
        return text
    return f"{_CYAN}{text}{_RESET}"


def stage_for(logger_name: str) -> str:
    matches = [prefix for prefix in STAGE_LOGGERS if logger_name == prefix or logger_name.startswith(prefix + ".")]
    if not matches:
        return DEFAULT_STAGE
    return STAGE_LOGGERS[max(matches, key=len)]


class StageFilter(logging.Filter):
    """Tags records with the analysis stage of the emitting logger."""

    def filter(self, record: logging.LogRecord) -> bool:
        if not hasattr(record, "stage"):
            record.stage = stage_for(record.name)
        return True


def record_extras(record: logging.LogRecord) -> Dict[str, Any]:
    return {key: value for key, value in record.__dict__.items() if key not in _RECORD_ATTRS}


class JsonFormatter(logging.Formatter):
    """One JSON object per line; ``extra`` fields sit beside the message."""

    def format(self, record: logging.LogRecord) -> str:
        payload: Dict[str, Any] = {
            "timestamp": datetime.fromtimestamp(record.created, tz=timezone.utc).isoformat(),
            "level": record.levelname,
            "stage": getattr(record, "stage", None) or stage_for(record.name),
            "logger": record.name,
            "message": record.getMessage(),
        }
        for key, value in record_extras(record).items():
            payload.setdefault(key, value)
        if record.exc_info:
            payload["exc_info"] = self.formatException(record.exc_info)
        return json.dumps(payload, ensure_ascii=False, default=str)


class ColorTextFormatter(logging.Formatter):
    """Console formatter: stage tag, message and ``key=value`` extras; warnings and errors coloured."""

    def format(self, record: logging.LogRecord) -> str:
        if not hasattr(record, "stage"):
            record.stage = stage_for(record.name)
        formatted = super().format(record)
        extras = record_extras(record)
        if extras:
            formatted += " " + " ".join(f"{key}={value}" for key, value in extras.items())
        if not color_enabled() or record.levelno < logging.WARNING:
            return formatted
        color = _RED if record.levelno >= logging.ERROR else _YELLOW
        return f"{color}{formatted}{_RESET}"


def _stage_levels(default_level: str) -> Dict[str, Dict[str, str]]:
    loggers: Dict[str, Dict[str, str]] = {}
    for prefix, stage in STAGE_LOGGERS.items():
        level = os.getenv(f"MIRRORMIND_LOG_LEVEL_{stage.upper()}", default_level).upper()
        loggers[prefix] = {"level": level}
    return loggers


def configure_logging(log_format: Optional[str] = None, log_level: Optional[str] = None) -> None:
    """Configure service logging; arguments override the environment."""

    default_level = "DEBUG" if _environment() in LOCAL_ENVIRONMENTS else "INFO"
    log_level = (log_level or os.getenv("MIRRORMIND_LOG_LEVEL", default_level)).upper()
    log_format = (log_format or os.getenv("MIRRORMIND_LOG_FORMAT", "json")).lower()

    loggers: Dict[str, Dict[str, str]] = {
        # Remote call chatter is covered by the inference stage's own lines.
        "httpx": {"level": "WARNING"},
        "httpcore": {"level": "WARNING"},
    }
    loggers.update(_stage_levels(log_level))

    dictConfig(
        {
            "version": 1,
            "disable_existing_loggers": False,
            "filters": {"stage": {"()": StageFilter}},
            "formatters": {
                "json": {"()": JsonFormatter},
                "text": {
                    "()": ColorTextFormatter,
                    "format": "%(asctime)s [%(levelname)s] (%(stage)s) %(name)s: %(message)s",
                },
            },
            "handlers": {
                "console": {
                    "class": "logging.StreamHandler",
                    "formatter": "json" if log_format == "json" else "text",
                    "filters": ["stage"],
                }
            },
            "loggers": loggers,
            "root": {"handlers": ["console"], "level": log_level},
        }
    )


__all__ = [
    "ColorTextFormatter",
    "JsonFormatter",
    "STAGE_LOGGERS",
    "StageFilter",
    "colorize",
    "configure_logging",
    "stage_for",
]
