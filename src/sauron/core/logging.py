"""
Sauron Logging — opt-in console logging for applications and the CLI.

The library only creates loggers; it never installs handlers on import.
Call setup_logging() once from an application entry point to get:
- Color formatter for interactive use (auto-detects TTY)
- JSON structured formatter for log aggregation (SAURON_LOG_FORMAT=json)
- httpx/httpcore request chatter suppressed below WARNING

Structured log extra fields (pass via logger.info(..., extra={...})):
    method, path, status, duration_ms, chunks, provider, model
"""

from __future__ import annotations

import json
import logging
import os
import sys
from datetime import datetime, timezone


# --- Color codes ---
COLORS = {
    "DEBUG": "\033[36m",  # Cyan
    "INFO": "\033[32m",  # Green
    "WARNING": "\033[33m",  # Yellow
    "ERROR": "\033[31m",  # Red
    "CRITICAL": "\033[1;31m",  # Bold red
    "RESET": "\033[0m",
    "DIM": "\033[2m",
}


class ColorFormatter(logging.Formatter):
    """Colorized log formatter for terminal output."""

    def __init__(self, use_color: bool = True):
        super().__init__(
            fmt="%(asctime)s [%(name)s] %(levelname)s: %(message)s",
            datefmt="%H:%M:%S",
        )
        self.use_color = use_color

    def format(self, record: logging.LogRecord) -> str:
        if not self.use_color:
            return super().format(record)

        # Color a copy; other handlers share the original record
        colored = logging.makeLogRecord(record.__dict__)
        level_color = COLORS.get(record.levelname, "")
        reset = COLORS["RESET"]
        dim = COLORS["DIM"]
        colored.levelname = f"{level_color}{record.levelname}{reset}"
        colored.name = f"{dim}{record.name}{reset}"
        return super().format(colored)


# Structured log fields forwarded from logger.info(..., extra={...})
_STRUCTURED_FIELDS = (
    "method",
    "path",
    "status",
    "duration_ms",
    "chunks",
    "provider",
    "model",
)


class StructuredFormatter(logging.Formatter):
    """JSON log formatter — one object per line.

    Extra fields passed via logger.debug("msg", extra={"path": "/health"})
    are included at the top level.

    Enable with: SAURON_LOG_FORMAT=json
    """

    def format(self, record: logging.LogRecord) -> str:
        entry: dict = {
            "ts": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "msg": record.getMessage(),
        }

        for key in _STRUCTURED_FIELDS:
            if hasattr(record, key):
                entry[key] = getattr(record, key)

        if record.exc_info:
            entry["exc"] = self.formatException(record.exc_info)

        return json.dumps(entry, default=str)


def _should_use_color() -> bool:
    """Auto-detect color support."""
    env_val = os.getenv("SAURON_LOG_COLOR", "auto").lower()
    if env_val == "true":
        return True
    if env_val == "false":
        return False
    return hasattr(sys.stderr, "isatty") and sys.stderr.isatty()


def setup_logging(level: str | None = None) -> None:
    """Configure console logging for an application using the SDK.

    Env vars:
        SAURON_LOG_LEVEL  — DEBUG / INFO / WARNING / ERROR (default: WARNING)
        SAURON_LOG_COLOR  — true / false / auto (default: auto, TTY detection)
        SAURON_LOG_FORMAT — text / json (default: text)

    An explicit ``level`` argument wins over SAURON_LOG_LEVEL.
    """
    level_name = (level or os.getenv("SAURON_LOG_LEVEL", "WARNING")).upper()
    log_level = getattr(logging, level_name, logging.WARNING)
    log_format = os.getenv("SAURON_LOG_FORMAT", "text").lower()

    root = logging.getLogger()
    root.setLevel(log_level)
    root.handlers.clear()

    if log_format == "json":
        formatter: logging.Formatter = StructuredFormatter()
    else:
        formatter = ColorFormatter(use_color=_should_use_color())

    # stderr keeps stdout clean for streamed responses
    handler = logging.StreamHandler(sys.stderr)
    handler.setLevel(log_level)
    handler.setFormatter(formatter)
    root.addHandler(handler)

    for noisy_logger in ["httpx", "httpcore", "httpcore.http11", "httpcore.connection"]:
        logging.getLogger(noisy_logger).setLevel(logging.WARNING)

    logger = logging.getLogger("sauron")
    logger.debug("Logging configured (level=%s, format=%s)", level_name, log_format)
