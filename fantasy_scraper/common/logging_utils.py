"""Central logging utilities for the fantasy scraper.

Goals:
- Single place to configure logging for the CLI and any embedding application.
- Structured JSON logging option (LOG_FORMAT=json) and colored human-readable output (default).
- Respect environment variables:
    LOG_LEVEL=INFO|DEBUG|... (default: INFO, or the explicit ``level`` argument)
    LOG_FORMAT=console|json (default: console)
    LOG_NO_COLOR=1 to disable color output even on console format.
    LOG_TIMEZONE=utc|local (default: local)
- Library modules only call get_logger(__name__); they never install handlers.

Usage:
    from fantasy_scraper.common.logging_utils import configure_logging, get_logger
    configure_logging(service="fantasy-cli")  # idempotent
    logger = get_logger(__name__)
    logger.info("Hello")

Calling configure_logging() multiple times is safe – subsequent calls become no-ops unless
`force=True` is passed.
"""
from __future__ import annotations

import json
import logging
import os
import sys
import threading
from datetime import datetime, timezone
from typing import IO, Any, Dict, Optional, Union

_CONFIG_LOCK = threading.Lock()
_ALREADY_CONFIGURED = False

# LogRecord attributes that are never copied into the JSON payload
_RESERVED_ATTRS = frozenset(
    {
        "args", "name", "msg", "levelno", "levelname", "pathname", "filename", "module",
        "exc_info", "exc_text", "lineno", "funcName", "created", "msecs", "relativeCreated",
        "thread", "threadName", "processName", "process", "stack_info", "taskName",
    }
)

# --------------------------------------------------------------------------------------
# Formatters
# --------------------------------------------------------------------------------------


def _timestamp(record: logging.LogRecord, tz_local: bool) -> datetime:
    ts = datetime.fromtimestamp(record.created, tz=timezone.utc)
    return ts.astimezone() if tz_local else ts


class ColorFormatter(logging.Formatter):
    COLORS = {
        "DEBUG": "\x1b[38;5;245m",  # grey
        "INFO": "\x1b[38;5;39m",  # blue
        "WARNING": "\x1b[38;5;214m",  # orange
        "ERROR": "\x1b[38;5;196m",  # red
        "CRITICAL": "\x1b[48;5;196m\x1b[38;5;231m",  # white on red
    }
    RESET = "\x1b[0m"

    def __init__(self, tz_local: bool):
        super().__init__()
        self.tz_local = tz_local

    def format(self, record: logging.LogRecord) -> str:  # noqa: D401
        ts_str = _timestamp(record, self.tz_local).strftime("%Y-%m-%d %H:%M:%S")
        base = f"{ts_str} | {record.levelname:<8} | {record.name} | {record.getMessage()}"
        if record.exc_info:
            base += "\n" + self.formatException(record.exc_info)
        level_color = self.COLORS.get(record.levelname, "")
        if level_color:
            return f"{level_color}{base}{self.RESET}"
        return base


class JsonFormatter(logging.Formatter):
    def __init__(self, tz_local: bool):
        super().__init__()
        self.tz_local = tz_local

    def format(self, record: logging.LogRecord) -> str:  # noqa: D401
        payload: Dict[str, Any] = {
            "ts": _timestamp(record, self.tz_local).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        if record.exc_info:
            payload["exc_info"] = self.formatException(record.exc_info)
        # Extra attributes passed via `extra=` (e.g. slug, page_kind, service)
        for k, v in record.__dict__.items():
            if k in _RESERVED_ATTRS or k in payload or k.startswith("_"):
                continue
            try:
                json.dumps({k: v})
                payload[k] = v
            except (TypeError, ValueError):
                payload[k] = repr(v)
        return json.dumps(payload, ensure_ascii=False)


# --------------------------------------------------------------------------------------
# Public API
# --------------------------------------------------------------------------------------


def configure_logging(
    service: str | None = None,
    *,
    level: Union[str, int, None] = None,
    stream: Optional[IO[str]] = None,
    force: bool = False,
) -> None:
    """Configure root logging once.

    Parameters
    ----------
    service: Optional logical service/app name (added as 'service' field to records)
    level: Explicit level; overrides LOG_LEVEL when given
    stream: Target stream for the handler (default: stderr)
    force: If True, reconfigure even if already configured.
    """
    global _ALREADY_CONFIGURED
    with _CONFIG_LOCK:
        if _ALREADY_CONFIGURED and not force:
            return

        if level is None:
            level = os.getenv("LOG_LEVEL", "INFO")
        if isinstance(level, str):
            level = getattr(logging, level.upper(), logging.INFO)
        log_format = os.getenv("LOG_FORMAT", "console").lower()
        tz_local = os.getenv("LOG_TIMEZONE", "local").lower() != "utc"
        no_color = os.getenv("LOG_NO_COLOR") == "1"
        target = stream or sys.stderr

        root = logging.getLogger()
        for h in list(root.handlers):
            root.removeHandler(h)

        if log_format == "json":
            formatter: logging.Formatter = JsonFormatter(tz_local=tz_local)
        elif target.isatty() and not no_color:
            formatter = ColorFormatter(tz_local=tz_local)
        else:
            formatter = logging.Formatter(
                fmt="%(asctime)s | %(levelname)s | %(name)s | %(message)s",
                datefmt="%Y-%m-%d %H:%M:%S",
            )

        handler = logging.StreamHandler(target)
        handler.setFormatter(formatter)
        root.addHandler(handler)
        root.setLevel(level)

        _ServiceLoggerAdapter.BASE_SERVICE = service
        _ALREADY_CONFIGURED = True


def get_logger(name: str) -> Union[logging.Logger, logging.LoggerAdapter]:
    base = logging.getLogger(name)
    base_service = _ServiceLoggerAdapter.BASE_SERVICE
    if base_service:
        return _ServiceLoggerAdapter(base, {"service": base_service})
    return base


class _ServiceLoggerAdapter(logging.LoggerAdapter):
    # Set by configure_logging if a service was specified
    BASE_SERVICE: Optional[str] = None

    def process(self, msg: Any, kwargs: Dict[str, Any]):  # noqa: D401
        extra = kwargs.get("extra") or {}
        if "service" not in extra and self.extra.get("service"):
            extra["service"] = self.extra["service"]
        kwargs["extra"] = extra
        return msg, kwargs


__all__ = [
    "ColorFormatter",
    "JsonFormatter",
    "configure_logging",
    "get_logger",
]
