import json
import logging
import sys
import time
from typing import Any

from .adapters import plain
from .env import get_or
from .parsers import parse_bool

_RESERVED = {
    "name",
    "msg",
    "args",
    "levelname",
    "levelno",
    "pathname",
    "filename",
    "module",
    "exc_info",
    "exc_text",
    "stack_info",
    "lineno",
    "funcName",
    "created",
    "msecs",
    "relativeCreated",
    "thread",
    "threadName",
    "processName",
    "process",
    "taskName",
    "message",
    "asctime",
}


class JsonFormatter(logging.Formatter):
    """JSON log formatter."""

    def __init__(self, *, utc: bool = True) -> None:
        super().__init__()
        self.utc = utc

    def format(self, record: logging.LogRecord) -> str:
        payload: dict[str, Any] = {
            "ts": self._timestamp(record.created),
            "level": record.levelname,
            "logger": record.name,
            "msg": record.getMessage(),
        }

        extras = {k: v for k, v in record.__dict__.items() if k not in _RESERVED}
        if extras:
            payload["extra"] = extras

        if record.exc_info:
            payload["exc"] = self.formatException(record.exc_info)

        return json.dumps(payload, ensure_ascii=False, default=str)

    def _timestamp(self, created: float) -> str:
        if self.utc:
            return time.strftime("%Y-%m-%dT%H:%M:%SZ", time.gmtime(created))
        return time.strftime("%Y-%m-%dT%H:%M:%S%z", time.localtime(created))


class PlainFormatter(logging.Formatter):
    """Plain text log formatter; appends record extras as key=value pairs."""

    def __init__(self, *, utc: bool = True) -> None:
        dtfmt = "%Y-%m-%dT%H:%M:%SZ" if utc else "%Y-%m-%d %H:%M:%S%z"
        super().__init__(fmt="%(asctime)s %(levelname)s %(name)s - %(message)s", datefmt=dtfmt)
        self.converter = time.gmtime if utc else time.localtime

    def format(self, record: logging.LogRecord) -> str:
        line = super().format(record)
        extras = [f"{k}={v}" for k, v in record.__dict__.items() if k not in _RESERVED]
        if extras:
            line = f"{line} | {' '.join(extras)}"
        return line


def get_logger(name: str | None = None) -> logging.Logger:
    """Returns a logger under the envget namespace."""
    if not name:
        return logging.getLogger("envget")
    if name == "envget" or name.startswith("envget."):
        return logging.getLogger(name)
    return logging.getLogger(f"envget.{name}")


def configure_logging(
    *,
    level: str | None = None,
    fmt: str | None = None,
    utc: bool | None = None,
) -> None:
    """Configures root logging for applications that use envget at startup.

    Unset arguments are read from LOG_LEVEL, LOG_FORMAT and LOG_UTC.
    """
    level_str = (level if level is not None else get_or("LOG_LEVEL", plain, "INFO") or "INFO").upper()
    fmt_str = (fmt if fmt is not None else get_or("LOG_FORMAT", plain, "plain") or "plain").lower()
    use_utc = utc if utc is not None else get_or("LOG_UTC", parse_bool, True)

    root = logging.getLogger()
    for h in list(root.handlers):
        root.removeHandler(h)

    root.setLevel(getattr(logging, level_str, logging.INFO))

    handler = logging.StreamHandler(stream=sys.stdout)
    if fmt_str == "json":
        handler.setFormatter(JsonFormatter(utc=use_utc))
    else:
        handler.setFormatter(PlainFormatter(utc=use_utc))

    root.addHandler(handler)

    log = get_logger("boot")
    log.info("logging configured", extra={"level": level_str, "format": fmt_str, "utc": use_utc})
