from __future__ import annotations

import json
import logging
import time
from typing import Any, Dict

from .context import get_context

_LEVEL_COLORS = {
    "TRACE": "\033[90m",
    "DEBUG": "\033[37m",
    "INFO": "\033[36m",
    "SUCCESS": "\033[32m",
    "WARNING": "\033[33m",
    "ERROR": "\033[31m",
    "CRITICAL": "\033[35m",
}
_RESET = "\033[0m"


def _record_metadata(record: logging.LogRecord) -> Dict[str, Any]:
    return {
        "timestamp": time.strftime("%Y-%m-%dT%H:%M:%S", time.localtime(record.created)),
        "level": record.levelname,
        "service": getattr(record, "service", None),
        "logger": record.name,
        "function": record.funcName,
        "line_number": record.lineno,
    }


def _record_context(record: logging.LogRecord) -> Dict[str, Any]:
    # QueueHandler formats on another thread, so the bound context is
    # snapshotted onto the record by StructuredLogger.
    ctx = getattr(record, "context", None)
    if ctx is None:
        ctx = get_context()
    return dict(ctx)


class ConsoleFormatter(logging.Formatter):
    def __init__(self, *, color: bool = True) -> None:
        super().__init__()
        self.color = color

    def format(self, record: logging.LogRecord) -> str:
        md = _record_metadata(record)
        ctx = _record_context(record)
        parts = [
            md["timestamp"],
            md["level"],
            md["service"] or "-",
            f"{md['logger']}:{md['function']}:{md['line_number']}",
            record.getMessage(),
        ]
        exec_ms = getattr(record, "execution_time_ms", None)
        if exec_ms is not None:
            parts.append(f"t={exec_ms}ms")
        if ctx:
            parts.append(" ".join(f"{k}={v}" for k, v in sorted(ctx.items())))
        if record.exc_info:
            parts.append(self.formatException(record.exc_info))
        line = " | ".join(parts)
        if not self.color:
            return line
        return f"{_LEVEL_COLORS.get(md['level'], '')}{line}{_RESET}"


class JSONFormatter(logging.Formatter):
    def format(self, record: logging.LogRecord) -> str:
        payload: Dict[str, Any] = _record_metadata(record)
        payload["message"] = record.getMessage()
        ctx = _record_context(record)
        if ctx:
            payload["context"] = ctx
        exec_ms = getattr(record, "execution_time_ms", None)
        if exec_ms is not None:
            payload["execution_time_ms"] = exec_ms
        if record.exc_info:
            payload["exception"] = self.formatException(record.exc_info)
        return json.dumps(payload, default=str, separators=(",", ":"))
