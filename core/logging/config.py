from __future__ import annotations

import logging
import os
import sys
from logging.handlers import QueueHandler, QueueListener, RotatingFileHandler
from pathlib import Path
from queue import Queue
from typing import Optional

from .formatter import ConsoleFormatter, JSONFormatter
from .levels import register_levels, to_level

_listener: QueueListener | None = None


def bootstrap_logging(
    *,
    service: str = "app",
    level: str | int | None = None,
    log_dir: Optional[Path] = None,
    log_file_name: str = "app.jsonl",
    max_bytes: int = 5_000_000,
    backup_count: int = 5,
) -> None:
    """Configure the root logger.

    Console output goes to stderr and is opt-in (LOG_CONSOLE=true); stdout is
    reserved for the report. With ``log_dir`` set, JSON lines are written by a
    background QueueListener to a rotating file.
    """
    global _listener
    shutdown_logging()
    register_levels()
    root = logging.getLogger()
    root.handlers.clear()
    lvl = to_level(level or os.getenv("LOG_LEVEL", "INFO"))
    root.setLevel(lvl)

    if os.getenv("LOG_CONSOLE", "false").strip().lower() == "true":
        console = logging.StreamHandler(sys.stderr)
        console_level_str = os.getenv("LOG_CONSOLE_LEVEL", "")
        console.setLevel(to_level(console_level_str) if console_level_str else lvl)
        console.setFormatter(ConsoleFormatter(color=sys.stderr.isatty()))
        console.addFilter(_ServiceFilter(service))
        root.addHandler(console)

    if log_dir:
        log_dir.mkdir(parents=True, exist_ok=True)
        json_handler = RotatingFileHandler(
            str(log_dir / log_file_name), maxBytes=max_bytes, backupCount=backup_count, encoding="utf-8"
        )
        json_handler.setLevel(lvl)
        json_handler.setFormatter(JSONFormatter())
        q: Queue[logging.LogRecord] = Queue(-1)
        qh = QueueHandler(q)
        qh.addFilter(_ServiceFilter(service))
        root.addHandler(qh)
        _listener = QueueListener(q, json_handler, respect_handler_level=True)
        _listener.start()

    if not root.handlers:
        root.addHandler(logging.NullHandler())

    # chatty transport loggers stay at WARNING unless explicitly tracing
    if lvl > logging.DEBUG:
        for name in ("httpx", "httpcore", "hpack"):
            logging.getLogger(name).setLevel(logging.WARNING)


def shutdown_logging() -> None:
    global _listener
    if _listener:
        _listener.stop()
        _listener = None


class _ServiceFilter(logging.Filter):
    """Stamp records that carry no service tag with the process default."""

    def __init__(self, service: str) -> None:
        super().__init__()
        self.service = service

    def filter(self, record: logging.LogRecord) -> bool:
        if getattr(record, "service", None) is None:
            record.service = self.service
        return True
