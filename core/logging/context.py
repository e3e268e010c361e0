from __future__ import annotations

import contextvars
from contextlib import contextmanager
from typing import Any, Dict, Iterator

# Each asyncio task gets a copy of this, so per-match bindings never leak
# between concurrently running fetches.
_context: contextvars.ContextVar[Dict[str, Any]] = contextvars.ContextVar("log_context", default={})


def get_context() -> Dict[str, Any]:
    return dict(_context.get())


def bind(**values: Any) -> None:
    current = dict(_context.get())
    current.update({k: v for k, v in values.items() if v is not None})
    _context.set(current)


def unbind(*keys: str) -> None:
    current = dict(_context.get())
    for k in keys:
        current.pop(k, None)
    _context.set(current)


@contextmanager
def log_context(**values: Any) -> Iterator[Dict[str, Any]]:
    current = dict(_context.get())
    current.update({k: v for k, v in values.items() if v is not None})
    token = _context.set(current)
    try:
        yield current
    finally:
        _context.reset(token)
