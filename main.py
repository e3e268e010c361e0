"""Main CLI entry-point."""
from __future__ import annotations

import asyncio
import sys
from typing import Optional, TextIO

from config import Settings
from core.logging import bootstrap_logging, get_logger, shutdown_logging
from domain.errors import ConfigurationError, NuzlolckeError
from presentation.cli import LossesCommand, apply_arguments, build_parser

_log = get_logger(__name__, service="nuzlolcke")


def main(
    argv: list[str],
    *,
    settings: Optional[Settings] = None,
    out: TextIO = sys.stdout,
    err: TextIO = sys.stderr,
) -> int:
    args = build_parser().parse_args(argv)
    try:
        settings = apply_arguments(settings or Settings.from_env(), args)
    except ConfigurationError as exc:
        print(f"error: {exc}", file=err)
        return 2

    bootstrap_logging(
        service="nuzlolcke",
        level=settings.log_level,
        log_dir=settings.log_dir,
        log_file_name="nuzlolcke.jsonl",
    )
    try:
        return asyncio.run(LossesCommand(settings, out).run())
    except NuzlolckeError as exc:
        _log.error(f"aborted: {exc}")
        print(f"error: {exc}", file=err)
        return 1
    finally:
        shutdown_logging()


def run() -> None:
    raise SystemExit(main(sys.argv[1:]))


if __name__ == "__main__":
    run()
