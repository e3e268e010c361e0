from __future__ import annotations

import argparse
from datetime import datetime, timedelta
from typing import List, Optional, TextIO

from config import Settings
from core.logging import get_logger, StructuredLogger
from domain.entities import LossResult, MatchWindow
from domain.enums import LossMode, OutputMode, Region
from domain.errors import ConfigurationError
from infrastructure import AccountRepository, MatchRepository, RiotAPIClient
from application.services.pipeline import render_lines
from application.use_cases import TrackLossesUseCase


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="nuzlolcke",
        description="List the champions a player lost with over a date window.",
    )
    parser.add_argument("--region", help="platform code, e.g. na1 or euw (env NUZLOLCKE_REGION)")
    parser.add_argument("--from", dest="start", metavar="YYYY-MM-DD", help="window start (env NUZLOLCKE_START_DATE)")
    parser.add_argument("--to", dest="end", metavar="YYYY-MM-DD", help="window end, inclusive (env NUZLOLCKE_END_DATE)")
    parser.add_argument(
        "--mode",
        choices=[m.value for m in LossMode],
        help="loss predicate strictness (env NUZLOLCKE_LOSS_MODE)",
    )
    parser.add_argument(
        "--output",
        choices=[m.value for m in OutputMode],
        help="champions: one line per distinct champion; losses: one line per loss",
    )
    parser.add_argument("--concurrency", type=int, help="in-flight match fetches (env MAX_CONCURRENT_REQUESTS)")
    parser.add_argument("--sequential", action="store_true", help="fetch matches one at a time")
    return parser


def _parse_day(value: str, flag: str) -> datetime:
    try:
        return datetime.strptime(value, "%Y-%m-%d").astimezone()
    except ValueError:
        raise ConfigurationError(flag, f"{flag} must be YYYY-MM-DD, got {value!r}") from None


def apply_arguments(settings: Settings, args: argparse.Namespace) -> Settings:
    """Layer command-line flags over environment settings."""
    window = None
    if args.start or args.end:
        start = _parse_day(args.start, "--from") if args.start else settings.window.start
        end = settings.window.end
        if args.end:
            end = _parse_day(args.end, "--to") + timedelta(days=1) - timedelta(seconds=1)
        window = MatchWindow(start, end)

    region = None
    if args.region:
        try:
            region = Region.from_string(args.region)
        except ValueError as exc:
            raise ConfigurationError("--region", str(exc)) from None

    concurrency = args.concurrency
    if args.sequential:
        concurrency = 1
    if concurrency is not None and concurrency < 1:
        raise ConfigurationError("--concurrency", "--concurrency must be at least 1")

    return settings.with_overrides(
        region=region,
        window=window,
        loss_mode=LossMode.from_string(args.mode) if args.mode else None,
        output_mode=OutputMode.from_string(args.output) if args.output else None,
        max_concurrent_requests=concurrency,
    )


class LossesCommand:
    """Runs the loss tracker and prints the report to ``out``."""

    def __init__(self, settings: Settings, out: TextIO, client: Optional[RiotAPIClient] = None) -> None:
        self.settings = settings
        self.out = out
        self._client = client
        self._log: StructuredLogger = get_logger(__name__, service="cli")

    async def collect(self) -> List[LossResult]:
        client = self._client or RiotAPIClient.from_settings(self.settings)
        async with client as api:
            use_case = TrackLossesUseCase(
                self.settings,
                AccountRepository(api, self.settings.region),
                MatchRepository(api, self.settings.region),
            )
            return await use_case.execute()

    async def run(self) -> int:
        self._log.info(f"start {self.settings.riot_id} on {self.settings.region.friendly}")
        losses = await self.collect()
        for line in render_lines(losses, self.settings.output_mode):
            print(line, file=self.out)
        return 0
