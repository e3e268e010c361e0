"""Fetch + filter stage: turns match ids into loss results."""
from __future__ import annotations

import asyncio
from typing import Iterable, List, Optional, Sequence

from core.logging import get_logger, log_context, traceable
from domain.entities import Champion, LossResult, Match, Team
from domain.enums import GameMap, GameType, LossMode, SkipReason
from domain.errors import NuzlolckeError
from domain.interfaces import IMatchRepository
from .match_outcome import Fatal, MatchOutcome, Qualified, Skipped


class LossFilterService:
    """
    Evaluates every match id independently and keeps the losses.

    Design:
    - ``evaluate`` never raises for bad match data; it returns Skipped with a
      reason. Fetch failures other than not-found come back as Fatal.
    - ``filter_losses`` raises the first Fatal it sees and cancels every
      fetch still in flight.
    - With ``max_concurrency > 1`` fetches fan out under a semaphore and the
      result order is completion order. ``max_concurrency == 1`` processes ids
      strictly in input order.
    """

    def __init__(
        self,
        match_repo: IMatchRepository,
        *,
        loss_mode: LossMode = LossMode.STRICT,
        max_concurrency: int = 16,
    ):
        if max_concurrency < 1:
            raise ValueError("max_concurrency must be at least 1")
        self.match_repo      = match_repo
        self.loss_mode       = loss_mode
        self.max_concurrency = max_concurrency
        self._log = get_logger(__name__, service="loss-filter")

    # ------------------------------------------------------------------ #
    # Public entry point
    # ------------------------------------------------------------------ #

    @traceable
    async def filter_losses(self, puuid: str, match_ids: Sequence[str]) -> List[LossResult]:
        with log_context(puuid=puuid):
            if self.max_concurrency == 1:
                losses = await self._run_sequential(puuid, match_ids)
            else:
                losses = await self._run_concurrent(puuid, match_ids)
            self._log.info(f"losses found={len(losses)} of matches={len(match_ids)}")
        return losses

    async def evaluate(self, puuid: str, match_id: str) -> MatchOutcome:
        """Fetch one match and classify it."""
        with log_context(match_id=match_id):
            try:
                match = await self.match_repo.get_match_by_id(match_id)
            except NuzlolckeError as exc:
                return Fatal(match_id, exc)
            if match is None:
                return Skipped(match_id, SkipReason.MATCH_NOT_FOUND)
            return self.classify(puuid, match_id, match)

    def classify(self, puuid: str, match_id: str, match: Match) -> MatchOutcome:
        """Apply participant lookup, loss predicate and field resolution to a fetched match."""
        index = match.participant_index(puuid)
        if index is None:
            return Skipped(match_id, SkipReason.PARTICIPANT_MISSING)

        participant = match.participant_at(index)
        if participant is None:
            return Skipped(match_id, SkipReason.PARTICIPANT_DETAIL_MISSING)

        team = match.team_by_id(participant.team_id)
        if team is None:
            return Skipped(match_id, SkipReason.TEAM_OUTCOME_MISSING)

        reason = self._predicate_failure(match, team)
        if reason is not None:
            return Skipped(match_id, reason)

        champion = Champion.resolve(participant)
        if champion is None:
            return Skipped(match_id, SkipReason.CHAMPION_UNRESOLVED)

        date = match.game_start
        if date is None:
            return Skipped(match_id, SkipReason.TIMESTAMP_INVALID)

        return Qualified(LossResult(champion=champion, date=date, match_id=match_id))

    # ------------------------------------------------------------------ #
    # Helpers
    # ------------------------------------------------------------------ #

    def _predicate_failure(self, match: Match, team: Team) -> Optional[SkipReason]:
        if team.win:
            return SkipReason.NOT_A_LOSS
        if self.loss_mode is LossMode.STRICT:
            if GameType.parse(match.game_type) is not GameType.MATCHED_GAME:
                return SkipReason.QUEUE_MISMATCH
            if match.map_id not in GameMap.ranked_maps():
                return SkipReason.QUEUE_MISMATCH
        return None

    def _collect(self, outcome: MatchOutcome) -> Optional[LossResult]:
        if isinstance(outcome, Qualified):
            return outcome.loss
        if isinstance(outcome, Skipped):
            self._log.debug(lambda: f"skip {outcome.match_id} reason={outcome.reason.value}")
            return None
        self._log.error(f"fatal while fetching {outcome.match_id}: {outcome.error}")
        raise outcome.error

    async def _run_sequential(self, puuid: str, match_ids: Iterable[str]) -> List[LossResult]:
        losses: List[LossResult] = []
        for match_id in match_ids:
            loss = self._collect(await self.evaluate(puuid, match_id))
            if loss is not None:
                losses.append(loss)
        return losses

    async def _run_concurrent(self, puuid: str, match_ids: Iterable[str]) -> List[LossResult]:
        sem = asyncio.Semaphore(self.max_concurrency)

        async def _bounded(match_id: str) -> MatchOutcome:
            async with sem:
                return await self.evaluate(puuid, match_id)

        tasks = [asyncio.create_task(_bounded(mid)) for mid in match_ids]
        losses: List[LossResult] = []
        try:
            for fut in asyncio.as_completed(tasks):
                loss = self._collect(await fut)
                if loss is not None:
                    losses.append(loss)
        finally:
            for t in tasks:
                if not t.done():
                    t.cancel()
            # retrieves finished tasks' exceptions too
            await asyncio.gather(*tasks, return_exceptions=True)
        return losses
