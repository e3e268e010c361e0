"""Use case: resolve a Riot id and list the champions it lost with."""
from __future__ import annotations

from typing import List, Optional

from config import Settings
from core.logging import get_logger, log_context
from domain.entities import Account, LossResult
from domain.errors import SummonerNotFoundError
from domain.interfaces import IAccountRepository, IMatchRepository
from application.services.pipeline import LossFilterService, MatchIdPaginator


class TrackLossesUseCase:
    """
    resolve account → drain match ids over the window → filter losses.

    Any fatal error (unknown account, transport failure) propagates and no
    partial result is returned.
    """

    def __init__(
        self,
        settings: Settings,
        account_repo: IAccountRepository,
        match_repo: IMatchRepository,
        paginator: Optional[MatchIdPaginator] = None,
        loss_filter: Optional[LossFilterService] = None,
    ):
        self.settings     = settings
        self.account_repo = account_repo
        self.match_repo   = match_repo
        self.paginator    = paginator or MatchIdPaginator(
            match_repo,
            start_offset=settings.start_offset,
            page_size=settings.page_size,
        )
        self.loss_filter  = loss_filter or LossFilterService(
            match_repo,
            loss_mode=settings.loss_mode,
            max_concurrency=settings.max_concurrent_requests,
        )
        self._log = get_logger(__name__, service="track-losses")

    async def resolve_account(self, game_name: str, tag_line: str) -> Account:
        account = await self.account_repo.get_account_by_riot_id(game_name, tag_line)
        if account is None:
            raise SummonerNotFoundError(f"{game_name}#{tag_line}")
        return account

    async def execute(
        self,
        game_name: Optional[str] = None,
        tag_line: Optional[str] = None,
    ) -> List[LossResult]:
        game_name = game_name or self.settings.game_name
        tag_line  = tag_line or self.settings.tag_line
        window    = self.settings.window

        account = await self.resolve_account(game_name, tag_line)
        with log_context(riot_id=account.riot_id, region=self.settings.region.value):
            self._log.info(
                f"window {window.start.isoformat()} → {window.end.isoformat()} "
                f"mode={self.settings.loss_mode.value}"
            )
            match_ids = await self.paginator.fetch_all_match_ids(account.puuid, window)
            losses = await self.loss_filter.filter_losses(account.puuid, match_ids)
            self._log.success(f"done losses={len(losses)}")
        return losses
