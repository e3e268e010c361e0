"""Drains the server-paginated match-id listing for one player."""
from __future__ import annotations

from typing import List, Optional

from core.logging import get_logger, log_context, traceable
from domain.entities import MatchWindow
from domain.interfaces import IMatchRepository


class MatchIdPaginator:
    """
    Requests pages of match ids until the server returns an empty page.

    - The offset starts at ``start_offset`` and advances by the size of the
      page just received, so short pages never cause ids to be re-requested.
    - Ids are returned in arrival order; duplicates are passed through.
    - Any repository failure propagates unchanged. There is no page cap.
    """

    def __init__(
        self,
        match_repo: IMatchRepository,
        *,
        start_offset: int = 0,
        page_size: Optional[int] = None,
    ):
        self.match_repo   = match_repo
        self.start_offset = start_offset
        self.page_size    = page_size
        self._log = get_logger(__name__, service="paginator")

    @traceable
    async def fetch_all_match_ids(self, puuid: str, window: MatchWindow) -> List[str]:
        match_ids: List[str] = []
        offset = self.start_offset
        pages = 0

        with log_context(puuid=puuid):
            while True:
                page = await self.match_repo.get_match_ids_by_puuid(
                    puuid=puuid,
                    start_time=window.start_timestamp,
                    end_time=window.end_timestamp,
                    start=offset,
                    count=self.page_size,
                )
                pages += 1
                if not page:
                    break
                self._log.debug(lambda: f"page {pages} offset={offset} size={len(page)}")
                offset += len(page)
                match_ids.extend(page)

            self._log.info(f"match-ids collected={len(match_ids)} requests={pages}")
        return match_ids
