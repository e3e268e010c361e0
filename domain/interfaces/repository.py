"""Repository interfaces for data access."""
from abc import ABC, abstractmethod
from typing import Optional, List

from ..entities import Account, Match


class IMatchRepository(ABC):
    """Interface for match data repository."""

    @abstractmethod
    async def get_match_by_id(self, match_id: str) -> Optional[Match]:
        """Get a single match by ID, or None if the server does not know it."""
        pass

    @abstractmethod
    async def get_match_ids_by_puuid(
        self,
        puuid: str,
        start_time: int,
        end_time: int,
        start: int = 0,
        count: Optional[int] = None,
    ) -> List[str]:
        """Get one page of match IDs for a player."""
        pass


class IAccountRepository(ABC):
    """Interface for account lookups."""

    @abstractmethod
    async def get_account_by_riot_id(self, game_name: str, tag_line: str) -> Optional[Account]:
        """Resolve a Riot id, or None if no such account exists."""
        pass
