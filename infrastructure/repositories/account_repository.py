"""Account repository implementation."""
import logging
from typing import Optional

from domain.entities import Account
from domain.enums import Region
from domain.errors import RiotAPIError
from domain.interfaces import IAccountRepository
from infrastructure.api import RiotAPIClient

logger = logging.getLogger(__name__)


class AccountRepository(IAccountRepository):
    """Resolves Riot ids through account-v1."""

    def __init__(self, api_client: RiotAPIClient, region: Region):
        self.api_client = api_client
        self.region = region

    async def get_account_by_riot_id(self, game_name: str, tag_line: str) -> Optional[Account]:
        data = await self.api_client.get_account_by_riot_id(self.region, game_name, tag_line)
        if data is None:
            logger.info(f"No account for {game_name}#{tag_line}")
            return None
        puuid = data.get('puuid')
        if not isinstance(puuid, str) or not puuid:
            raise RiotAPIError(f"Account payload for {game_name}#{tag_line} has no puuid")
        return Account(
            puuid=puuid,
            game_name=data.get('gameName') or game_name,
            tag_line=data.get('tagLine') or tag_line,
        )
