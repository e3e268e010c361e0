"""Match repository implementation."""
import logging
from typing import Any, List, Optional

from domain.entities import Match, Participant, Team
from domain.enums import Region
from domain.errors import MatchPayloadError
from domain.interfaces import IMatchRepository
from infrastructure.api import RiotAPIClient

logger = logging.getLogger(__name__)


def _opt_int(value: Any) -> Optional[int]:
    if isinstance(value, bool) or not isinstance(value, int):
        return None
    return value


def _opt_str(value: Any) -> Optional[str]:
    return value if isinstance(value, str) and value else None


class MatchRepository(IMatchRepository):
    """Repository for match data using Riot API, bound to one region."""

    def __init__(self, api_client: RiotAPIClient, region: Region):
        """
        Initialize match repository.

        Args:
            api_client: Riot API client instance (already entered)
            region: Server region whose routing cluster is queried
        """
        self.api_client = api_client
        self.region = region

    async def get_match_ids_by_puuid(
        self,
        puuid: str,
        start_time: int,
        end_time: int,
        start: int = 0,
        count: Optional[int] = None,
    ) -> List[str]:
        """Get one page of match IDs for a summoner."""
        return await self.api_client.get_match_ids_by_puuid(
            region=self.region,
            puuid=puuid,
            start_time=start_time,
            end_time=end_time,
            start=start,
            count=count,
        )

    async def get_match_by_id(self, match_id: str) -> Optional[Match]:
        """
        Get a single match by ID.

        Args:
            match_id: Match identifier

        Returns:
            Match entity or None if not found

        Raises:
            RiotAPIError: transport or HTTP failure
            MatchPayloadError: the body is not a match object
        """
        match_data = await self.api_client.get_match_by_id(self.region, match_id)
        if match_data is None:
            logger.debug(f"Match {match_id} not found in API")
            return None
        return self.parse_match_data(match_data, match_id)

    @classmethod
    def parse_match_data(cls, data: Any, match_id: str) -> Match:
        """Parse raw API match data into a Match entity.

        Only the envelope is mandatory. Missing or mistyped fields inside it
        become None/empty so the loss filter can skip the match on its own terms.
        """
        if not isinstance(data, dict):
            raise MatchPayloadError(match_id, "payload is not an object")
        metadata = data.get('metadata')
        info = data.get('info')
        if not isinstance(metadata, dict) or not isinstance(info, dict):
            raise MatchPayloadError(match_id, "missing metadata/info")

        puuids = metadata.get('participants') or []
        participants = info.get('participants') or []
        teams = info.get('teams') or []

        return Match(
            match_id=_opt_str(metadata.get('matchId')) or match_id,
            game_mode=info.get('gameMode') or '',
            game_type=_opt_str(info.get('gameType')),
            map_id=_opt_int(info.get('mapId')),
            queue_id=_opt_int(info.get('queueId')),
            game_start_timestamp=_opt_int(info.get('gameStartTimestamp')),
            # unusable entries keep their slot as None so both lists stay aligned
            participant_puuids=tuple(_opt_str(p) for p in puuids) if isinstance(puuids, list) else (),
            participants=tuple(
                cls._parse_participant_data(p) if isinstance(p, dict) else None
                for p in participants
            ) if isinstance(participants, list) else (),
            teams=tuple(
                t for t in (cls._parse_team_data(t) for t in teams if isinstance(t, dict)) if t is not None
            ) if isinstance(teams, list) else (),
        )

    @staticmethod
    def _parse_team_data(team_data: dict) -> Optional[Team]:
        """Parse raw team data; a team without an id or win flag is dropped."""
        team_id = _opt_int(team_data.get('teamId'))
        win = team_data.get('win')
        if team_id is None or not isinstance(win, bool):
            return None
        return Team(team_id=team_id, win=win)

    @staticmethod
    def _parse_participant_data(p_data: dict) -> Participant:
        """Parse raw participant data into Participant entity."""
        return Participant(
            puuid=p_data.get('puuid') or '',
            team_id=_opt_int(p_data.get('teamId')),
            champion_id=_opt_int(p_data.get('championId')),
            champion_name=_opt_str(p_data.get('championName')),
            win=p_data.get('win') is True,
        )
