# tests/helpers.py

from __future__ import annotations

import asyncio
from typing import Dict, List, Optional

from domain.entities import Account, Match
from domain.errors import NuzlolckeError
from domain.interfaces import IAccountRepository, IMatchRepository
from infrastructure.repositories import MatchRepository

PUUID = "puuid-me"
OTHER = "puuid-other"

# 2024-04-10T12:00:00Z
T1_MS = 1712750400000


def match_payload(
    match_id: str,
    *,
    puuid: str = PUUID,
    win: bool = False,
    champion_id: Optional[int] = 103,
    champion_name: Optional[str] = "Ahri",
    team_id: int = 100,
    game_type: str = "MATCHED_GAME",
    map_id: int = 11,
    start_ms: Optional[int] = T1_MS,
    include_team: bool = True,
    include_puuid: bool = True,
    drop_participant_detail: bool = False,
) -> dict:
    """Raw match-v5 style payload with the player at position 0 and one opponent."""
    metadata_puuids = [OTHER]
    participants = [
        {"puuid": OTHER, "teamId": 200, "championId": 1, "championName": "Annie", "win": not win},
    ]
    if include_puuid:
        metadata_puuids.insert(0, puuid)
        me = {"puuid": puuid, "teamId": team_id, "win": win}
        if champion_id is not None:
            me["championId"] = champion_id
        if champion_name is not None:
            me["championName"] = champion_name
        participants.insert(0, me)
    if drop_participant_detail:
        # metadata still lists both players, detail list is truncated
        participants = []

    teams = [{"teamId": 200, "win": not win}]
    if include_team:
        teams.insert(0, {"teamId": team_id, "win": win})

    info = {
        "gameType": game_type,
        "gameMode": "CLASSIC",
        "mapId": map_id,
        "queueId": 420,
        "participants": participants,
        "teams": teams,
    }
    if start_ms is not None:
        info["gameStartTimestamp"] = start_ms
    return {"metadata": {"matchId": match_id, "participants": metadata_puuids}, "info": info}


def make_match(match_id: str, **kwargs) -> Match:
    return MatchRepository.parse_match_data(match_payload(match_id, **kwargs), match_id)


class FakeMatchRepository(IMatchRepository):
    """Scripted pages and matches; records every page request."""

    def __init__(
        self,
        pages: Optional[List[List[str]]] = None,
        matches: Optional[Dict[str, Match]] = None,
        failures: Optional[Dict[str, NuzlolckeError]] = None,
        delays: Optional[Dict[str, float]] = None,
        page_failure: Optional[NuzlolckeError] = None,
    ):
        self.pages = list(pages or [])
        self.matches = dict(matches or {})
        self.failures = dict(failures or {})
        self.delays = dict(delays or {})
        self.page_failure = page_failure
        self.page_requests: List[dict] = []
        self.fetched: List[str] = []
        self.completed: List[str] = []

    async def get_match_ids_by_puuid(self, puuid, start_time, end_time, start=0, count=None):
        self.page_requests.append(
            {"puuid": puuid, "start_time": start_time, "end_time": end_time, "start": start, "count": count}
        )
        if self.page_failure is not None:
            raise self.page_failure
        if not self.pages:
            return []
        return list(self.pages.pop(0))

    async def get_match_by_id(self, match_id):
        self.fetched.append(match_id)
        delay = self.delays.get(match_id)
        if delay:
            await asyncio.sleep(delay)
        if match_id in self.failures:
            raise self.failures[match_id]
        self.completed.append(match_id)
        return self.matches.get(match_id)


class FakeAccountRepository(IAccountRepository):
    def __init__(self, accounts: Optional[Dict[str, str]] = None):
        self.accounts = dict(accounts or {})

    async def get_account_by_riot_id(self, game_name, tag_line):
        puuid = self.accounts.get(f"{game_name}#{tag_line}")
        if puuid is None:
            return None
        return Account(puuid=puuid, game_name=game_name, tag_line=tag_line)
