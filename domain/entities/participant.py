"""Participant entity representing a player in a match."""
from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class Participant:
    """One entry of ``info.participants``; only the fields the loss filter reads."""

    puuid: str
    team_id: Optional[int]
    champion_id: Optional[int] = None
    champion_name: Optional[str] = None
    win: bool = False
