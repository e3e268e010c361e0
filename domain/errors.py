"""Error taxonomy shared by every layer.

Only these exceptions are allowed to abort a run. Incomplete match data is
never raised; the loss filter turns it into a skipped outcome instead.
"""
from __future__ import annotations

from typing import Optional


class NuzlolckeError(Exception):
    """Base class for fatal errors."""


class ConfigurationError(NuzlolckeError):
    """A required setting is missing or malformed."""

    def __init__(self, key: str, message: Optional[str] = None):
        self.key = key
        super().__init__(message or f"{key} is not set in the environment")


class SummonerNotFoundError(NuzlolckeError):
    """The Riot id could not be resolved to an account."""

    def __init__(self, riot_id: str):
        self.riot_id = riot_id
        super().__init__(f"Can't find summoner {riot_id}")


class RiotAPIError(NuzlolckeError):
    """Transport, HTTP or deserialization failure talking to the Riot API."""

    def __init__(self, message: str, status_code: Optional[int] = None, url: Optional[str] = None):
        self.status_code = status_code
        self.url = url
        super().__init__(message)


class MatchPayloadError(NuzlolckeError):
    """A match payload was returned but is not a match object at all."""

    def __init__(self, match_id: str, detail: str = ""):
        self.match_id = match_id
        msg = f"Malformed match payload for {match_id}"
        if detail:
            msg += f": {detail}"
        super().__init__(msg)
