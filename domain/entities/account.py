"""Account entity returned by account-v1."""
from dataclasses import dataclass


@dataclass(frozen=True)
class Account:
    """A Riot account; ``puuid`` is the stable key every match endpoint uses."""

    puuid: str
    game_name: str
    tag_line: str

    @property
    def riot_id(self) -> str:
        return f"{self.game_name}#{self.tag_line}"
