"""Team outcome entity."""
from dataclasses import dataclass


@dataclass(frozen=True)
class Team:
    """Represents one team outcome (100 = Blue, 200 = Red)."""

    team_id: int
    win: bool
