"""Match entity representing a match-v5 record."""
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Optional

from .participant import Participant
from .team import Team


@dataclass(frozen=True)
class Match:
    """Represents a League of Legends match.

    ``participant_puuids`` comes from the metadata block and is positionally
    aligned with ``participants``: index *i* in one names index *i* in the other.
    Entries that could not be parsed stay in place as None.
    """

    # Match identity
    match_id: str

    # Match metadata
    game_mode: str = ""
    game_type: Optional[str] = None
    map_id: Optional[int] = None
    queue_id: Optional[int] = None

    # Timing
    game_start_timestamp: Optional[int] = None  # Unix timestamp milliseconds

    participant_puuids: tuple[Optional[str], ...] = field(default_factory=tuple)
    participants: tuple[Optional[Participant], ...] = field(default_factory=tuple)
    teams: tuple[Team, ...] = field(default_factory=tuple)

    @property
    def game_start(self) -> Optional[datetime]:
        """Start time as an aware UTC datetime, or None when unrepresentable."""
        ts = self.game_start_timestamp
        if isinstance(ts, bool) or not isinstance(ts, int):
            return None
        try:
            return datetime.fromtimestamp(ts / 1000, tz=timezone.utc)
        except (OverflowError, OSError, ValueError):
            return None

    def participant_index(self, puuid: str) -> Optional[int]:
        """Position of ``puuid`` in the metadata participant list."""
        try:
            return self.participant_puuids.index(puuid)
        except ValueError:
            return None

    def participant_at(self, index: int) -> Optional[Participant]:
        if 0 <= index < len(self.participants):
            return self.participants[index]
        return None

    def team_by_id(self, team_id: Optional[int]) -> Optional[Team]:
        if team_id is None:
            return None
        return next((t for t in self.teams if t.team_id == team_id), None)
