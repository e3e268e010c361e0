"""Champion value object."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional

from .participant import Participant

UNKNOWN_CHAMPION = "UNKNOWN"


@dataclass(frozen=True)
class Champion:
    """A champion identified by its numeric key; the name is display-only."""

    champion_id: int
    name: Optional[str] = field(default=None, compare=False)

    @property
    def display_name(self) -> str:
        return self.name or UNKNOWN_CHAMPION

    @classmethod
    def resolve(cls, participant: Participant) -> Optional['Champion']:
        """Build the champion a participant played, or None when the id is unusable."""
        cid = participant.champion_id
        if isinstance(cid, bool) or not isinstance(cid, int) or cid <= 0:
            return None
        return cls(champion_id=cid, name=participant.champion_name or None)
