"""Loss result and query window value objects."""
from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime

from ..errors import ConfigurationError
from .champion import Champion


@dataclass(frozen=True)
class LossResult:
    """One qualifying loss. ``date`` is an aware UTC datetime."""

    champion: Champion
    date: datetime
    match_id: str


@dataclass(frozen=True)
class MatchWindow:
    """Inclusive time range used to scope match-id listing."""

    start: datetime
    end: datetime

    def __post_init__(self) -> None:
        if self.end < self.start:
            raise ConfigurationError(
                "NUZLOLCKE_END_DATE",
                f"window end {self.end.isoformat()} is before start {self.start.isoformat()}",
            )

    @property
    def start_timestamp(self) -> int:
        """Epoch seconds."""
        return int(self.start.timestamp())

    @property
    def end_timestamp(self) -> int:
        """Epoch seconds."""
        return int(self.end.timestamp())
