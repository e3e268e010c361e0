"""Report layouts."""
from enum import Enum


class OutputMode(Enum):
    CHAMPIONS = "champions"  # one line per distinct champion
    LOSSES = "losses"        # one line per loss

    @classmethod
    def from_string(cls, value: str) -> 'OutputMode':
        try:
            return cls(value.strip().lower())
        except ValueError:
            raise ValueError(f"Unknown output mode: {value}") from None
