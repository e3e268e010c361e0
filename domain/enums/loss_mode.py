"""Strictness of the loss predicate."""
from enum import Enum


class LossMode(Enum):
    """PERMISSIVE checks only the win flag; STRICT also requires a matched game on the rift."""

    PERMISSIVE = "permissive"
    STRICT = "strict"

    @classmethod
    def from_string(cls, value: str) -> 'LossMode':
        try:
            return cls(value.strip().lower())
        except ValueError:
            raise ValueError(f"Unknown loss mode: {value}") from None
