"""Match metadata tags used by the strict loss predicate."""
from enum import Enum
from typing import Optional


class GameType(Enum):
    """Values of ``info.gameType`` in match-v5."""

    CUSTOM_GAME = "CUSTOM_GAME"
    MATCHED_GAME = "MATCHED_GAME"
    TUTORIAL_GAME = "TUTORIAL_GAME"

    @classmethod
    def parse(cls, raw: Optional[str]) -> Optional['GameType']:
        """Map a raw tag to a member; the API also reports ``MATCHED``."""
        if not raw:
            return None
        tag = raw.upper()
        if tag == "MATCHED":
            return cls.MATCHED_GAME
        try:
            return cls(tag)
        except ValueError:
            return None


class GameMap(Enum):
    """Map ids from the static ``maps.json``; only the rift variants matter here."""

    SUMMONERS_RIFT_ORIGINAL_SUMMER_VARIANT = 1
    SUMMONERS_RIFT_ORIGINAL_AUTUMN_VARIANT = 2
    SUMMONERS_RIFT = 11
    HOWLING_ABYSS = 12

    @classmethod
    def ranked_maps(cls) -> frozenset:
        """Maps a standard matched game counts on."""
        return frozenset({
            cls.SUMMONERS_RIFT.value,
            cls.SUMMONERS_RIFT_ORIGINAL_SUMMER_VARIANT.value,
            cls.SUMMONERS_RIFT_ORIGINAL_AUTUMN_VARIANT.value,
        })
