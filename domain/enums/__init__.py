"""Domain enumerations."""
from .region import Region
from .game import GameMap, GameType
from .loss_mode import LossMode
from .output_mode import OutputMode
from .skip_reason import SkipReason

__all__ = [
    'Region',
    'GameMap',
    'GameType',
    'LossMode',
    'OutputMode',
    'SkipReason',
]
