"""Domain layer - Business entities, enums, errors and interfaces."""
from .entities import Match, Participant, Team, Account, Champion, LossResult, MatchWindow
from .enums import Region, GameMap, GameType, LossMode, OutputMode, SkipReason
from .interfaces import IMatchRepository, IAccountRepository

__all__ = [
    # Entities
    'Match',
    'Participant',
    'Team',
    'Account',
    'Champion',
    'LossResult',
    'MatchWindow',
    # Enums
    'Region',
    'GameMap',
    'GameType',
    'LossMode',
    'OutputMode',
    'SkipReason',
    # Interfaces
    'IMatchRepository',
    'IAccountRepository',
]
