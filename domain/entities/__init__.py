"""Domain entities."""
from .participant import Participant
from .team import Team
from .match import Match
from .account import Account
from .champion import Champion, UNKNOWN_CHAMPION
from .loss_result import LossResult, MatchWindow

__all__ = [
    'Participant',
    'Team',
    'Match',
    'Account',
    'Champion',
    'UNKNOWN_CHAMPION',
    'LossResult',
    'MatchWindow',
]
