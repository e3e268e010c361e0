"""Infrastructure repositories module."""
from .match_repository import MatchRepository
from .account_repository import AccountRepository

__all__ = [
    'MatchRepository',
    'AccountRepository',
]
