"""Domain interfaces."""
from .repository import IMatchRepository, IAccountRepository

__all__ = [
    'IMatchRepository',
    'IAccountRepository',
]
