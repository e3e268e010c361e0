"""Infrastructure layer - API client and repositories."""
from .api import RiotAPIClient, RateLimiter, EndpointRateLimiter
from .repositories import MatchRepository, AccountRepository

__all__ = [
    'RiotAPIClient',
    'RateLimiter',
    'EndpointRateLimiter',
    'MatchRepository',
    'AccountRepository',
]
