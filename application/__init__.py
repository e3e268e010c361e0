"""Application layer - Pipeline services and use cases."""
from .services import LossFilterService, MatchIdPaginator
from .use_cases import TrackLossesUseCase

__all__ = [
    'LossFilterService',
    'MatchIdPaginator',
    'TrackLossesUseCase',
]
