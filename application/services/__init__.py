"""Application services root exports."""
from .pipeline import LossFilterService, MatchIdPaginator

__all__ = [
    "LossFilterService",
    "MatchIdPaginator",
]
