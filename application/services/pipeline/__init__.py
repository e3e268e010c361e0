"""Paginate -> fetch -> filter pipeline."""
from .match_id_paginator import MatchIdPaginator
from .loss_filter_service import LossFilterService
from .match_outcome import Fatal, MatchOutcome, Qualified, Skipped
from .report import chronological, distinct_champions, render_lines

__all__ = [
    "MatchIdPaginator",
    "LossFilterService",
    "MatchOutcome",
    "Qualified",
    "Skipped",
    "Fatal",
    "chronological",
    "distinct_champions",
    "render_lines",
]
