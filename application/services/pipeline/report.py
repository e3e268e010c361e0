"""Reductions and line rendering for the loss report."""
from __future__ import annotations

from typing import Iterable, Iterator, List

from domain.entities import Champion, LossResult
from domain.enums import OutputMode

DATE_FORMAT = "%Y-%m-%d %H:%M"


def distinct_champions(losses: Iterable[LossResult]) -> List[Champion]:
    """Champions in the order of their first loss in ``losses``, each listed once."""
    seen: set = set()
    champions: List[Champion] = []
    for loss in losses:
        if loss.champion not in seen:
            seen.add(loss.champion)
            champions.append(loss.champion)
    return champions


def chronological(losses: Iterable[LossResult]) -> List[LossResult]:
    # oldest first regardless of listing order, so the champion list follows
    # first-loss date; ties keep match id order
    return sorted(losses, key=lambda loss: (loss.date, loss.match_id))


def render_lines(losses: Iterable[LossResult], mode: OutputMode) -> Iterator[str]:
    ordered = chronological(losses)
    if mode is OutputMode.CHAMPIONS:
        for champion in distinct_champions(ordered):
            yield champion.display_name
        return
    for loss in ordered:
        local = loss.date.astimezone()
        yield f"{loss.champion.display_name}\t{local.strftime(DATE_FORMAT)}\t{loss.match_id}"
