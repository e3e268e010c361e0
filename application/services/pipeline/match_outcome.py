"""Per-match result of the loss filter."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Union

from domain.entities import LossResult
from domain.enums import SkipReason
from domain.errors import NuzlolckeError


@dataclass(frozen=True)
class Qualified:
    loss: LossResult

    @property
    def match_id(self) -> str:
        return self.loss.match_id


@dataclass(frozen=True)
class Skipped:
    match_id: str
    reason: SkipReason


@dataclass(frozen=True)
class Fatal:
    match_id: str
    error: NuzlolckeError


MatchOutcome = Union[Qualified, Skipped, Fatal]
