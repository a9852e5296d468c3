"""
Module: core.models.activity

Purpose:
    Activity - the unit persisted by the external store: a title, the grid
    snapshot and the question list.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional

from .grid import GridSnapshot
from .questions import Question


@dataclass(frozen=True)
class Activity:
    """
    Complete paint-by-answer activity (immutable).

    Attributes:
        title: Title printed at the top of the first page
        grid: Latest committed grid snapshot
        questions: Questions in legend order (Q1, Q2, ...)
        id: External store identifier, None for unsaved activities
        category_id: Optional template category
    """

    title: str
    grid: GridSnapshot
    questions: tuple[Question, ...] = field(default_factory=tuple)
    id: Optional[str] = None
    category_id: Optional[str] = None

    def __post_init__(self) -> None:
        if not isinstance(self.questions, tuple):
            object.__setattr__(self, "questions", tuple(self.questions))

    @property
    def grid_size(self) -> int:
        return self.grid.size
