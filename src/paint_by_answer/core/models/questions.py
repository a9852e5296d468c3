"""
Module: core.models.questions

Purpose:
    Question models for the activity legend. A question is either a
    SingleQuestion (one answer token, one colour) or a MultipleQuestion
    (several options, each with its own colour, one marked correct).

Key Classes:
    - AnswerOption: One answer token with display text
    - SingleQuestion: One option bound to the question's colour
    - MultipleQuestion: Options bound to per-option colours
    - BrushTool: Token + colour currently selected for painting

Dependencies:
    - .colors.Color

Used By:
    - editor.bindings: Answer -> colour/reference resolution
    - editor.session: Question editing
    - builder.layout.composer: Legend blocks

Design Note:
    The two variants are separate classes rather than one class with optional
    fields, so every consumer handles both shapes explicitly.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Optional, Union

from .colors import Color

QUESTION_TYPES = ("single", "multiple")


@dataclass(frozen=True)
class AnswerOption:
    """
    Answer option (immutable).

    Attributes:
        id: Option identifier, unique within its question
        text: Display text shown in the legend
        answer: Literal token painted into grid cells
    """

    id: str
    text: str = ""
    answer: str = ""

    @property
    def has_answer(self) -> bool:
        return self.answer.strip() != ""

    def to_dict(self) -> dict:
        return {"id": self.id, "text": self.text, "answer": self.answer}

    @classmethod
    def from_dict(cls, data: dict) -> "AnswerOption":
        return cls(
            id=str(data["id"]),
            text=data.get("text") or "",
            answer=data.get("answer") or "",
        )


@dataclass(frozen=True)
class SingleQuestion:
    """
    Question with exactly one answer and one colour (immutable).

    Attributes:
        id: Question identifier
        text: Question prompt
        option: The only answer option
        color: Paint colour, None when unset or unparseable
    """

    id: str
    text: str
    option: AnswerOption
    color: Optional[Color] = None

    @property
    def type(self) -> str:
        return "single"

    @property
    def options(self) -> tuple[AnswerOption, ...]:
        return (self.option,)

    @property
    def correct_option_id(self) -> str:
        return self.option.id

    @property
    def correct_option(self) -> AnswerOption:
        return self.option

    @property
    def answers(self) -> tuple[str, ...]:
        """Non-blank answer tokens owned by this question."""
        return (self.option.answer,) if self.option.has_answer else ()

    def color_of_option(self, option_id: str) -> Optional[Color]:
        return self.color if option_id == self.option.id else None


@dataclass(frozen=True)
class MultipleQuestion:
    """
    Multiple-choice question (immutable).

    Every option owns its own colour; the grid is painted with the correct
    option's token, and the legend lists all options so the student picks
    the matching colour.

    Attributes:
        id: Question identifier
        text: Question prompt
        options: Options in display order (a, b, c, ...)
        correct_option_id: Id of the correct option
        option_colors: option id -> colour; options without a usable colour are absent
    """

    id: str
    text: str
    options: tuple[AnswerOption, ...]
    correct_option_id: str
    option_colors: Dict[str, Color] = field(default_factory=dict)

    def __post_init__(self) -> None:
        if not isinstance(self.options, tuple):
            object.__setattr__(self, "options", tuple(self.options))
        if not self.options:
            raise ValueError(f"Multiple-choice question {self.id!r} needs at least one option")

    @property
    def type(self) -> str:
        return "multiple"

    @property
    def correct_option(self) -> Optional[AnswerOption]:
        for option in self.options:
            if option.id == self.correct_option_id:
                return option
        return None

    @property
    def answers(self) -> tuple[str, ...]:
        return tuple(opt.answer for opt in self.options if opt.has_answer)

    def color_of_option(self, option_id: str) -> Optional[Color]:
        return self.option_colors.get(option_id)


Question = Union[SingleQuestion, MultipleQuestion]


@dataclass(frozen=True)
class BrushTool:
    """
    Currently selected paint brush.

    Attributes:
        answer: Token written into painted cells
        color: Colour shown for the token
    """

    answer: str
    color: Optional[Color] = None

    @property
    def is_blank(self) -> bool:
        return self.answer.strip() == ""
