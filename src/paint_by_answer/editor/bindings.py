"""
Module: editor.bindings

Purpose:
    Derive, from the question list, how each answer token is displayed:
    its paint colour, its grid reference, and whether it is duplicated.

Key Functions:
    - resolve(): Build AnswerBindings for a question list
    - used_colors(): Colour values already bound to questions

Key Classes:
    - AnswerBindings: token -> colour, token -> reference, duplicate tokens

Rules:
    - Single question: token -> question colour, reference = the token itself
    - Multiple question: token -> option colour, reference = "Q{n}" (1-based),
      so every option of the same question looks identical in the grid
    - Duplicates: non-blank tokens used by more than one option anywhere;
      informational only, never blocks painting or export

Dependencies:
    - core.models: Question variants, Color

Used By:
    - editor.session: Duplicate warnings, brush colours
    - builder.layout: Grid labels and cell fills
"""

from __future__ import annotations

from collections import Counter
from dataclasses import dataclass, field
from typing import Dict, FrozenSet, Iterable, Optional

from paint_by_answer.core.models import Color, MultipleQuestion, Question, SingleQuestion


def question_reference(number: int) -> str:
    """Reference label for the question at 1-based position `number`."""
    return f"Q{number}"


@dataclass(frozen=True)
class AnswerBindings:
    """
    Display bindings for answer tokens.

    Attributes:
        color_of: token -> paint colour
        ref_of: token -> label shown in grid cells
        duplicates: tokens used by more than one option
    """

    color_of: Dict[str, Color] = field(default_factory=dict)
    ref_of: Dict[str, str] = field(default_factory=dict)
    duplicates: FrozenSet[str] = frozenset()

    def color_for(self, token: str) -> Optional[Color]:
        return self.color_of.get(token)

    def reference_for(self, token: str) -> str:
        """Label for a cell; unbound tokens show their literal text."""
        return self.ref_of.get(token, token)

    def is_duplicate(self, token: str) -> bool:
        return token in self.duplicates


def resolve(questions: Iterable[Question]) -> AnswerBindings:
    """
    Resolve colour and reference bindings in a single pass.

    Later questions win when two questions bind the same token; the token
    is also reported in `duplicates`.
    """
    color_of: dict[str, Color] = {}
    ref_of: dict[str, str] = {}
    counts: Counter[str] = Counter()

    for number, question in enumerate(questions, start=1):
        for option in question.options:
            if option.has_answer:
                counts[option.answer] += 1

        if isinstance(question, SingleQuestion):
            answer = question.option.answer
            if question.color is not None and answer:
                color_of[answer] = question.color
                ref_of[answer] = answer
        elif isinstance(question, MultipleQuestion):
            reference = question_reference(number)
            for option in question.options:
                color = question.option_colors.get(option.id)
                if color is not None and option.answer:
                    color_of[option.answer] = color
                    ref_of[option.answer] = reference
        else:
            raise TypeError(f"Unknown question type: {type(question).__name__}")

    duplicates = frozenset(token for token, count in counts.items() if count > 1)
    return AnswerBindings(color_of=color_of, ref_of=ref_of, duplicates=duplicates)


def used_colors(questions: Iterable[Question]) -> set[str]:
    """Colour values bound to any question or option."""
    used: set[str] = set()
    for question in questions:
        if isinstance(question, SingleQuestion):
            if question.color is not None:
                used.add(question.color.value)
        else:
            used.update(color.value for color in question.option_colors.values())
    return used
