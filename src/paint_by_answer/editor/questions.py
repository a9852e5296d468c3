"""
Module: editor.questions

Purpose:
    Pure helpers for editing questions: creating blank questions, switching
    between single and multiple choice, and working out which grid tokens an
    edit renames or removes. Nothing here mutates a question; every helper
    returns new instances.

Key Functions:
    - new_single_question(): Blank single-answer question with a free colour
    - to_multiple() / to_single() / retype(): Switch question type
    - brush_for(): Brush that paints a question's answer
    - renamed_tokens(): (old, new) token pairs implied by an edit
    - dropped_tokens(): Tokens an edit no longer owns

Dependencies:
    - core.models: Question variants, palette

Used By:
    - editor.session: Question edit handling
"""

from __future__ import annotations

from typing import Iterable, Optional, Sequence

from paint_by_answer.core.models import (
    QUESTION_TYPES,
    SCHOOL_PALETTE,
    AnswerOption,
    BrushTool,
    Color,
    MultipleQuestion,
    Question,
    SingleQuestion,
    next_available,
)

MULTIPLE_OPTION_COUNT = 4


def option_letter(index: int) -> str:
    """Letter shown for the option at 0-based `index` (a, b, c, ...)."""
    return chr(ord("a") + index)


def _pick_color(palette: Sequence[Color], used: set[str], fallback_index: int) -> Color:
    color = next_available(palette, used)
    if color is None:
        color = palette[fallback_index % len(palette)]
    return color


def new_single_question(
    question_id: str,
    used: Iterable[str] = (),
    palette: Sequence[Color] = SCHOOL_PALETTE,
) -> SingleQuestion:
    """Blank single-answer question coloured with the first unused palette colour."""
    return SingleQuestion(
        id=question_id,
        text="",
        option=AnswerOption(id=f"{question_id}-a"),
        color=_pick_color(palette, set(used), 0),
    )


def to_multiple(
    question: Question,
    used: Iterable[str] = (),
    palette: Sequence[Color] = SCHOOL_PALETTE,
    option_count: int = MULTIPLE_OPTION_COUNT,
) -> MultipleQuestion:
    """
    Convert a question to multiple choice.

    Creates `option_count` options whose tokens are "{question_id}-a",
    "{question_id}-b", ... so they are unique across questions. Existing
    option texts are kept by position. Each option gets the next unused
    palette colour, cycling through the palette once it is exhausted.
    The first option is marked correct.
    """
    if isinstance(question, MultipleQuestion):
        return question

    locally_used = set(used)
    options = []
    option_colors: dict[str, Color] = {}
    for i in range(option_count):
        token = f"{question.id}-{option_letter(i)}"
        text = question.options[i].text if i < len(question.options) else ""
        option = AnswerOption(id=token, text=text, answer=token)
        color = _pick_color(palette, locally_used, i)
        locally_used.add(color.value)
        option_colors[option.id] = color
        options.append(option)

    return MultipleQuestion(
        id=question.id,
        text=question.text,
        options=tuple(options),
        correct_option_id=options[0].id,
        option_colors=option_colors,
    )


def to_single(
    question: Question,
    used: Iterable[str] = (),
    palette: Sequence[Color] = SCHOOL_PALETTE,
) -> SingleQuestion:
    """
    Convert a question to single answer.

    Keeps the first option; its option colour becomes the question colour,
    or the first unused palette colour when it had none.
    """
    if isinstance(question, SingleQuestion):
        return question

    first = question.options[0]
    color = question.option_colors.get(first.id) or _pick_color(palette, set(used), 0)
    return SingleQuestion(id=question.id, text=question.text, option=first, color=color)


def retype(
    question: Question,
    new_type: str,
    used: Iterable[str] = (),
    palette: Sequence[Color] = SCHOOL_PALETTE,
) -> Question:
    if new_type not in QUESTION_TYPES:
        raise ValueError(f"Unknown question type: {new_type!r}; expected one of {QUESTION_TYPES}")
    if new_type == "single":
        return to_single(question, used, palette)
    return to_multiple(question, used, palette)


def brush_for(question: Question) -> Optional[BrushTool]:
    """
    Brush that paints `question`'s answer.

    Single: its token and colour. Multiple: the correct option's token and
    that option's colour. None when the token is blank or no colour is set.
    """
    option = question.correct_option
    if option is None or not option.has_answer:
        return None
    color = question.color_of_option(option.id)
    if color is None:
        return None
    return BrushTool(answer=option.answer, color=color)


def renamed_tokens(old: Question, new: Question) -> list[tuple[str, str]]:
    """
    Grid renames implied by editing `old` into `new`.

    - Single answer text changed: old token -> new token
    - Multiple correct option changed: old correct token -> new correct token

    Blank old tokens never produce a rename.
    """
    if isinstance(old, SingleQuestion) and isinstance(new, SingleQuestion):
        before, after = old.option.answer, new.option.answer
        if before != after and before.strip():
            return [(before, after)]
        return []

    if isinstance(old, MultipleQuestion) and isinstance(new, MultipleQuestion):
        if old.correct_option_id == new.correct_option_id:
            return []
        before_opt, after_opt = old.correct_option, new.correct_option
        if before_opt is None or after_opt is None or not before_opt.answer.strip():
            return []
        return [(before_opt.answer, after_opt.answer)]

    return []


def dropped_tokens(old: Question, new: Optional[Question]) -> set[str]:
    """Tokens `old` owned that `new` no longer owns (all of them if new is None)."""
    before = set(old.answers)
    if new is None:
        return before
    return before - set(new.answers)
