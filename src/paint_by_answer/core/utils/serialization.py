"""
Serialization Utilities

Converts between the external store's row-shaped payloads and the core
models.

Stored shape (one activity):

    {
        "id": 42,
        "title": "Fractions revision",
        "grid_size": 15,
        "grid_data": ["", "3/4", ...] | null,
        "questions": [
            {
                "id": 7,
                "text": "1/2 + 1/4",
                "type": "single" | "multiple",
                "correct_option_id": 11,
                "answer_options": [
                    {"id": 11, "text": "", "answer": "3/4",
                     "color": "{\"name\": \"Red\", \"value\": \"#FF0000\"}"}
                ]
            }
        ]
    }

Templates use `template_questions` / `template_answer_options` instead.
Option colours are stored as JSON strings; anything that does not parse to
a valid colour is read as "no colour" and the option is left unbound.
"""

from __future__ import annotations

import json
import logging
from typing import Any, Optional

from ..models.activity import Activity
from ..models.colors import Color
from ..models.grid import GridSnapshot
from ..models.questions import AnswerOption, MultipleQuestion, Question, SingleQuestion
from ..schemas.validator import ValidationError, validate_activity

logger = logging.getLogger(__name__)


# ─────────────────────────────────────────────────────────────────────────────
# Grid Serialization
# ─────────────────────────────────────────────────────────────────────────────

def serialize_grid(grid: GridSnapshot) -> dict[str, Any]:
    """Serialize a grid as {"size": n, "cells": [...]} (row-major)."""
    return {"size": grid.size, "cells": grid.to_list()}


def deserialize_grid(data: dict[str, Any]) -> GridSnapshot:
    """
    Deserialize a grid snapshot.

    Empty strings are kept as blank cells; None is not accepted in place of "".

    Raises:
        ValueError: If the cell count does not match the size
    """
    return GridSnapshot.from_cells(int(data["size"]), data["cells"])


# ─────────────────────────────────────────────────────────────────────────────
# Colour Parsing
# ─────────────────────────────────────────────────────────────────────────────

def parse_stored_color(raw: Any) -> Optional[Color]:
    """
    Parse a stored option colour.

    Accepts a JSON string or an already-decoded mapping. Returns None for
    missing or malformed data instead of raising.
    """
    if raw is None or raw == "":
        return None
    try:
        data = json.loads(raw) if isinstance(raw, str) else raw
        return Color.from_dict(data)
    except (json.JSONDecodeError, KeyError, TypeError, ValueError) as e:
        logger.warning(f"Ignoring malformed stored colour {raw!r}: {e}")
        return None


def dump_color(color: Optional[Color]) -> Optional[str]:
    """Encode a colour the way the store keeps it (JSON string)."""
    if color is None:
        return None
    return json.dumps(color.to_dict())


# ─────────────────────────────────────────────────────────────────────────────
# Question Serialization
# ─────────────────────────────────────────────────────────────────────────────

def question_from_payload(data: dict[str, Any]) -> Question:
    """
    Build a Question from a stored question row.

    Raises:
        ValidationError: If a multiple-choice question has no options
    """
    question_id = str(data["id"])
    text = data.get("text") or ""
    options_data = data.get("answer_options") or data.get("template_answer_options") or []
    options = [AnswerOption.from_dict(opt) for opt in options_data]

    if data["type"] == "single":
        if options:
            option = options[0]
            color = parse_stored_color(options_data[0].get("color"))
        else:
            fallback_id = data.get("correct_option_id")
            option = AnswerOption(id=str(fallback_id) if fallback_id is not None else f"{question_id}-a")
            color = None
        return SingleQuestion(id=question_id, text=text, option=option, color=color)

    if not options:
        raise ValidationError(
            f"Multiple-choice question {question_id} has no answer options",
            path=f"questions/{question_id}",
        )

    option_colors: dict[str, Color] = {}
    for option, raw in zip(options, options_data):
        color = parse_stored_color(raw.get("color"))
        if color is not None:
            option_colors[option.id] = color

    correct = data.get("correct_option_id")
    correct_id = str(correct) if correct is not None else options[0].id
    return MultipleQuestion(
        id=question_id,
        text=text,
        options=tuple(options),
        correct_option_id=correct_id,
        option_colors=option_colors,
    )


def question_to_payload(question: Question) -> dict[str, Any]:
    """Encode a Question as a stored question row."""
    if isinstance(question, SingleQuestion):
        option_rows = [{**question.option.to_dict(), "color": dump_color(question.color)}]
    else:
        option_rows = [
            {**opt.to_dict(), "color": dump_color(question.option_colors.get(opt.id))}
            for opt in question.options
        ]
    return {
        "id": question.id,
        "text": question.text,
        "type": question.type,
        "correct_option_id": question.correct_option_id,
        "answer_options": option_rows,
    }


# ─────────────────────────────────────────────────────────────────────────────
# Activity Serialization
# ─────────────────────────────────────────────────────────────────────────────

def activity_from_payload(data: dict[str, Any], *, validate: bool = True) -> Activity:
    """
    Deserialize an activity (or template) row.

    Args:
        data: Payload from the external store
        validate: Whether to validate against the schema first

    Returns:
        Activity instance; a null `grid_data` becomes a blank grid

    Raises:
        ValidationError: If validate=True and data is invalid
    """
    if validate:
        validate_activity(data)

    size = int(data["grid_size"])
    grid_data = data.get("grid_data")
    grid = GridSnapshot.from_cells(size, grid_data) if grid_data is not None else GridSnapshot.empty(size)

    rows = data.get("questions") or data.get("template_questions") or []
    questions = tuple(question_from_payload(row) for row in rows)

    activity_id = data.get("id")
    category_id = data.get("category_id")
    logger.debug(f"Loaded activity {activity_id!r} with {len(questions)} questions ({size}x{size})")
    return Activity(
        title=data.get("title") or "",
        grid=grid,
        questions=questions,
        id=str(activity_id) if activity_id is not None else None,
        category_id=str(category_id) if category_id is not None else None,
    )


def activity_to_payload(activity: Activity) -> dict[str, Any]:
    """Serialize an activity to the stored row shape."""
    payload: dict[str, Any] = {
        "title": activity.title,
        "grid_size": activity.grid.size,
        "grid_data": activity.grid.to_list(),
        "questions": [question_to_payload(q) for q in activity.questions],
    }
    if activity.id is not None:
        payload["id"] = activity.id
    if activity.category_id is not None:
        payload["category_id"] = activity.category_id
    return payload
