"""
Module: editor

Purpose:
    Interactive editing core: undo history, grid painting, answer bindings
    and the session controller tying them together.

Key Functions:
    - paint(), erase_by_answers(), replace_answer(), clear(), resize()
    - resolve(): Answer -> colour/reference bindings

Key Classes:
    - HistoryStore: Generic undo/redo store
    - AnswerBindings: Resolved bindings
    - EditorSession: One editing session
"""

from .history import HistoryStore
from .paint import paint, erase_by_answers, replace_answer, clear, resize, BRUSH_SIZES
from .bindings import AnswerBindings, resolve, used_colors, question_reference
from .questions import brush_for, new_single_question, to_multiple, to_single, retype
from .session import EditorSession

__all__ = [
    "HistoryStore",
    "paint",
    "erase_by_answers",
    "replace_answer",
    "clear",
    "resize",
    "BRUSH_SIZES",
    "AnswerBindings",
    "resolve",
    "used_colors",
    "question_reference",
    "brush_for",
    "new_single_question",
    "to_multiple",
    "to_single",
    "retype",
    "EditorSession",
]
