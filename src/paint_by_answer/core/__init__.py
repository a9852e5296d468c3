"""
Paint-by-Answer Core Package

Shared data models and utilities used by the editor and the document builder.

**DESIGN RULES:**

1. **Immutable Data Models**
   - Grid snapshots, questions and colours are frozen dataclasses.
   - Edits always produce new instances, so snapshots can be stored in the
     undo history and handed to persistence without copying.

2. **Tagged Questions**
   - A question is either a `SingleQuestion` or a `MultipleQuestion`.
   - Code branches with `isinstance` instead of checking optional fields.

3. **Row-Major Grid**
   - A grid is `size * size` strings, index = row * size + col.
   - The empty string is a blank cell, never "missing".
"""

from .models import (
    Color,
    GridSnapshot,
    AnswerOption,
    SingleQuestion,
    MultipleQuestion,
    Question,
    BrushTool,
    Activity,
)

__all__ = [
    "Color",
    "GridSnapshot",
    "AnswerOption",
    "SingleQuestion",
    "MultipleQuestion",
    "Question",
    "BrushTool",
    "Activity",
]
