"""
Core Models Package

Immutable, validated data models that serve as the single source of truth
for the editor and the document builder.

| Model | Purpose |
|-------|---------|
| `Color` | Named palette colour with `#RRGGBB` value |
| `GridSnapshot` | Full cell contents of the grid at one instant |
| `AnswerOption` | One answer token with its display text |
| `SingleQuestion` / `MultipleQuestion` | Tagged question variants |
| `BrushTool` | Token + colour currently painted |
| `Activity` | Title, grid and questions persisted together |
"""

from .colors import Color, SCHOOL_PALETTE, next_available, contrast_color
from .grid import GridSnapshot, SUPPORTED_GRID_SIZES, DEFAULT_GRID_SIZE
from .questions import (
    AnswerOption,
    SingleQuestion,
    MultipleQuestion,
    Question,
    BrushTool,
    QUESTION_TYPES,
)
from .activity import Activity

__all__ = [
    "Color",
    "SCHOOL_PALETTE",
    "next_available",
    "contrast_color",
    "GridSnapshot",
    "SUPPORTED_GRID_SIZES",
    "DEFAULT_GRID_SIZE",
    "AnswerOption",
    "SingleQuestion",
    "MultipleQuestion",
    "Question",
    "BrushTool",
    "QUESTION_TYPES",
    "Activity",
]
