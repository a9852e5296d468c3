"""
Module: builder.layout

Purpose:
    Page layout for activity export.
    Converts the grid snapshot and the question list into positioned page
    plans: the grid once on page 1, the legend flowed beside and below it.

Key Functions:
    - paginate(): Arrange grid and legend onto pages
    - compose_block(): Legend block for one question
    - compose_grid(): Fixed-size grid region

Key Classes:
    - LayoutConfig: Configuration for page layout
    - LayoutBlock: Legend block for one question
    - PagePlan: Single page layout plan

Dependencies:
    - reportlab: Font metrics for text wrapping
    - editor.bindings: Labels and colours

Used By:
    - builder.controller: Export pipeline
"""

from .config import LayoutConfig
from .models import (
    LegendLine,
    LayoutBlock,
    BlockPlacement,
    GridCell,
    GridPlacement,
    PagePlan,
    LayoutResult,
    REGION_SIDE,
    REGION_BELOW,
)
from .composer import compose_block, compose_grid, wrap_text
from .paginator import paginate

__all__ = [
    # Config
    "LayoutConfig",
    # Models
    "LegendLine",
    "LayoutBlock",
    "BlockPlacement",
    "GridCell",
    "GridPlacement",
    "PagePlan",
    "LayoutResult",
    "REGION_SIDE",
    "REGION_BELOW",
    # Functions
    "compose_block",
    "compose_grid",
    "wrap_text",
    "paginate",
]
