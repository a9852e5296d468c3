"""
Module: builder.layout.models

Purpose:
    Data models for page layout.
    Immutable dataclasses describing legend blocks, grid cells, placements
    and pages. Together they form the page plan handed to a renderer:
    every element carries absolute pixel coordinates measured from the
    top-left corner of its page.

Key Classes:
    - LegendLine: One swatch + wrapped text line group
    - LayoutBlock: All legend lines for one question
    - BlockPlacement: Block positioned in a column
    - GridCell / GridPlacement: Grid rendering
    - PagePlan: Complete page layout
    - LayoutResult: Final layout output

Dependencies:
    - core.models.Color
    - dataclasses (std)

Used By:
    - builder.layout.composer: Creates blocks and grids
    - builder.layout.paginator: Creates PagePlans
    - builder.output: Draws PagePlans
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional

from paint_by_answer.core.models import Color

REGION_SIDE = "side"
REGION_BELOW = "below"


@dataclass(frozen=True)
class LegendLine:
    """
    A colour swatch followed by wrapped text.

    Attributes:
        text_lines: Text already wrapped to the block width
        swatch: Swatch colour, None for headings or unbound options
        bold: Render in bold (multiple-choice headings)
        font_size: Font size in points
        line_height: Height of one text line in pixels
        indent: Text x offset from the block's left edge
    """

    text_lines: tuple[str, ...]
    swatch: Optional[Color]
    bold: bool
    font_size: float
    line_height: int
    indent: int
    swatch_size: int = 0

    @property
    def height(self) -> int:
        return max(len(self.text_lines) * self.line_height, self.swatch_size)


@dataclass(frozen=True)
class LayoutBlock:
    """
    Legend block for one question.

    Attributes:
        question_id: Question identifier
        number: 1-based position in the question list
        reference: Label matching the grid ("Q1", "Q2", ...)
        kind: "single" or "multiple"
        lines: Legend lines in draw order
        width: Width the text was wrapped to
        line_spacing: Gap between consecutive lines
    """

    question_id: str
    number: int
    reference: str
    kind: str
    lines: tuple[LegendLine, ...]
    width: int
    line_spacing: int = 0

    @property
    def height(self) -> int:
        if not self.lines:
            return 0
        return sum(line.height for line in self.lines) + self.line_spacing * (len(self.lines) - 1)

    def line_offsets(self) -> tuple[int, ...]:
        """Top offset of each line relative to the block top."""
        offsets = []
        y = 0
        for line in self.lines:
            offsets.append(y)
            y += line.height + self.line_spacing
        return tuple(offsets)


@dataclass(frozen=True)
class BlockPlacement:
    """
    A block positioned on a page.

    Attributes:
        block: The LayoutBlock to draw
        x: Left edge in pixels
        top: Top edge in pixels
        region: REGION_SIDE (right of the grid) or REGION_BELOW
        column: Column index within the region

    Example:
        >>> placement = BlockPlacement(block, x=1142, top=276, region="side", column=0)
        >>> placement.bottom
        376  # top + block.height
    """

    block: LayoutBlock
    x: int
    top: int
    region: str
    column: int

    @property
    def bottom(self) -> int:
        """Bottom Y coordinate (top + height)."""
        return self.top + self.block.height


@dataclass(frozen=True)
class GridCell:
    """
    One grid square with its optional centred label.

    Attributes:
        row / col: Cell position
        x / top: Top-left corner in pixels
        extent: Cell edge in pixels
        token: Stored answer token ("" for blank)
        label: Text drawn in the cell ("" for blank)
        font_size: Label size in points
        fill: Background colour, None for unfilled
    """

    row: int
    col: int
    x: float
    top: float
    extent: float
    token: str
    label: str
    font_size: float
    fill: Optional[Color] = None


@dataclass(frozen=True)
class GridPlacement:
    """Fixed-size grid region and its cells."""

    x: int
    top: int
    extent: int
    size: int
    cells: tuple[GridCell, ...]

    @property
    def right(self) -> int:
        return self.x + self.extent

    @property
    def bottom(self) -> int:
        return self.top + self.extent

    @property
    def cell_extent(self) -> float:
        return self.extent / self.size


@dataclass(frozen=True)
class PagePlan:
    """
    Complete layout plan for a single page.

    Attributes:
        index: Page number (0-indexed)
        placements: Legend blocks on this page
        grid: Grid region (first page only)
        title: Title text (first page only)
    """

    index: int
    placements: tuple[BlockPlacement, ...]
    grid: Optional[GridPlacement] = None
    title: Optional[str] = None

    @property
    def placement_count(self) -> int:
        """Number of blocks on this page."""
        return len(self.placements)

    @property
    def is_empty(self) -> bool:
        return not self.placements and self.grid is None and not self.title


@dataclass(frozen=True)
class LayoutResult:
    """
    Final layout output with diagnostics.

    Attributes:
        pages: Tuple of PagePlans
        warnings: Warning messages (e.g. blocks taller than a column)
        question_page_map: Mapping of question_id to page indices
    """

    pages: tuple[PagePlan, ...]
    warnings: list[str] = field(default_factory=list)
    question_page_map: dict[str, list[int]] = field(default_factory=dict)

    @property
    def page_count(self) -> int:
        return len(self.pages)

    @property
    def total_placements(self) -> int:
        """Total number of blocks placed across all pages."""
        return sum(p.placement_count for p in self.pages)

    def placements(self) -> list[tuple[int, BlockPlacement]]:
        """All (page index, placement) pairs in placement order."""
        return [(page.index, p) for page in self.pages for p in page.placements]
