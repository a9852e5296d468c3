"""
Module: builder.layout.config

Purpose:
    Configuration for the page layout engine.
    Defines page dimensions, margins, grid region, legend columns and text
    metrics. All lengths are pixels at `dpi`; font sizes are points.

Key Classes:
    - LayoutConfig: Immutable layout configuration

Dependencies:
    - dataclasses (std)

Used By:
    - builder.layout.composer: Block and grid composition
    - builder.layout.paginator: Page arrangement
    - builder.output: Rendering
"""

from __future__ import annotations

from dataclasses import dataclass


# Standard A4 page dimensions at 200 DPI
DEFAULT_PAGE_WIDTH_PX = 1654
DEFAULT_PAGE_HEIGHT_PX = 2339
DEFAULT_DPI = 200

# 15 mm at 200 DPI
DEFAULT_MARGIN_PX = 118

# 120 mm square grid region at 200 DPI
DEFAULT_GRID_EXTENT_PX = 945


@dataclass(frozen=True)
class LayoutConfig:
    """
    Configuration for page layout (immutable).

    Attributes:
        page_width: Page width in pixels
        page_height: Page height in pixels
        dpi: Dots per inch used to convert to points
        margin_top / margin_bottom / margin_left / margin_right: Margins in pixels
        title_height: Vertical space reserved for the title on page 1
        title_font_size: Title font size (pt)
        grid_extent: Edge of the square grid region, independent of grid size
        grid_spacing: Gap between the grid region and the columns below it
        side_gutter: Gap between the grid region and the side column
        min_side_column_width: Narrower side columns are not used at all
        column_count: Number of legend columns below the grid and on later pages
        column_gutter: Gap between legend columns
        legend_font_size: Legend line font size (pt)
        heading_font_size: Multiple-choice heading font size (pt)
        line_leading: Line height as a multiple of font size
        line_spacing: Gap between legend lines within a block
        block_spacing: Gap between blocks in a column
        swatch_size: Edge of the colour swatch square
        swatch_gap: Gap between swatch and text
        cell_font_size: Grid label size (pt) for short labels
        cell_small_font_size: Grid label size (pt) for labels over 2 characters
        reference_cell_extent: Cell edge at which label sizes apply unscaled
        answer_key: Print answers / mark correct options in the legend
        fill_cells: Fill painted cells with their bound colour

    Example:
        >>> config = LayoutConfig()
        >>> config.available_width
        1418
    """

    # Page dimensions
    page_width: int = DEFAULT_PAGE_WIDTH_PX
    page_height: int = DEFAULT_PAGE_HEIGHT_PX
    dpi: int = DEFAULT_DPI

    # Margins
    margin_top: int = DEFAULT_MARGIN_PX
    margin_bottom: int = DEFAULT_MARGIN_PX
    margin_left: int = DEFAULT_MARGIN_PX
    margin_right: int = DEFAULT_MARGIN_PX

    # Title
    title_height: int = 158
    title_font_size: float = 22

    # Grid region
    grid_extent: int = DEFAULT_GRID_EXTENT_PX
    grid_spacing: int = 63
    side_gutter: int = 79
    min_side_column_width: int = 236

    # Legend columns
    column_count: int = 2
    column_gutter: int = 79

    # Text metrics
    legend_font_size: float = 10
    heading_font_size: float = 11
    line_leading: float = 1.2
    line_spacing: int = 16
    block_spacing: int = 31
    swatch_size: int = 39
    swatch_gap: int = 16

    # Grid labels
    cell_font_size: float = 10
    cell_small_font_size: float = 8
    reference_cell_extent: int = 63

    # Variants
    answer_key: bool = False
    fill_cells: bool = False

    def __post_init__(self) -> None:
        """Validate configuration on construction."""
        if self.page_width <= 0:
            raise ValueError(f"page_width must be positive: {self.page_width}")
        if self.page_height <= 0:
            raise ValueError(f"page_height must be positive: {self.page_height}")
        if self.dpi <= 0:
            raise ValueError(f"dpi must be positive: {self.dpi}")
        if self.available_width <= 0:
            raise ValueError("Margins exceed page width")
        if self.available_height <= 0:
            raise ValueError("Margins exceed page height")
        if self.grid_extent <= 0 or self.grid_extent > self.available_width:
            raise ValueError(f"grid_extent must fit the page width: {self.grid_extent}")
        if self.column_count < 1:
            raise ValueError(f"column_count must be at least 1: {self.column_count}")
        if self.column_width <= self.text_indent:
            raise ValueError("Legend columns are too narrow for swatch and text")

    @property
    def available_width(self) -> int:
        """Width available for content (excluding margins)."""
        return self.page_width - self.margin_left - self.margin_right

    @property
    def available_height(self) -> int:
        """Height available for content (excluding margins)."""
        return self.page_height - self.margin_top - self.margin_bottom

    @property
    def page_bottom(self) -> int:
        return self.page_height - self.margin_bottom

    @property
    def column_width(self) -> int:
        """Width of one legend column below the grid."""
        gutters = (self.column_count - 1) * self.column_gutter
        return (self.available_width - gutters) // self.column_count

    @property
    def text_indent(self) -> int:
        """Offset of legend text from the column edge (after the swatch)."""
        return self.swatch_size + self.swatch_gap

    def column_x(self, column: int) -> int:
        return self.margin_left + column * (self.column_width + self.column_gutter)

    def line_height(self, font_size: float) -> int:
        """Height in pixels of one text line at `font_size` points."""
        return round(font_size * self.line_leading * self.dpi / 72.0)

    def px_to_pt(self, px: float) -> float:
        return px * 72.0 / self.dpi
