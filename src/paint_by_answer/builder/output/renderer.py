"""
Module: builder.output.renderer

Purpose:
    Render a LayoutResult to PDF using ReportLab.
    Each PagePlan becomes one PDF page; grid cells are drawn as outlined
    squares with centred labels, legend lines as a filled colour swatch
    followed by wrapped text.

Key Functions:
    - render_to_pdf(): Main rendering function

Dependencies:
    - reportlab: PDF generation
    - builder.layout.models: LayoutResult, PagePlan

Used By:
    - builder.controller: Export pipeline
"""

from __future__ import annotations

import logging
from pathlib import Path

from reportlab.pdfgen import canvas

from paint_by_answer.builder.layout.composer import FONT_BOLD, FONT_REGULAR
from paint_by_answer.builder.layout.config import LayoutConfig
from paint_by_answer.builder.layout.models import BlockPlacement, GridPlacement, LayoutResult, PagePlan
from paint_by_answer.core.models import contrast_color

logger = logging.getLogger(__name__)

# Footer configuration
FOOTER_FONT_SIZE = 7
GRID_LINE_WIDTH = 0.5
SWATCH_LINE_WIDTH = 0.3

# Baseline position within a text line, as a fraction of the line height
BASELINE_RATIO = 0.8


def _get_footer_text() -> str:
    """Get footer text with current version number."""
    from paint_by_answer import __version__
    return f"Generated with paint-by-answer v{__version__}"


def render_to_pdf(
    layout: LayoutResult,
    output_path: Path,
    config: LayoutConfig,
    *,
    show_footer: bool = True,
) -> None:
    """
    Render layout result to PDF file.

    Args:
        layout: Layout result from paginator
        output_path: Path to write PDF
        config: Layout configuration the plan was built with
        show_footer: Draw the version footer on every page

    Raises:
        OSError: If PDF cannot be written

    Example:
        >>> render_to_pdf(layout, Path("output/activity.pdf"), LayoutConfig())
    """
    if layout.page_count == 0:
        logger.warning("Empty layout, creating empty PDF")

    output_path.parent.mkdir(parents=True, exist_ok=True)

    page_size = (config.px_to_pt(config.page_width), config.px_to_pt(config.page_height))
    c = canvas.Canvas(str(output_path), pagesize=page_size)

    for page in layout.pages:
        _render_page(c, page, config, show_footer)
        c.showPage()

    c.save()

    logger.info(f"Rendered {layout.page_count} pages to {output_path}")


def _render_page(
    c: canvas.Canvas,
    page: PagePlan,
    config: LayoutConfig,
    show_footer: bool = True,
) -> None:
    if page.title:
        _draw_title(c, page.title, config)
    if page.grid is not None:
        _draw_grid(c, page.grid, config)
    for placement in page.placements:
        _draw_block(c, placement, config)
    if show_footer:
        _draw_footer(c, config)


def _draw_title(c: canvas.Canvas, title: str, config: LayoutConfig) -> None:
    page_width_pt = config.px_to_pt(config.page_width)
    baseline = _transform_y(config, config.margin_top) - config.title_font_size
    c.saveState()
    c.setFont(FONT_BOLD, config.title_font_size)
    c.setFillColorRGB(0, 0, 0)
    c.drawCentredString(page_width_pt / 2, baseline, title)
    c.restoreState()


def _draw_grid(c: canvas.Canvas, grid: GridPlacement, config: LayoutConfig) -> None:
    """Draw every cell outline, fill and label."""
    c.saveState()
    c.setLineWidth(GRID_LINE_WIDTH)
    c.setStrokeColorRGB(0, 0, 0)
    for cell in grid.cells:
        x = config.px_to_pt(cell.x)
        size = config.px_to_pt(cell.extent)
        y = _transform_y(config, cell.top + cell.extent)
        if cell.fill is not None:
            c.setFillColorRGB(*cell.fill.rgb_float)
            c.rect(x, y, size, size, stroke=1, fill=1)
        else:
            c.rect(x, y, size, size, stroke=1, fill=0)

        if cell.label:
            text_color = contrast_color(cell.fill) if cell.fill is not None else "#000000"
            c.setFillColor(text_color)
            c.setFont(FONT_REGULAR, cell.font_size)
            # Vertically centre using an approximate cap height
            c.drawCentredString(x + size / 2, y + size / 2 - cell.font_size * 0.35, cell.label)
    c.restoreState()


def _draw_block(c: canvas.Canvas, placement: BlockPlacement, config: LayoutConfig) -> None:
    """Draw the legend lines of one block."""
    block = placement.block
    c.saveState()
    for line, offset in zip(block.lines, block.line_offsets()):
        line_top = placement.top + offset
        if line.swatch is not None:
            swatch_pt = config.px_to_pt(line.swatch_size)
            c.setLineWidth(SWATCH_LINE_WIDTH)
            c.setStrokeColorRGB(0, 0, 0)
            c.setFillColorRGB(*line.swatch.rgb_float)
            c.rect(
                config.px_to_pt(placement.x),
                _transform_y(config, line_top + line.swatch_size),
                swatch_pt,
                swatch_pt,
                stroke=1,
                fill=1,
            )

        c.setFillColorRGB(0, 0, 0)
        c.setFont(FONT_BOLD if line.bold else FONT_REGULAR, line.font_size)
        text_x = config.px_to_pt(placement.x + line.indent)
        for k, text in enumerate(line.text_lines):
            baseline_px = line_top + k * line.line_height + line.line_height * BASELINE_RATIO
            c.drawString(text_x, _transform_y(config, baseline_px), text)
    c.restoreState()


def _draw_footer(c: canvas.Canvas, config: LayoutConfig) -> None:
    """Draw centred footer ~15pt from the page bottom."""
    footer_text = _get_footer_text()
    page_width_pt = config.px_to_pt(config.page_width)

    c.saveState()
    c.setFont(FONT_REGULAR, FOOTER_FONT_SIZE)
    c.setFillColorRGB(0.4, 0.4, 0.4)
    text_width = c.stringWidth(footer_text, FONT_REGULAR, FOOTER_FONT_SIZE)
    c.drawString((page_width_pt - text_width) / 2, 15, footer_text)
    c.restoreState()


def _transform_y(config: LayoutConfig, y_px_top: float) -> float:
    """
    Convert a top-down pixel Y coordinate to bottom-up PDF points.

    Args:
        config: Layout configuration (page height, dpi)
        y_px_top: Y position from page top in pixels

    Returns:
        Y position from page bottom in points
    """
    return config.px_to_pt(config.page_height) - config.px_to_pt(y_px_top)
