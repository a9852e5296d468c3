"""
Module: builder.output.preview

Purpose:
    Raster preview of a PagePlan using Pillow, at the layout's pixel
    resolution. Used for thumbnails and for checking layouts without
    opening a PDF.

Key Functions:
    - render_page_preview(): PIL image of one page
    - save_previews(): PNG file per page

Dependencies:
    - PIL: Image drawing
    - builder.layout.models: PagePlan

Used By:
    - builder.controller: Optional preview export
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import List

from PIL import Image, ImageDraw, ImageFont

from paint_by_answer.builder.layout.config import LayoutConfig
from paint_by_answer.builder.layout.models import LayoutResult, PagePlan
from paint_by_answer.core.models import contrast_color

logger = logging.getLogger(__name__)


def render_page_preview(page: PagePlan, config: LayoutConfig) -> Image.Image:
    """
    Draw one page plan onto a white RGB image of the configured page size.

    Text uses Pillow's default font, so wrapping may differ slightly from
    the PDF; geometry (cells, swatches, block positions) is exact.
    """
    img = Image.new("RGB", (config.page_width, config.page_height), color="white")
    draw = ImageDraw.Draw(img)
    font = ImageFont.load_default()

    if page.title:
        _draw_centred(draw, page.title, config.page_width / 2, config.margin_top + 20, font, "black")

    if page.grid is not None:
        for cell in page.grid.cells:
            box = (cell.x, cell.top, cell.x + cell.extent, cell.top + cell.extent)
            draw.rectangle(box, fill=cell.fill.value if cell.fill else None, outline="black")
            if cell.label:
                text_fill = contrast_color(cell.fill) if cell.fill else "#000000"
                _draw_centred(
                    draw,
                    cell.label,
                    cell.x + cell.extent / 2,
                    cell.top + cell.extent / 2,
                    font,
                    text_fill,
                )

    for placement in page.placements:
        block = placement.block
        for line, offset in zip(block.lines, block.line_offsets()):
            line_top = placement.top + offset
            if line.swatch is not None:
                draw.rectangle(
                    (placement.x, line_top, placement.x + line.swatch_size, line_top + line.swatch_size),
                    fill=line.swatch.value,
                    outline="black",
                )
            for k, text in enumerate(line.text_lines):
                draw.text(
                    (placement.x + line.indent, line_top + k * line.line_height),
                    text,
                    fill="black",
                    font=font,
                )

    return img


def save_previews(layout: LayoutResult, output_dir: Path, config: LayoutConfig) -> List[Path]:
    """Write `page_<n>.png` for every page and return the paths."""
    output_dir.mkdir(parents=True, exist_ok=True)
    paths = []
    for page in layout.pages:
        path = output_dir / f"page_{page.index + 1}.png"
        render_page_preview(page, config).save(path)
        paths.append(path)
    logger.info(f"Saved {len(paths)} preview images to {output_dir}")
    return paths


def _draw_centred(draw: ImageDraw.ImageDraw, text: str, cx: float, cy: float, font, fill: str) -> None:
    left, top, right, bottom = draw.textbbox((0, 0), text, font=font)
    draw.text((cx - (right - left) / 2, cy - (bottom - top) / 2), text, fill=fill, font=font)
