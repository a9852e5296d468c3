"""
Module: builder.layout.composer

Purpose:
    Build renderable assets: legend blocks for questions and the fixed-size
    grid region. Text is wrapped with ReportLab's Helvetica metrics so the
    measured heights match what the PDF backend draws.

Key Functions:
    - compose_block(): LayoutBlock for one question at a given width
    - compose_grid(): GridPlacement for a snapshot
    - wrap_text(): Wrap text to a pixel width

Dependencies:
    - reportlab: Font metrics (simpleSplit)
    - editor.bindings: Grid labels and colours
    - builder.layout.models: LayoutBlock, GridPlacement

Used By:
    - builder.layout.paginator: Measures blocks per column width
"""

from __future__ import annotations

import logging
from typing import Optional

from reportlab.lib.utils import simpleSplit

from paint_by_answer.core.models import Color, GridSnapshot, MultipleQuestion, Question, SingleQuestion
from paint_by_answer.editor.bindings import AnswerBindings, question_reference
from paint_by_answer.editor.questions import option_letter

from .config import LayoutConfig
from .models import GridCell, GridPlacement, LayoutBlock, LegendLine

logger = logging.getLogger(__name__)

FONT_REGULAR = "Helvetica"
FONT_BOLD = "Helvetica-Bold"


def wrap_text(
    text: str,
    width_px: int,
    config: LayoutConfig,
    *,
    font_size: float,
    bold: bool = False,
) -> tuple[str, ...]:
    """
    Wrap text to fit `width_px`.

    Returns at least one (possibly empty) line. Words longer than the width
    stay on their own line.
    """
    font = FONT_BOLD if bold else FONT_REGULAR
    lines = simpleSplit(text, font, font_size, config.px_to_pt(width_px))
    return tuple(lines) if lines else ("",)


def _legend_line(
    text: str,
    swatch: Optional[Color],
    width: int,
    config: LayoutConfig,
    *,
    bold: bool = False,
    font_size: Optional[float] = None,
) -> LegendLine:
    size = font_size if font_size is not None else config.legend_font_size
    indent = config.text_indent if swatch is not None else 0
    return LegendLine(
        text_lines=wrap_text(text, width - indent, config, font_size=size, bold=bold),
        swatch=swatch,
        bold=bold,
        font_size=size,
        line_height=config.line_height(size),
        indent=indent,
        swatch_size=config.swatch_size if swatch is not None else 0,
    )


def _prompt(reference: str, text: str) -> str:
    text = text.strip()
    return f"{reference}. {text}" if text else f"{reference}."


def compose_block(
    question: Question,
    number: int,
    width: int,
    config: LayoutConfig,
) -> LayoutBlock:
    """
    Compose the legend block for a question.

    Single: one line, swatch in the question colour.
    Multiple: a bold heading line, then one line per option with the
    option's colour swatch ("a) ...", "b) ...").

    Args:
        question: Question to describe
        number: 1-based position in the question list
        width: Column width in pixels
        config: Layout configuration

    Returns:
        LayoutBlock wrapped to `width`
    """
    reference = question_reference(number)

    if isinstance(question, SingleQuestion):
        text = _prompt(reference, question.text)
        if config.answer_key and question.option.has_answer:
            text = f"{text} = {question.option.answer}"
        lines = (_legend_line(text, question.color, width, config),)
    elif isinstance(question, MultipleQuestion):
        heading = _legend_line(
            _prompt(reference, question.text),
            None,
            width,
            config,
            bold=True,
            font_size=config.heading_font_size,
        )
        option_lines = []
        for i, option in enumerate(question.options):
            text = f"{option_letter(i)}) {option.text.strip()}".rstrip()
            if config.answer_key and option.id == question.correct_option_id:
                text = f"{text} (correct)"
            option_lines.append(
                _legend_line(text, question.option_colors.get(option.id), width, config)
            )
        lines = (heading, *option_lines)
    else:
        raise TypeError(f"Unknown question type: {type(question).__name__}")

    return LayoutBlock(
        question_id=question.id,
        number=number,
        reference=reference,
        kind=question.type,
        lines=lines,
        width=width,
        line_spacing=config.line_spacing,
    )


def _cell_font_size(label: str, cell_extent: float, config: LayoutConfig) -> float:
    base = config.cell_font_size if len(label) <= 2 else config.cell_small_font_size
    scale = min(1.0, cell_extent / config.reference_cell_extent)
    return base * scale


def compose_grid(
    snapshot: GridSnapshot,
    bindings: AnswerBindings,
    config: LayoutConfig,
    *,
    left: int,
    top: int,
) -> GridPlacement:
    """
    Compose the grid region.

    The region is always `config.grid_extent` square; cell size is
    extent / grid size. Each painted cell is labelled with its reference
    (the token for single answers, "Q{n}" for multiple choice, the raw
    token when unbound).
    """
    cell_extent = config.grid_extent / snapshot.size
    cells = []
    for index, token in enumerate(snapshot.cells):
        row, col = divmod(index, snapshot.size)
        label = bindings.reference_for(token) if token else ""
        cells.append(
            GridCell(
                row=row,
                col=col,
                x=left + col * cell_extent,
                top=top + row * cell_extent,
                extent=cell_extent,
                token=token,
                label=label,
                font_size=_cell_font_size(label, cell_extent, config),
                fill=bindings.color_for(token) if (config.fill_cells and token) else None,
            )
        )
    logger.debug(f"Composed {snapshot.size}x{snapshot.size} grid, cell {cell_extent:.1f}px")
    return GridPlacement(
        x=left,
        top=top,
        extent=config.grid_extent,
        size=snapshot.size,
        cells=tuple(cells),
    )
