"""
Module: builder.layout.paginator

Purpose:
    Arrange the grid and the legend blocks onto pages.

Key Functions:
    - paginate(): Main pagination function

Algorithm:
    1. Page 1: title, then the fixed-size grid region at the top-left.
    2. Side column (right of the grid, from grid top to grid bottom):
       place blocks in list order while they fit. The first block that does
       not fit closes the side column, so list order is never broken.
    3. Below the grid: `column_count` columns across the page width, all
       starting just under the grid. Place each remaining block in the
       current column if it fits, else move to the next column; after the
       last column start a new page whose columns start at the top margin.
    4. Blocks are never split. A block taller than a fresh full-page column
       is placed at the column top anyway and a warning is recorded.

    Questions are placed strictly in list order, so the "Q{n}" references
    in the legend match the references drawn in the grid.

Dependencies:
    - builder.layout.composer: Block and grid composition
    - builder.layout.models: PagePlan, LayoutResult
    - builder.layout.config: LayoutConfig

Used By:
    - builder.controller: Export pipeline
"""

from __future__ import annotations

import logging
from typing import List, Optional, Sequence

from paint_by_answer.core.models import GridSnapshot, Question
from paint_by_answer.editor.bindings import AnswerBindings, resolve

from .composer import compose_block, compose_grid
from .config import LayoutConfig
from .models import REGION_BELOW, REGION_SIDE, BlockPlacement, LayoutResult, PagePlan

logger = logging.getLogger(__name__)


def paginate(
    questions: Sequence[Question],
    grid: GridSnapshot,
    config: LayoutConfig,
    *,
    bindings: Optional[AnswerBindings] = None,
    title: Optional[str] = None,
) -> LayoutResult:
    """
    Lay out the grid and the question legend onto pages.

    Never fails on overflow: content that does not fit goes onto new pages.

    Args:
        questions: Questions in legend order
        grid: Grid snapshot to draw on page 1
        config: Layout configuration
        bindings: Precomputed bindings (resolved from questions if None)
        title: Title for page 1 (no title space reserved when empty)

    Returns:
        LayoutResult with one PagePlan per page (always at least one)
    """
    if bindings is None:
        bindings = resolve(questions)

    warnings: List[str] = []
    question_page_map: dict[str, list[int]] = {}
    pages: List[List[BlockPlacement]] = [[]]

    grid_top = config.margin_top + (config.title_height if title else 0)
    grid_placement = compose_grid(grid, bindings, config, left=config.margin_left, top=grid_top)

    pending = list(enumerate(questions, start=1))
    i = 0

    # ── Side column ──────────────────────────────────────────────────────
    side_x = grid_placement.right + config.side_gutter
    side_width = config.page_width - config.margin_right - side_x
    if side_width >= config.min_side_column_width:
        cursor = grid_top
        while i < len(pending):
            number, question = pending[i]
            block = compose_block(question, number, side_width, config)
            top = cursor if cursor == grid_top else cursor + config.block_spacing
            if top + block.height > grid_placement.bottom:
                logger.debug(f"Side column full at Q{number}")
                break
            pages[0].append(BlockPlacement(block=block, x=side_x, top=top, region=REGION_SIDE, column=0))
            _track_question(question_page_map, question.id, 0)
            cursor = top + block.height
            i += 1
    else:
        logger.debug(f"No side column: {side_width}px available, {config.min_side_column_width}px needed")

    # ── Columns below the grid, then full pages ──────────────────────────
    page_index = 0
    column = 0
    column_top = grid_placement.bottom + config.grid_spacing
    cursor = column_top

    while i < len(pending):
        number, question = pending[i]
        block = compose_block(question, number, config.column_width, config)
        column_empty = cursor == column_top
        top = cursor if column_empty else cursor + config.block_spacing

        if top + block.height > config.page_bottom:
            fresh_full_column = column_empty and column_top == config.margin_top
            if not fresh_full_column:
                if column < config.column_count - 1:
                    column += 1
                else:
                    page_index += 1
                    pages.append([])
                    column = 0
                    column_top = config.margin_top
                cursor = column_top
                continue

            message = (
                f"Question Q{number} overflows column on page {page_index}: "
                f"{block.height}px needed, {config.available_height}px available"
            )
            logger.warning(message)
            warnings.append(message)

        pages[page_index].append(
            BlockPlacement(
                block=block,
                x=config.column_x(column),
                top=top,
                region=REGION_BELOW,
                column=column,
            )
        )
        _track_question(question_page_map, question.id, page_index)
        cursor = top + block.height
        i += 1

    plans = tuple(
        PagePlan(
            index=index,
            placements=tuple(placements),
            grid=grid_placement if index == 0 else None,
            title=title if index == 0 and title else None,
        )
        for index, placements in enumerate(pages)
    )

    logger.info(f"Paginated {len(questions)} questions onto {len(plans)} pages")

    return LayoutResult(
        pages=plans,
        warnings=warnings,
        question_page_map=question_page_map,
    )


def _track_question(
    question_page_map: dict[str, list[int]],
    question_id: str,
    page_index: int,
) -> None:
    """Track which pages a question appears on."""
    if question_id not in question_page_map:
        question_page_map[question_id] = []
    if page_index not in question_page_map[question_id]:
        question_page_map[question_id].append(page_index)
