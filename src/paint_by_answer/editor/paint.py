"""
Module: editor.paint

Purpose:
    Pure grid mutations: brush strokes, erasing by answer token, renaming
    tokens, clearing and resizing. Every function returns a new
    GridSnapshot and never mutates its input.

Key Functions:
    - paint(): Apply a square brush at a cell, clipped at the grid edge
    - erase_by_answers(): Blank every cell holding one of the given tokens
    - replace_answer(): Rename a token across the grid
    - clear(): Blank the whole grid, keeping its size
    - resize(): Fresh blank grid of a new size

Dependencies:
    - core.models: GridSnapshot, BrushTool

Used By:
    - editor.session: Stroke handling and question sync
"""

from __future__ import annotations

import logging
from typing import Iterable, Optional

from paint_by_answer.core.models import BrushTool, GridSnapshot, SUPPORTED_GRID_SIZES

logger = logging.getLogger(__name__)

BRUSH_SIZES: tuple[int, ...] = (1, 2, 3)


def paint(
    snapshot: GridSnapshot,
    start_index: int,
    brush_size: int,
    tool: Optional[BrushTool],
    *,
    erase: bool = False,
) -> GridSnapshot:
    """
    Apply a brush_size x brush_size brush whose top-left cell is start_index.

    Target cells outside the grid are skipped (clipped), never wrapped.
    With erase=True the covered cells are blanked; otherwise they receive
    the tool's token. A missing tool or a blank token writes nothing.

    Args:
        snapshot: Grid before the brush is applied
        start_index: Flat row-major index of the top-left brush cell
        brush_size: Brush edge length in cells
        tool: Selected brush, None when nothing is selected
        erase: Blank cells instead of painting

    Returns:
        New snapshot (equal to the input when nothing changed)
    """
    size = snapshot.size
    if brush_size <= 0 or not (0 <= start_index < snapshot.cell_count):
        return snapshot
    if not erase and (tool is None or tool.is_blank):
        return snapshot

    value = "" if erase else tool.answer
    start_row, start_col = divmod(start_index, size)
    cells = list(snapshot.cells)

    for dr in range(brush_size):
        row = start_row + dr
        if row >= size:
            break
        for dc in range(brush_size):
            col = start_col + dc
            if col >= size:
                break
            cells[row * size + col] = value

    return GridSnapshot(size=size, cells=tuple(cells))


def erase_by_answers(snapshot: GridSnapshot, answers: Iterable[str]) -> GridSnapshot:
    """Blank every cell whose token is in `answers`."""
    targets = set(answers)
    if not targets:
        return snapshot
    cells = tuple("" if cell in targets else cell for cell in snapshot.cells)
    return GridSnapshot(size=snapshot.size, cells=cells)


def replace_answer(snapshot: GridSnapshot, old: str, new: str) -> GridSnapshot:
    """
    Rename token `old` to `new` in every cell.

    A blank `old` is ignored so blank cells are never filled.
    """
    if not old or old.strip() == "" or old == new:
        return snapshot
    cells = tuple(new if cell == old else cell for cell in snapshot.cells)
    return GridSnapshot(size=snapshot.size, cells=cells)


def clear(snapshot: GridSnapshot) -> GridSnapshot:
    return GridSnapshot.empty(snapshot.size)


def resize(new_size: int) -> GridSnapshot:
    """
    Create a blank grid of `new_size`.

    Always discards existing paint: tokens are not migrated between sizes.
    Asking the user for confirmation is the caller's job.

    Raises:
        ValueError: If new_size is not a supported grid size
    """
    if new_size not in SUPPORTED_GRID_SIZES:
        raise ValueError(f"Unsupported grid size {new_size}; expected one of {SUPPORTED_GRID_SIZES}")
    logger.debug(f"Resizing grid to {new_size}x{new_size}")
    return GridSnapshot.empty(new_size)
