"""
Module: core.models.grid

Purpose:
    GridSnapshot - the full cell contents of the paint grid at one instant.
    Cells are stored row-major as a tuple of strings; "" is a blank cell.

Key Classes:
    - GridSnapshot: Immutable grid state

Dependencies:
    - dataclasses (std)

Used By:
    - editor.paint: Brush strokes and erasing
    - editor.history: Undo/redo entries
    - builder.layout: Grid rendering
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable

SUPPORTED_GRID_SIZES: tuple[int, ...] = (10, 15, 20)
DEFAULT_GRID_SIZE = 15


@dataclass(frozen=True)
class GridSnapshot:
    """
    Grid contents at one instant (immutable).

    Attributes:
        size: Number of rows (and columns)
        cells: `size * size` answer tokens in row-major order

    Invariants:
        - len(cells) == size * size
        - Every cell is a string; "" means blank

    Example:
        >>> grid = GridSnapshot.empty(10)
        >>> len(grid.cells)
        100
    """

    size: int
    cells: tuple[str, ...]

    def __post_init__(self) -> None:
        """Validate shape on construction."""
        if self.size <= 0:
            raise ValueError(f"size must be positive: {self.size}")
        if not isinstance(self.cells, tuple):
            object.__setattr__(self, "cells", tuple(self.cells))
        if len(self.cells) != self.size * self.size:
            raise ValueError(
                f"Grid of size {self.size} needs {self.size * self.size} cells, "
                f"got {len(self.cells)}"
            )
        if any(not isinstance(cell, str) for cell in self.cells):
            raise ValueError("Grid cells must be strings")

    @classmethod
    def empty(cls, size: int) -> "GridSnapshot":
        """Create an all-blank grid."""
        return cls(size=size, cells=("",) * (size * size))

    @classmethod
    def from_cells(cls, size: int, cells: Iterable[str]) -> "GridSnapshot":
        return cls(size=size, cells=tuple(cells))

    @property
    def cell_count(self) -> int:
        return len(self.cells)

    @property
    def has_content(self) -> bool:
        """True when at least one cell is painted."""
        return any(cell != "" for cell in self.cells)

    def index_of(self, row: int, col: int) -> int:
        return row * self.size + col

    def position_of(self, index: int) -> tuple[int, int]:
        """Return (row, col) for a flat index."""
        return divmod(index, self.size)

    def cell(self, row: int, col: int) -> str:
        if not (0 <= row < self.size and 0 <= col < self.size):
            raise IndexError(f"Cell ({row}, {col}) outside {self.size}x{self.size} grid")
        return self.cells[self.index_of(row, col)]

    def painted_answers(self) -> set[str]:
        """Distinct non-blank tokens present in the grid."""
        return {cell for cell in self.cells if cell != ""}

    def to_list(self) -> list[str]:
        """Cells as a plain list (persistence shape)."""
        return list(self.cells)
