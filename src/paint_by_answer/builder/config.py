"""
Module: builder.config

Purpose:
    Configuration dataclass for the export pipeline. Immutable
    configuration with validation on construction.

Key Classes:
    - ExportConfig: Main configuration for exporting an activity

Dependencies:
    - dataclasses (std)
    - builder.layout.config: LayoutConfig

Used By:
    - builder.controller: Export pipeline
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from pathlib import Path
from typing import Optional

from .layout.config import LayoutConfig


@dataclass(frozen=True)
class ExportConfig:
    """
    Configuration for exporting an activity (immutable).

    Attributes:
        layout: Page layout configuration for the student worksheet
        include_answer_key: Also render an answer key PDF (filled cells,
            answers in the legend) next to the worksheet
        show_title: Print the activity title on page 1
        show_footer: Print the version footer on every page
        preview_dir: If set, also write a PNG preview per worksheet page

    Example:
        >>> config = ExportConfig(include_answer_key=True)
        >>> config.answer_key_layout.fill_cells
        True
    """

    layout: LayoutConfig = field(default_factory=LayoutConfig)
    include_answer_key: bool = False
    show_title: bool = True
    show_footer: bool = True
    preview_dir: Optional[Path] = None

    def __post_init__(self) -> None:
        """Validate configuration on construction."""
        if not isinstance(self.layout, LayoutConfig):
            raise ValueError(f"layout must be a LayoutConfig: {type(self.layout).__name__}")

    @property
    def answer_key_layout(self) -> LayoutConfig:
        """Worksheet layout with answers shown and cells filled."""
        return replace(self.layout, answer_key=True, fill_cells=True)
