"""
Module: builder.controller

Purpose:
    Orchestrate the export pipeline.
    Resolve bindings → Paginate → Render (PDF, optional answer key, optional previews)

Key Functions:
    - export_activity(): Main entry point for exporting an activity

Key Classes:
    - ExportResult: Complete export result
    - ExportError: Exception for export failures

Dependencies:
    - editor.bindings: Answer bindings
    - builder.layout: Pagination
    - builder.output: PDF and preview rendering

Used By:
    - UI layer (external)
"""

from __future__ import annotations

import logging
import time
from dataclasses import dataclass
from pathlib import Path
from typing import List, Optional

from paint_by_answer.core.models import Activity
from paint_by_answer.editor.bindings import resolve

from .config import ExportConfig
from .layout import paginate
from .output import render_to_pdf, save_previews

logger = logging.getLogger(__name__)

DEFAULT_TITLE = "Untitled Activity"


class ExportError(Exception):
    """Error during export pipeline."""
    pass


@dataclass(frozen=True)
class ExportResult:
    """
    Complete export result (immutable).

    Attributes:
        pdf_path: Path to the worksheet PDF
        answer_key_pdf: Path to the answer key PDF (if generated)
        page_count: Number of worksheet pages
        duplicates: Answer tokens used by more than one option
        warnings: Layout and validation warnings
        preview_paths: PNG previews (if requested)
    """

    pdf_path: Path
    answer_key_pdf: Optional[Path]
    page_count: int
    duplicates: frozenset[str]
    warnings: tuple[str, ...]
    preview_paths: tuple[Path, ...] = ()


def answer_key_path(pdf_path: Path) -> Path:
    """`activity.pdf` -> `activity_answer_key.pdf`."""
    return pdf_path.with_name(f"{pdf_path.stem}_answer_key{pdf_path.suffix or '.pdf'}")


def safe_filename(title: str) -> str:
    """File stem derived from a title: whitespace runs become underscores."""
    stem = "_".join(title.split())
    return stem or "activity"


def export_activity(
    activity: Activity,
    output_path: Path,
    config: Optional[ExportConfig] = None,
) -> ExportResult:
    """
    Export an activity to a printable PDF.

    Pipeline:
    1. Resolve answer bindings (duplicates become warnings, never errors)
    2. Paginate grid + legend
    3. Render worksheet PDF
    4. (Optional) Paginate and render the answer key
    5. (Optional) Save PNG previews

    Args:
        activity: Activity with the committed grid and question list
        output_path: Worksheet PDF path; a directory means
            "<dir>/<title>.pdf"
        config: Export configuration (defaults used if None)

    Returns:
        ExportResult with paths and diagnostics

    Raises:
        ExportError: If rendering or writing fails
    """
    config = config or ExportConfig()
    start_time = time.perf_counter()
    warnings: List[str] = []

    if output_path.is_dir():
        output_path = output_path / f"{safe_filename(activity.title)}.pdf"

    bindings = resolve(activity.questions)
    for token in sorted(bindings.duplicates):
        message = f"Answer {token!r} is used by more than one option"
        logger.warning(message)
        warnings.append(message)

    title = (activity.title or DEFAULT_TITLE) if config.show_title else None

    logger.info(
        f"Exporting {activity.grid.size}x{activity.grid.size} activity with "
        f"{len(activity.questions)} questions to {output_path}"
    )

    layout = paginate(activity.questions, activity.grid, config.layout, bindings=bindings, title=title)
    warnings.extend(layout.warnings)

    try:
        render_to_pdf(layout, output_path, config.layout, show_footer=config.show_footer)
    except OSError as e:
        raise ExportError(f"Failed to write worksheet PDF: {e}") from e

    key_path: Optional[Path] = None
    if config.include_answer_key:
        key_layout_config = config.answer_key_layout
        key_layout = paginate(
            activity.questions, activity.grid, key_layout_config, bindings=bindings, title=title
        )
        key_path = answer_key_path(output_path)
        try:
            render_to_pdf(key_layout, key_path, key_layout_config, show_footer=config.show_footer)
        except OSError as e:
            raise ExportError(f"Failed to write answer key PDF: {e}") from e

    preview_paths: tuple[Path, ...] = ()
    if config.preview_dir is not None:
        try:
            preview_paths = tuple(save_previews(layout, config.preview_dir, config.layout))
        except OSError as e:
            raise ExportError(f"Failed to write previews: {e}") from e

    elapsed = time.perf_counter() - start_time
    logger.info(f"Export finished: {layout.page_count} pages in {elapsed:.2f}s")

    return ExportResult(
        pdf_path=output_path,
        answer_key_pdf=key_path,
        page_count=layout.page_count,
        duplicates=bindings.duplicates,
        warnings=tuple(warnings),
        preview_paths=preview_paths,
    )
