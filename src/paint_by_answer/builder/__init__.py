"""
Module: builder

Purpose:
    Export pipeline: lays out the grid and question legend onto printable
    pages and renders them to PDF.

Key Functions:
    - export_activity(): Main entry point for export
    - paginate(): Page plan for a grid + question list

Key Classes:
    - ExportConfig: Configuration for export
    - LayoutConfig: Configuration for page layout

Dependencies:
    - reportlab: Text metrics and PDF output
    - PIL: Preview images
"""

from .config import ExportConfig
from .layout import LayoutConfig, paginate
from .controller import export_activity, ExportResult, ExportError

__all__ = [
    # Config
    "ExportConfig",
    "LayoutConfig",
    # Layout
    "paginate",
    # Controller
    "export_activity",
    "ExportResult",
    "ExportError",
]
