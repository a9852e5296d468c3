"""
Module: builder.output

Purpose:
    Rendering backends for page plans.

Key Functions:
    - render_to_pdf(): Render layout to PDF (ReportLab)
    - render_page_preview(): Render one page to a PIL image
    - save_previews(): PNG per page

Dependencies:
    - reportlab: PDF generation
    - PIL: Raster previews
"""

from .renderer import render_to_pdf
from .preview import render_page_preview, save_previews

__all__ = [
    "render_to_pdf",
    "render_page_preview",
    "save_previews",
]
