"""
Unit tests for Pillow page previews.
"""

from paint_by_answer.builder.layout import LayoutConfig, paginate
from paint_by_answer.builder.output.preview import render_page_preview, save_previews
from paint_by_answer.core.models import GridSnapshot


class TestPreview:
    """Tests for render_page_preview() and save_previews()."""

    def test_preview_when_rendered_then_page_sized_rgb(self, make_single):
        config = LayoutConfig()
        layout = paginate([make_single()], GridSnapshot.empty(15), config, title="Atoms")

        image = render_page_preview(layout.pages[0], config)

        assert image.size == (config.page_width, config.page_height)
        assert image.mode == "RGB"

    def test_preview_when_fill_cells_then_cell_painted_in_colour(self, make_single):
        # Arrange
        config = LayoutConfig(fill_cells=True)
        cells = [""] * 100
        cells[99] = "A"
        layout = paginate([make_single(answer="A")], GridSnapshot.from_cells(10, cells), config)
        cell = layout.pages[0].grid.cells[99]

        # Act
        image = render_page_preview(layout.pages[0], config)

        # Assert: sample near the corner, away from the centred label
        x = int(cell.x + 5)
        y = int(cell.top + 5)
        assert image.getpixel((x, y)) == (255, 0, 0)

    def test_preview_when_unpainted_then_cell_white(self):
        config = LayoutConfig()
        layout = paginate([], GridSnapshot.empty(10), config)
        cell = layout.pages[0].grid.cells[0]
        image = render_page_preview(layout.pages[0], config)
        assert image.getpixel((int(cell.x + 10), int(cell.top + 10))) == (255, 255, 255)

    def test_save_previews_when_layout_then_png_per_page(self, tmp_path, make_single):
        config = LayoutConfig()
        questions = [make_single(f"q{i}", answer=f"A{i}") for i in range(80)]
        layout = paginate(questions, GridSnapshot.empty(15), config)

        paths = save_previews(layout, tmp_path / "previews", config)

        assert len(paths) == layout.page_count
        assert paths[0].name == "page_1.png"
        assert all(path.exists() for path in paths)
