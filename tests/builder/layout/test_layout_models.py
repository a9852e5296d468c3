"""
Unit tests for LayoutConfig and the layout data models.
"""

import pytest

from paint_by_answer.builder.layout import LayoutConfig
from paint_by_answer.builder.layout.models import (
    BlockPlacement,
    GridPlacement,
    LayoutBlock,
    LayoutResult,
    LegendLine,
    PagePlan,
)


def _line(lines=1, line_height=33, swatch_size=39):
    return LegendLine(
        text_lines=tuple(f"line {i}" for i in range(lines)),
        swatch=None,
        bold=False,
        font_size=10,
        line_height=line_height,
        indent=0,
        swatch_size=swatch_size,
    )


def _block(*lines, line_spacing=16):
    return LayoutBlock(
        question_id="q1",
        number=1,
        reference="Q1",
        kind="single",
        lines=tuple(lines),
        width=400,
        line_spacing=line_spacing,
    )


class TestLayoutConfig:
    """Tests for LayoutConfig defaults and validation."""

    def test_defaults_when_a4_200dpi_then_derived_metrics(self):
        config = LayoutConfig()
        assert (config.page_width, config.page_height) == (1654, 2339)
        assert config.available_width == 1418
        assert config.page_bottom == 2221
        assert config.column_width == 669
        assert config.column_x(1) == 118 + 669 + 79
        assert config.text_indent == 55

    def test_line_height_when_10pt_then_rounded_pixels(self):
        assert LayoutConfig().line_height(10) == 33

    def test_px_to_pt_when_one_inch_then_72(self):
        assert LayoutConfig().px_to_pt(200) == pytest.approx(72.0)

    @pytest.mark.parametrize(
        "kwargs",
        [
            {"page_width": 0},
            {"dpi": 0},
            {"margin_left": 900, "margin_right": 900},
            {"margin_top": 1200, "margin_bottom": 1200},
            {"grid_extent": 2000},
            {"column_count": 0},
            {"column_count": 30},
        ],
    )
    def test_config_when_invalid_then_raises(self, kwargs):
        with pytest.raises(ValueError):
            LayoutConfig(**kwargs)

    def test_config_when_frozen_then_cannot_assign(self):
        config = LayoutConfig()
        with pytest.raises(AttributeError):
            config.column_count = 3


class TestLayoutModels:
    """Tests for model geometry helpers."""

    def test_legend_line_height_when_swatch_taller_then_swatch_height(self):
        assert _line(lines=1).height == 39

    def test_legend_line_height_when_wrapped_then_lines_times_height(self):
        assert _line(lines=3).height == 99

    def test_block_height_when_several_lines_then_includes_spacing(self):
        block = _block(_line(), _line(lines=2), _line())
        assert block.height == 39 + 66 + 39 + 2 * 16
        assert block.line_offsets() == (0, 55, 137)

    def test_block_height_when_no_lines_then_zero(self):
        assert _block().height == 0

    def test_placement_bottom_when_placed_then_top_plus_height(self):
        placement = BlockPlacement(block=_block(_line()), x=10, top=100, region="below", column=0)
        assert placement.bottom == 139

    def test_grid_placement_when_size_15_then_cell_extent(self):
        grid = GridPlacement(x=118, top=118, extent=945, size=15, cells=())
        assert grid.cell_extent == 63
        assert (grid.right, grid.bottom) == (1063, 1063)

    def test_page_plan_when_nothing_then_empty(self):
        assert PagePlan(index=0, placements=()).is_empty
        assert not PagePlan(index=0, placements=(), title="Title").is_empty

    def test_layout_result_when_pages_then_totals(self):
        placement = BlockPlacement(block=_block(_line()), x=0, top=0, region="below", column=0)
        result = LayoutResult(
            pages=(PagePlan(0, (placement,)), PagePlan(1, (placement, placement))),
        )
        assert result.page_count == 2
        assert result.total_placements == 3
        assert [page for page, _ in result.placements()] == [0, 1, 1]
