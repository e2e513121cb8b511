"""
Tests for rasterizer primitives: glyph ramp, clipping, lines, blocks.
"""

import pytest

from engine.frame_buffer import FrameBuffer
from engine.rasterizer import GLYPH_RAMP, clip, fill_block, plot_line, value_to_glyph
from models.cell import Cell

MARK = Cell(glyph="#")


def mark(_x, _y):
    return MARK


def marked(buffer):
    return {
        (x, y)
        for y in range(buffer.height)
        for x in range(buffer.width)
        if buffer.get(x, y).glyph == "#"
    }


class TestValueToGlyph:

    def test_ramp_length(self):
        assert len(GLYPH_RAMP) == 70

    def test_ends(self):
        assert value_to_glyph(0.0) == "$"
        assert value_to_glyph(1.0) == " "

    def test_clamping(self):
        assert value_to_glyph(-5.0) == "$"
        assert value_to_glyph(5.0) == " "

    def test_monotonic(self):
        indices = [GLYPH_RAMP.index(value_to_glyph(i / 200.0)) for i in range(201)]
        assert indices == sorted(indices)


class TestClip:

    RECT = (0.0, 10.0, 0.0, 10.0)

    def test_inside_unchanged(self):
        p1, p2 = (1.0, 1.0), (9.0, 8.0)
        assert clip(p1, p2, *self.RECT) == (p1, p2)

    def test_boundary_counts_as_inside(self):
        p1, p2 = (0.0, 0.0), (10.0, 10.0)
        assert clip(p1, p2, *self.RECT) == (p1, p2)

    def test_both_outside_same_side(self):
        assert clip((-5.0, 1.0), (-1.0, 9.0), *self.RECT) is None
        assert clip((1.0, 11.0), (9.0, 15.0), *self.RECT) is None

    def test_one_edge_crossing(self):
        result = clip((-5.0, 2.0), (5.0, 2.0), *self.RECT)
        assert result is not None
        (x1, y1), (x2, y2) = result
        assert (x1, y1) == pytest.approx((0.0, 2.0))
        assert (x2, y2) == pytest.approx((5.0, 2.0))

    def test_crosses_both_sides(self):
        (x1, y1), (x2, y2) = clip((-5.0, 5.0), (15.0, 5.0), *self.RECT)
        assert (x1, y1) == pytest.approx((0.0, 5.0))
        assert (x2, y2) == pytest.approx((10.0, 5.0))

    def test_misses_corner(self):
        # Passes outside the corner: starts left of the rect, ends above it
        assert clip((-2.0, 9.0), (2.0, 13.0), *self.RECT) is None

    def test_result_inside_rectangle(self):
        (x1, y1), (x2, y2) = clip((-3.3, -7.1), (12.9, 14.2), *self.RECT)
        for x, y in ((x1, y1), (x2, y2)):
            assert 0.0 <= x <= 10.0
            assert 0.0 <= y <= 10.0

    def test_zero_length_outside(self):
        assert clip((-3.0, 4.0), (-3.0, 4.0), *self.RECT) is None

    def test_zero_length_inside(self):
        assert clip((3.0, 4.0), (3.0, 4.0), *self.RECT) == ((3.0, 4.0), (3.0, 4.0))

    def test_segment_along_edge(self):
        # Lies on the left edge, overhanging both ends
        assert clip((0.0, -5.0), (0.0, 15.0), *self.RECT) == ((0.0, 0.0), (0.0, 10.0))

    @pytest.mark.parametrize("p1,p2", [
        ((-5.0, 2.0), (5.0, 2.0)),
        ((-3.3, -7.1), (12.9, 14.2)),
        ((5.0, -4.0), (5.5, 20.0)),
        ((11.0, 3.0), (-1.0, 7.0)),
    ])
    def test_idempotent(self, p1, p2):
        once = clip(p1, p2, *self.RECT)
        assert once is not None
        assert clip(once[0], once[1], *self.RECT) == once


class TestPlotLine:

    def test_horizontal(self):
        buffer = FrameBuffer(10, 3)
        plot_line(buffer, (2, 1), (7, 1), mark)
        assert marked(buffer) == {(x, 1) for x in range(2, 8)}

    def test_vertical(self):
        buffer = FrameBuffer(3, 10)
        plot_line(buffer, (1, 8), (1, 2), mark)
        assert marked(buffer) == {(1, y) for y in range(2, 9)}

    def test_vertical_from_origin(self):
        buffer = FrameBuffer(3, 8)
        plot_line(buffer, (0, 0), (0, 5), mark)
        assert marked(buffer) == {(0, y) for y in range(6)}

    def test_diagonal(self):
        buffer = FrameBuffer(5, 5)
        plot_line(buffer, (0, 0), (4, 4), mark)
        assert marked(buffer) == {(i, i) for i in range(5)}

    def test_single_point(self):
        buffer = FrameBuffer(5, 5)
        plot_line(buffer, (3, 2), (3, 2), mark)
        assert marked(buffer) == {(3, 2)}

    def test_out_of_bounds_is_dropped(self):
        buffer = FrameBuffer(5, 5)
        plot_line(buffer, (-10, 2), (20, 2), mark)
        assert marked(buffer) == {(x, 2) for x in range(5)}

    def test_fully_outside_is_noop(self):
        buffer = FrameBuffer(5, 5)
        plot_line(buffer, (-10, -3), (-2, -8), mark)
        assert marked(buffer) == set()

    def test_coordinates_truncated(self):
        buffer = FrameBuffer(5, 5)
        plot_line(buffer, (0.9, 1.7), (3.2, 1.1), mark)
        assert marked(buffer) == {(x, 1) for x in range(4)}

    def test_color_fn_receives_coordinates(self):
        buffer = FrameBuffer(5, 1)
        plot_line(buffer, (0, 0), (4, 0), lambda x, y: Cell(glyph=str(x)))
        assert [buffer.get(x, 0).glyph for x in range(5)] == ["0", "1", "2", "3", "4"]


class TestFillBlock:

    def test_fill_inside(self):
        buffer = FrameBuffer(6, 6)
        fill_block(buffer, 1, 2, 3, 2, MARK)
        assert marked(buffer) == {(x, y) for x in range(1, 4) for y in range(2, 4)}

    def test_partially_outside(self):
        buffer = FrameBuffer(4, 4)
        fill_block(buffer, -2, 3, 3, 3, MARK)
        assert marked(buffer) == {(0, 3)}
