"""
Rasterizer - drawing primitives on top of FrameBuffer

Provides:
- value_to_glyph: scalar brightness -> density ramp character
- clip: parametric line clipping against an axis-aligned rectangle
- plot_line: integer Bresenham line drawing (low/high slope routines)
- fill_block: rectangle fill

All writes go through FrameBuffer.set_clipping, so geometry that drifts
outside the buffer is dropped instead of raising.
"""

import math
from typing import Callable, Optional, Tuple
from engine.frame_buffer import FrameBuffer
from models.cell import Cell

Point = Tuple[float, float]
Segment = Tuple[Point, Point]
CellFunction = Callable[[int, int], Cell]

# Ordered from most ink to least ink
GLYPH_RAMP = "$@B%8&WM#*oahkbdpqwmZO0QLCJUYXzcvunxrjft/\\|()1{}[]?-_+~<>i!lI;:,\"^`'. "


def value_to_glyph(value: float) -> str:
    """
    Map a brightness value onto the density ramp

    Args:
        value: Scalar in 0.0-1.0 (clamped first)

    Returns:
        GLYPH_RAMP[0] ('$') for 0.0 up to GLYPH_RAMP[-1] (space) for 1.0
    """
    value = max(0.0, min(1.0, value))
    index = min(int(math.floor(value * len(GLYPH_RAMP))), len(GLYPH_RAMP) - 1)
    return GLYPH_RAMP[index]


def _window_edge_coordinates(point: Point, x_min: float, x_max: float, y_min: float, y_max: float):
    """Signed distance inside each of the four half-planes (negative = outside)."""
    x, y = point
    return (x - x_min, x_max - x, y - y_min, y_max - y)


def clip(
    p1: Point,
    p2: Point,
    x_min: float,
    x_max: float,
    y_min: float,
    y_max: float
) -> Optional[Segment]:
    """
    Clip a segment against the rectangle [x_min, x_max] x [y_min, y_max]

    Points on the boundary count as inside.

    Returns:
        (p1', p2') of the visible part, or None if nothing is visible

    Example:
        clip((-5.0, 2.0), (5.0, 2.0), 0.0, 10.0, 0.0, 10.0)
        # ((0.0, 2.0), (5.0, 2.0))
    """
    wec1 = _window_edge_coordinates(p1, x_min, x_max, y_min, y_max)
    wec2 = _window_edge_coordinates(p2, x_min, x_max, y_min, y_max)

    if all(c >= 0 for c in wec1) and all(c >= 0 for c in wec2):
        return (p1, p2)

    for c1, c2 in zip(wec1, wec2):
        if c1 < 0 and c2 < 0:
            return None

    a_min = 0.0
    a_max = 1.0

    # Edges parallel to the segment have c1 == c2, which was either rejected
    # above or leaves both endpoints inside that edge and is skipped here.
    for c1, c2 in zip(wec1, wec2):
        if c1 < 0:
            a_min = max(a_min, c1 / (c1 - c2))
        elif c2 < 0:
            a_max = min(a_max, c1 / (c1 - c2))

    if a_min > a_max:
        return None

    def at(a: float) -> Point:
        x = p1[0] + (p2[0] - p1[0]) * a
        y = p1[1] + (p2[1] - p1[1]) * a
        # Snap rounding error back onto the rectangle
        return (max(x_min, min(x_max, x)), max(y_min, min(y_max, y)))

    return (at(a_min), at(a_max))


def _plot_line_low(buffer: FrameBuffer, x0: int, y0: int, x1: int, y1: int, color_fn: CellFunction):
    dx = x1 - x0
    dy = y1 - y0
    yi = 1
    if dy < 0:
        yi = -1
        dy = -dy

    error = 2 * dy - dx
    y = y0

    for x in range(x0, x1 + 1):
        buffer.set_clipping(x, y, color_fn(x, y))
        if error > 0:
            y += yi
            error += 2 * (dy - dx)
        else:
            error += 2 * dy


def _plot_line_high(buffer: FrameBuffer, x0: int, y0: int, x1: int, y1: int, color_fn: CellFunction):
    dx = x1 - x0
    dy = y1 - y0
    xi = 1
    if dx < 0:
        xi = -1
        dx = -dx

    error = 2 * dx - dy
    x = x0

    for y in range(y0, y1 + 1):
        buffer.set_clipping(x, y, color_fn(x, y))
        if error > 0:
            x += xi
            error += 2 * (dx - dy)
        else:
            error += 2 * dx


def plot_line(buffer: FrameBuffer, start: Point, end: Point, color_fn: CellFunction) -> None:
    """
    Draw an inclusive line between two points

    Coordinates are truncated to integers before stepping. color_fn(x, y)
    supplies the cell for every plotted pixel, so callers can draw gradients.

    Args:
        buffer: Target frame
        start: (x, y) start point
        end: (x, y) end point
        color_fn: Callable returning the Cell for a pixel
    """
    x0, y0 = int(start[0]), int(start[1])
    x1, y1 = int(end[0]), int(end[1])

    if abs(y1 - y0) < abs(x1 - x0):
        if x0 > x1:
            _plot_line_low(buffer, x1, y1, x0, y0, color_fn)
        else:
            _plot_line_low(buffer, x0, y0, x1, y1, color_fn)
    else:
        if y0 > y1:
            _plot_line_high(buffer, x1, y1, x0, y0, color_fn)
        else:
            _plot_line_high(buffer, x0, y0, x1, y1, color_fn)


def fill_block(buffer: FrameBuffer, x: int, y: int, width: int, height: int, cell: Cell) -> None:
    """Fill a rectangle with one cell; parts outside the buffer are dropped."""
    for x_index in range(width):
        for y_index in range(height):
            buffer.set_clipping(x + x_index, y + y_index, cell)
