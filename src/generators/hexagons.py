"""
Hexagons Generator

A slowly rotating, breathing honeycomb. Every edge is clipped to the
screen with clip() and drawn with plot_line(), colored red -> blue
from left to right.
"""

import math
from typing import List, Tuple
from engine.frame_buffer import FrameBuffer
from engine.rasterizer import clip, plot_line
from generators.base import BaseGenerator
from models.cell import Cell
from models.color import Color

Point = Tuple[float, float]


class Hexagons(BaseGenerator):
    """
    Hexagon grid

    r is the radius from the center of a hexagon to one of its corners.
    The grid is generated in four point rows per hexagon row and then
    rotated around the screen center, scaled by 4 (x) and 2 (y).
    """
    NAME = "Hexagons"
    AUTHOR = "Jo"

    GLYPH = "o"
    BASE_RADIUS = 5.0

    def __init__(self):
        super().__init__()
        self.step = 0
        self.r = self.BASE_RADIUS

    def _grid(self, width: float, height: float) -> Tuple[List[List[Point]], int]:
        b = self.r * math.sqrt(3.0 / 4.0)
        num_points_x = int((width + 4.0 * b) / (2.0 * b))

        rows: List[List[Point]] = []
        y0 = -2.0 * self.r

        while y0 <= height + 2.0 * self.r:
            for i in range(4):
                x0 = -2.0 * b if i in (1, 2) else -b
                rows.append([(x0 + n * 2.0 * b, y0) for n in range(num_points_x)])
                y0 += 0.5 * self.r if i in (0, 2) else self.r

        return rows, num_points_x

    def render(self, buffer: FrameBuffer) -> None:
        self.step += 1

        angle = self.step * math.pi * 2.0 / 360.0 * 0.1
        self.r = math.sin(self.step * math.pi / 360.0) + self.BASE_RADIUS

        width = float(buffer.width)
        height = float(buffer.height)
        rows, num_points_x = self._grid(width, height)

        cx, cy = width / 2.0, height / 2.0
        cos_a, sin_a = math.cos(angle), math.sin(angle)

        def transform(p: Point) -> Point:
            dx, dy = p[0] - cx, p[1] - cy
            rx = cos_a * dx - sin_a * dy
            ry = sin_a * dx + cos_a * dy
            return (4.0 * rx + cx, 2.0 * ry + cy)

        points = [[transform(p) for p in row] for row in rows]

        red = Color.red()
        blue = Color.blue()

        def gradient(x: int, _y: int) -> Cell:
            return Cell(glyph=self.GLYPH, color=red.interpolate(blue, x / width))

        for y in range(0, len(points), 4):
            for x in range(num_points_x - 1):
                p0 = points[y][x]
                p1 = points[y + 1][x]
                p2 = points[y + 1][x + 1]
                p3 = points[y + 2][x]
                p4 = points[y + 2][x + 1]
                p5 = points[y + 3][x]
                lines = [(p1, p0), (p0, p2), (p1, p3), (p3, p5), (p5, p4)]

                if y + 4 < len(points):
                    lines.append((p5, points[y + 4][x]))

                for start, end in lines:
                    clipped = clip(start, end, 0.0, width, 0.0, height)
                    if clipped is not None:
                        plot_line(buffer, clipped[0], clipped[1], gradient)
