"""
Triangles Generator

A single triangle spinning around the screen center, drawn with plot_line.
"""

import math
from engine.frame_buffer import FrameBuffer
from engine.rasterizer import plot_line
from generators.base import BaseGenerator
from models.cell import Cell
from models.color import Color


class Triangles(BaseGenerator):
    NAME = "Triangles"
    AUTHOR = "Jo"

    EDGE = Cell(glyph="a", color=Color.red())

    def __init__(self):
        super().__init__()
        self.step = 0

    def render(self, buffer: FrameBuffer) -> None:
        self.step += 1

        radius = float(min(buffer.width // 2, buffer.height))
        center_x = float(buffer.width // 2)
        center_y = float(buffer.height // 2)

        angle = math.pi * self.step / 360.0
        corners = []
        for i in range(3):
            a = angle + i * 2.0 * math.pi / 3.0
            # Cells are about twice as tall as wide: halve the vertical extent
            corners.append((
                math.sin(a) * radius + center_x,
                math.cos(a) / 2.0 * radius + center_y,
            ))

        def edge(_x: int, _y: int) -> Cell:
            return self.EDGE

        for i in range(3):
            plot_line(buffer, corners[i], corners[(i + 1) % 3], edge)
