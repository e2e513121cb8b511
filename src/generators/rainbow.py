"""
Rainbow Generator

Full-screen HSV gradient that slowly rotates and shifts its hues.
"""

import math
from engine.frame_buffer import FrameBuffer
from generators.base import BaseGenerator
from models.cell import Cell
from models.color import HSVColor


class Rainbow(BaseGenerator):
    """
    Rotating rainbow

    The hue is the coordinate of each cell along a rotating axis.
    Terminal cells are roughly twice as high as wide, so y is
    stretched by 2 to keep the gradient bands straight.
    """
    NAME = "Rainbow"
    AUTHOR = "Jo"

    GLYPH = "A"
    STEP = 0.01

    def __init__(self):
        super().__init__()
        self.color_shift = 0.0
        self.rotation = 0.0

    def render(self, buffer: FrameBuffer) -> None:
        self.color_shift += self.STEP
        self.rotation += self.STEP

        long_edge = max(buffer.width, buffer.height * 2)
        cos_r = math.cos(self.rotation)
        sin_r = math.sin(self.rotation)

        for y in range(buffer.height):
            y_t = 2.0 * y / long_edge
            for x in range(buffer.width):
                x_t = x / long_edge

                # Projection onto the rotated x axis
                hue = x_t * cos_r + y_t * sin_r
                hue = (hue + self.color_shift) % 1.0

                buffer.set(x, y, Cell(glyph=self.GLYPH, color=HSVColor(hue, 1.0, 1.0).to_color()))
