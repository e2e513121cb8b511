"""
Moving Blocks Generator

Four interleaved sets of small blocks sliding along the axes:
two sets travel horizontally in opposite directions, two vertically.
"""

from engine.frame_buffer import FrameBuffer
from engine.rasterizer import fill_block
from generators.base import BaseGenerator
from models.cell import Cell
from models.color import Color


class MovingBlocks(BaseGenerator):
    NAME = "Moving Blocks"
    AUTHOR = "Jo"

    CLOCK_DIVIDER = 8   # Renders per one-cell move
    BLOCK_SIZE = 3

    RIGHT = Cell(glyph="X", color=Color(1.0, 0.839, 0.0))
    LEFT = Cell(glyph="#", color=Color(0.0, 0.550, 1.0))
    DOWN = Cell(glyph="O", color=Color(0.75, 0.0, 1.0))
    UP = Cell(glyph="%", color=Color(0.2, 0.77, 0.12))

    def __init__(self):
        super().__init__()
        self.step = 0

    def render(self, buffer: FrameBuffer) -> None:
        size = self.BLOCK_SIZE
        period = 4 * size
        offset = (self.step // self.CLOCK_DIVIDER + size) % period

        forward = -size + offset
        backward = -size + period - offset

        # Horizontal rows
        for y in range(0, buffer.height, period):
            for x in range(forward, buffer.width + 1, period):
                fill_block(buffer, x, y, size, size, self.RIGHT)

        for y in range(2 * size, buffer.height, period):
            for x in range(backward, buffer.width + 1, period):
                fill_block(buffer, x, y, size, size, self.LEFT)

        # Vertical columns
        for x in range(2 * size, buffer.width, period):
            for y in range(forward, buffer.height + 1, period):
                fill_block(buffer, x, y, size, size, self.DOWN)

        for x in range(0, buffer.width, period):
            for y in range(backward, buffer.height + 1, period):
                fill_block(buffer, x, y, size, size, self.UP)

        self.step += 1
