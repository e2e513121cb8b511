"""
Matrix Generator

Green character rain. Every column is a falling trail whose characters
dim with distance from the head; a new set of columns is spawned once
every trail has left the screen.
"""

import random
from dataclasses import dataclass, field
from typing import List
from engine.frame_buffer import FrameBuffer
from generators.base import BaseGenerator
from models.cell import Cell
from models.color import Color

CHARACTERS = "abcdefghijklmnopqrstuvwxyzABCDEFGHIJKLMNOPQRSTUVWXYZ0123456789!\"#$%&'()*+,-./:;<=>?@[\\]^_`{|}~"

# Trail characters darker than this are not drawn
MIN_LUMINANCE = 0.1


@dataclass
class Column:
    decay: float
    speed: float
    position: float
    glyphs: List[str] = field(default_factory=list)
    done: bool = False

    BASE_COLOR = Color.green()

    @classmethod
    def random(cls, height: int) -> 'Column':
        return cls(
            # Trails between roughly 10 and 20 characters long
            decay=random.random() / (height * 0.75) + 0.02,
            speed=random.random() / 1.5 + 0.5,
            position=random.uniform(-float(height), 0.0),
            glyphs=[random.choice(CHARACTERS) for _ in range(height)],
        )

    def render(self, buffer: FrameBuffer, x: int) -> None:
        if self.done:
            return

        if self.position >= 0.0:
            self._render_trail(buffer, x)

        self.position += self.speed

    def _render_trail(self, buffer: FrameBuffer, x: int) -> None:
        color = self.BASE_COLOR
        self.done = True

        for index, glyph in enumerate(self.glyphs):
            # The head keeps the full color
            if index != 0:
                color = color.subtract(self.decay)

            if color.luminance() < MIN_LUMINANCE:
                break

            target = int(self.position - index)
            if target < 0 or target >= buffer.height:
                continue

            buffer.set_clipping(x, target, Cell(glyph=glyph, color=color))
            self.done = False


class Matrix(BaseGenerator):
    NAME = "The Matrix"
    AUTHOR = "Jo"

    def __init__(self):
        super().__init__()
        self.columns: List[Column] = []

    def initialize(self, buffer: FrameBuffer) -> None:
        self.columns = [Column.random(buffer.height) for _ in range(buffer.width)]

    def render(self, buffer: FrameBuffer) -> None:
        if self.resized(buffer):
            self.initialize(buffer)

        for x, column in enumerate(self.columns):
            column.render(buffer, x)

        if all(column.done for column in self.columns):
            self.initialize(buffer)
