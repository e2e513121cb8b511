"""
Random Walkers Generator

A handful of colored glyphs wandering the screen one cell per tick.
"""

import random
from dataclasses import dataclass
from typing import List
from engine.frame_buffer import FrameBuffer
from generators.base import BaseGenerator
from models.cell import Cell


@dataclass
class RandomWalker:
    x: int
    y: int
    cell: Cell

    @classmethod
    def random(cls) -> 'RandomWalker':
        # Start anywhere; positions are wrapped into the buffer on the first step
        return cls(x=random.randrange(1024), y=random.randrange(1024), cell=Cell.random())

    def walk(self, width: int, height: int) -> None:
        direction = random.randrange(4)

        if direction == 0:
            self.x += 1
        elif direction == 1:
            self.x -= 1
        elif direction == 2:
            self.y += 1
        else:
            self.y -= 1

        self.x %= width
        self.y %= height


class RandomWalkers(BaseGenerator):
    """Ten walkers, each with its own random glyph and color, wrapping at the edges."""
    NAME = "RandomWalkers"
    AUTHOR = "Jo"

    WALKER_COUNT = 10

    def __init__(self):
        super().__init__()
        self.walkers: List[RandomWalker] = [RandomWalker.random() for _ in range(self.WALKER_COUNT)]

    def render(self, buffer: FrameBuffer) -> None:
        for walker in self.walkers:
            walker.walk(buffer.width, buffer.height)
            buffer.set(walker.x, walker.y, walker.cell)
