"""
Game of Life Generator

Conway's Game of Life on a torus the size of the screen.
"""

import random
from typing import List
from engine.frame_buffer import FrameBuffer
from generators.base import BaseGenerator
from models.cell import Cell
from models.color import Color


class GameOfLife(BaseGenerator):
    """
    Toroidal Game of Life

    - Seeded with ~25% live cells
    - Advances one generation every SPEED renders
    - A resized screen reseeds the board (one-time visual reset)
    """
    NAME = "Game of Life"
    AUTHOR = "Jo"

    SPEED = 8
    SEED_DENSITY = 0.25
    ALIVE = Cell(glyph="@", color=Color.white())

    def __init__(self):
        super().__init__()
        self.width = 0
        self.height = 0
        self.cells: List[bool] = []
        self.step_counter = 0

    def initialize(self, width: int, height: int) -> None:
        self.width = width
        self.height = height
        self.cells = [random.random() < self.SEED_DENSITY for _ in range(width * height)]

    def step(self) -> None:
        # Only advance every SPEED renders
        advance = self.step_counter % self.SPEED == 0
        self.step_counter += 1
        if not advance:
            return

        w, h = self.width, self.height
        old = self.cells
        new = [False] * (w * h)

        for y in range(h):
            rows = ((y - 1) % h * w, y * w, (y + 1) % h * w)
            for x in range(w):
                columns = ((x - 1) % w, x, (x + 1) % w)
                neighbors = 0
                for row in rows:
                    for column in columns:
                        if old[row + column]:
                            neighbors += 1

                alive = old[y * w + x]
                if alive:
                    neighbors -= 1

                new[y * w + x] = neighbors == 3 or (alive and neighbors == 2)

        self.cells = new

    def render(self, buffer: FrameBuffer) -> None:
        if self.resized(buffer):
            self.initialize(buffer.width, buffer.height)

        self.step()

        for index, alive in enumerate(self.cells):
            if alive:
                buffer.cells[index] = self.ALIVE
