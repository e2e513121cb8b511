"""
Drops Generator

Rings spreading out from a few random points like drops on water.
The plane spans [0, width / height / 2] x [0, 1] so the rings stay
round on terminal cells, which are about twice as tall as wide.
"""

import math
import random
from typing import List, Tuple
from engine.frame_buffer import FrameBuffer
from generators.base import BaseGenerator
from models.cell import Cell
from models.color import HSVColor


class Drops(BaseGenerator):
    """
    Expanding sine rings

    - CENTER_COUNT centers placed at random when the size changes
    - The ring front grows by GROWTH plane units per second (60 steps)
    - Height sets the brightness, negative height flips the hue
    """
    NAME = "Drops"
    AUTHOR = "Jo"

    CENTER_COUNT = 3
    STEPS_PER_SECOND = 60.0
    GROWTH = 0.1
    WAVE_NUMBER = 35.0
    AMPLITUDE = 0.3
    # Keeps the 1/distance falloff finite at the center itself
    MIN_DISTANCE = 1e-3
    GLYPH = "@"

    def __init__(self):
        super().__init__()
        self.centers: List[Tuple[float, float]] = []
        self.step = 0

    def initialize(self, ratio: float) -> None:
        self.centers = [(random.random() * ratio, random.random()) for _ in range(self.CENTER_COUNT)]

    def height_at(self, x: float, y: float, time: float) -> float:
        grown = time * self.GROWTH
        height = 0.0

        for center_x, center_y in self.centers:
            distance = math.hypot(center_x - x, center_y - y)
            if distance > grown:
                continue
            falloff = min(max(distance, self.MIN_DISTANCE), 1.0)
            height += math.sin((grown - distance) * self.WAVE_NUMBER) * self.AMPLITUDE / falloff / 2.0

        return height

    def cell_at(self, x: float, y: float, time: float) -> Cell:
        height = self.height_at(x, y, time)

        hue = (0.4 + 0.01 * time) % 1.0
        if height < 0.0:
            hue = (hue + 0.5) % 1.0

        value = min(abs(height), 1.0)
        return Cell(glyph=self.GLYPH, color=HSVColor(hue, 1.0, value).to_color())

    def render(self, buffer: FrameBuffer) -> None:
        ratio = buffer.width / buffer.height / 2.0
        if self.resized(buffer):
            self.initialize(ratio)

        time = self.step / self.STEPS_PER_SECOND

        for y in range(buffer.height):
            plane_y = y / buffer.height
            for x in range(buffer.width):
                plane_x = x / buffer.width * ratio
                buffer.set(x, y, self.cell_at(plane_x, plane_y, time))

        self.step += 1
