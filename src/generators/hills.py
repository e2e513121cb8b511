"""
Hills Generator

A height field of drifting Gaussian hills on a wrapping plane,
shown through the glyph density ramp and colored by height.
"""

import math
import random
from dataclasses import dataclass
from typing import List, Tuple
from engine.frame_buffer import FrameBuffer
from engine.rasterizer import value_to_glyph
from generators.base import BaseGenerator
from models.cell import Cell
from models.color import HSVColor

# (x, 1 / size, squared y distance, height) for one hill along one row
RowTerm = Tuple[float, float, float, float]


def nearest_wrapped(distance: float, period: float) -> float:
    """
    Signed distance to the closest of the copies at -period, 0 and +period

    The Gaussian falls off monotonically with distance, so on each axis the
    closest copy is also the tallest and one exp() per hill is enough.
    """
    half = period / 2.0
    if distance > half:
        return distance - period
    if distance < -half:
        return distance + period
    return distance


@dataclass
class Hill:
    x: float
    y: float
    dx: float
    dy: float
    size: float
    height: float

    @classmethod
    def random(cls, width: float, height: float) -> 'Hill':
        return cls(
            x=random.uniform(0.0, width + 1.0),
            y=random.uniform(0.0, height + 1.0),
            dx=(random.random() - 0.5) * 0.2,
            dy=(random.random() - 0.5) * 0.2,
            # Keep a minimum size so the distance scaling never divides by zero
            size=max(random.random() * min(width, height), 0.5),
            height=random.random() * 0.5,
        )


class Hills(BaseGenerator):
    NAME = "Hills"
    AUTHOR = "Jo"

    HILL_COUNT = 10

    def __init__(self):
        super().__init__()
        self.hills: List[Hill] = []
        self.width = 0.0
        self.height = 0.0

    def initialize(self, buffer: FrameBuffer) -> None:
        self.width = float(buffer.width)
        self.height = float(buffer.height)
        self.hills = [Hill.random(self.width, self.height) for _ in range(self.HILL_COUNT)]

    def step(self) -> None:
        for hill in self.hills:
            hill.x = (hill.x + hill.dx) % (self.width + 1.0)
            hill.y = (hill.y + hill.dy) % (self.height + 1.0)

    def row_terms(self, y: int) -> List[RowTerm]:
        terms = []
        for hill in self.hills:
            distance_y = nearest_wrapped(hill.y - y, self.height) / hill.size
            terms.append((hill.x, 1.0 / hill.size, distance_y * distance_y, hill.height))
        return terms

    def eval_in_row(self, terms: List[RowTerm], x: int) -> float:
        value = 0.0
        for hill_x, inverse_size, distance_y_sq, hill_height in terms:
            distance_x = nearest_wrapped(hill_x - x, self.width) * inverse_size
            value += math.exp(-(distance_x * distance_x + distance_y_sq)) * hill_height
        return value

    def eval(self, x: int, y: int) -> float:
        """Sum of hill heights, each hill taking its nearest wrapped copy."""
        return self.eval_in_row(self.row_terms(y), x)

    def render(self, buffer: FrameBuffer) -> None:
        if self.resized(buffer):
            self.initialize(buffer)

        self.step()

        for y in range(buffer.height):
            terms = self.row_terms(y)
            for x in range(buffer.width):
                value = self.eval_in_row(terms, x)
                color = HSVColor(value % 1.0, 1.0, 1.0).to_color()
                buffer.set(x, y, Cell(glyph=value_to_glyph(value), color=color))
