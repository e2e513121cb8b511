"""
Mandelbrot Generator

A slow zoom into the Mandelbrot set. Escape times are computed for the
whole screen at once with numpy; each cell then picks one of the
precomputed palette cells.
"""

import math
from typing import List
import numpy as np
from engine.frame_buffer import FrameBuffer
from engine.rasterizer import value_to_glyph
from generators.base import BaseGenerator
from models.cell import Cell
from models.color import HSVColor

# Escape times cycle through this many colors
BANDS = 30


def _band_cell(value: float) -> Cell:
    return Cell(glyph=value_to_glyph(value), color=HSVColor(value % 1.0, 1.0, 1.0).to_color())


# One cell per band, the last one for points inside the set
PALETTE: List[Cell] = [_band_cell(band / BANDS) for band in range(BANDS)] + [_band_cell(1.0)]


class Mandelbrot(BaseGenerator):
    """
    Escape-time zoom

    - The view is START_WIDTH wide and shrinks by ZOOM every frame
    - Escape times cycle through BANDS colors, points inside the set
      take the last palette entry
    - The iteration limit grows as the view narrows
    """
    NAME = "Mandelbrot"
    AUTHOR = "Marco"

    CENTER = complex(-0.608118878, -0.615161994)
    START_WIDTH = 8.0
    ZOOM = 0.985
    BOUND = 2.0
    # Cells are about 2.5 times as tall as wide in most terminal fonts
    CELL_ASPECT = 2.5

    def __init__(self):
        super().__init__()
        self.width = self.START_WIDTH

    def max_iterations(self) -> int:
        # Round half up, the value is always positive
        return int(math.floor(50.0 + math.log10(4.0 / self.width) ** 2 + 0.5))

    def escape_counts(self, columns: int, rows: int) -> np.ndarray:
        """
        Iteration at which each point left the BOUND circle

        Returns:
            (rows, columns) int array; max_iterations() where the point never escaped
        """
        max_iterations = self.max_iterations()
        view_height = self.width * (rows / columns) * self.CELL_ASPECT

        real = np.arange(columns) / columns * self.width - self.width / 2.0 + self.CENTER.real
        imag = np.arange(rows) / rows * view_height - view_height / 2.0 + self.CENTER.imag
        c = real[np.newaxis, :] + 1j * imag[:, np.newaxis]

        z = np.zeros_like(c)
        counts = np.full(c.shape, max_iterations, dtype=np.int64)
        active = np.ones(c.shape, dtype=bool)

        for iteration in range(max_iterations):
            z[active] = z[active] ** 2 + c[active]
            escaped = active & (np.abs(z) > self.BOUND)
            counts[escaped] = iteration
            active &= ~escaped
            if not active.any():
                break

        return counts

    def render(self, buffer: FrameBuffer) -> None:
        counts = self.escape_counts(buffer.width, buffer.height)
        bands = np.where(counts == self.max_iterations(), BANDS, counts % BANDS)

        buffer.cells = [PALETTE[band] for band in bands.ravel().tolist()]

        self.width *= self.ZOOM
