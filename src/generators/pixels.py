"""
Pixels Generator

Draws a static bitmap with half-block characters, two bitmap rows per
terminal row. Parts of the image that fall outside the screen are
clipped away.
"""

from typing import List, Sequence, Tuple
from engine.frame_buffer import FrameBuffer
from generators.base import BaseGenerator
from models.cell import Cell
from models.color import HSVColor

Bitmap = Sequence[Sequence[bool]]

# (top pixel set, bottom pixel set) -> glyph
HALF_BLOCKS = {
    (False, False): " ",
    (True, False): "▀",
    (False, True): "▄",
    (True, True): "█",
}

PIXEL_COLOR = HSVColor(0.0, 0.0, 0.4).to_color()


class Pixels(BaseGenerator):
    """
    Static bitmap

    Args:
        image: Rows of pixels, True where the pixel is lit
        top_left: (column, row) of the first terminal cell of the image
    """
    NAME = "Pixels"
    AUTHOR = "Imarok"

    CELLS = {pair: Cell(glyph=glyph, color=PIXEL_COLOR) for pair, glyph in HALF_BLOCKS.items()}

    def __init__(self, image: Bitmap, top_left: Tuple[int, int] = (0, 0)):
        super().__init__()
        self.image: List[List[bool]] = [list(row) for row in image]
        self.top_left = top_left

    def pixel(self, x: int, y: int) -> bool:
        """Pixel value, False outside the image"""
        if 0 <= y < len(self.image) and 0 <= x < len(self.image[y]):
            return self.image[y][x]
        return False

    def render(self, buffer: FrameBuffer) -> None:
        left, top = self.top_left
        width = max((len(row) for row in self.image), default=0)

        for y in range(0, len(self.image), 2):
            for x in range(width):
                cell = self.CELLS[(self.pixel(x, y), self.pixel(x, y + 1))]
                buffer.set_clipping(x + left, y // 2 + top, cell)
