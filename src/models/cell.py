"""
Cell model - one character position of a frame
"""

import random
from dataclasses import dataclass, field
from models.color import Color, HSVColor


@dataclass(frozen=True)
class Cell:
    """
    A glyph paired with its foreground color

    Cells are immutable; buffers replace them rather than edit them,
    so one Cell instance can safely fill many positions.
    """

    glyph: str = " "
    color: Color = field(default_factory=Color.black)

    @staticmethod
    def empty() -> 'Cell':
        """Black space"""
        return EMPTY_CELL

    @staticmethod
    def random() -> 'Cell':
        """Random printable ASCII glyph with a random vivid color"""
        glyph = chr(random.randrange(32, 127))
        return Cell(glyph=glyph, color=HSVColor.random_hue().to_color())

    def to_ansi(self) -> str:
        """True-color foreground escape sequence followed by the glyph"""
        r, g, b = self.color.to_rgb_bytes()
        return f"\x1b[38;2;{r};{g};{b}m{self.glyph}"


EMPTY_CELL = Cell(glyph=" ", color=Color.black())
