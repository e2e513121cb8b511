"""
FrameBuffer - fixed-size grid of cells for one displayed frame.

Lifecycle:
  - Created fresh by the scheduler every tick, sized to the terminal
  - Handed to exactly one generator render call (plus the status overlay)
  - Serialized to the output sink, then dropped

Cells are stored row-major in a flat list: index = y * width + x.
"""

from typing import List, TextIO
from models.cell import Cell

CURSOR_HOME = "\x1b[1;1H"
CURSOR_HIDE = "\x1b[?25l"
CURSOR_SHOW = "\x1b[?25h"


class InvalidDimensions(ValueError):
    """Raised when a buffer is constructed with a zero (or negative) dimension."""

    def __init__(self, width: int, height: int):
        super().__init__(f"Invalid buffer dimensions: {width}x{height}")
        self.width = width
        self.height = height


class FrameBuffer:
    """
    Fixed-size frame of glyph + color cells.

    Access:
      - get()/set(): unchecked, for loops already bounded by width/height
      - set_clipping(): silently drops writes outside the buffer
    """

    def __init__(self, width: int, height: int):
        if width <= 0 or height <= 0:
            raise InvalidDimensions(width, height)

        self.width = width
        self.height = height
        self.cells: List[Cell] = [Cell.empty()] * (width * height)

    # === Cell access ===

    def get(self, x: int, y: int) -> Cell:
        """Unchecked read. Caller guarantees 0 <= x < width, 0 <= y < height."""
        return self.cells[y * self.width + x]

    def set(self, x: int, y: int, cell: Cell) -> None:
        """Unchecked write. Caller guarantees 0 <= x < width, 0 <= y < height."""
        self.cells[y * self.width + x] = cell

    def in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def set_clipping(self, x: int, y: int, cell: Cell) -> None:
        """Write a cell, ignoring coordinates outside the buffer."""
        if self.in_bounds(x, y):
            self.cells[y * self.width + x] = cell

    def fill(self, cell: Cell) -> None:
        self.cells = [cell] * (self.width * self.height)

    @property
    def size(self):
        return (self.width, self.height)

    # === Output ===

    def to_ansi(self) -> str:
        """
        Serialize the frame: cursor home + hide, then one line per row.

        Rows are separated by newlines, with no newline after the last row
        so the terminal does not scroll.
        """
        rows = []
        for y in range(self.height):
            start = y * self.width
            rows.append("".join(cell.to_ansi() for cell in self.cells[start:start + self.width]))

        return CURSOR_HOME + CURSOR_HIDE + "\n".join(rows)

    def render(self, sink: TextIO) -> None:
        """Write the serialized frame to the sink and flush it."""
        sink.write(self.to_ansi())
        sink.flush()

    def __repr__(self) -> str:
        return f"FrameBuffer({self.width}x{self.height})"
