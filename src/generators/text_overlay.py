"""
Text Overlay

Writes white text over the top-left corner of a frame.
The scheduler uses it for the status overlay (generator, author, resolution).
"""

from typing import Optional
from engine.frame_buffer import FrameBuffer
from generators.base import BaseGenerator
from models.cell import Cell
from models.color import Color


class TextOverlay(BaseGenerator):
    """
    Plain text overlay

    - '\\n' starts a new line
    - Lines longer than the buffer wrap onto the next line
    - Text below the last row is dropped
    """
    NAME = "TextOverlay"
    AUTHOR = "Jo"

    def __init__(self, text: str = "", color: Optional[Color] = None):
        super().__init__()
        self.text = text
        self.color = color or Color.white()

    def render(self, buffer: FrameBuffer) -> None:
        line = 0
        column = 0

        for character in self.text:
            if character == "\n":
                line += 1
                column = 0
                continue

            if column >= buffer.width:
                line += 1
                column = 0

            if line >= buffer.height:
                return

            buffer.set(column, line, Cell(glyph=character, color=self.color))
            column += 1
