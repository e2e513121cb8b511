"""
Transition Service

Dissolves the end of each playlist run to a blank screen instead of
cutting to the next generator abruptly.

The fade is a per-frame transform: every tick inside the fade window the
scheduler hands over the freshly rendered buffer together with the
remaining run time, and the service scales the colors down and blanks the
cells that became too dark to read.
"""

from typing import Optional
from engine.frame_buffer import FrameBuffer
from models.cell import Cell
from models.enums import TransitionType, LogCategory
from models.transition import TransitionConfig
from utils.logger import get_category_logger

log = get_category_logger(LogCategory.TRANSITION)


def fade_ratio(remaining_s: float, fade_duration_s: float) -> float:
    """
    Fade factor for the time left in a run

    Returns:
        remaining / fade_duration clamped to 0.0-1.0
        (1.0 when fading is disabled by a zero duration)
    """
    if fade_duration_s <= 0:
        return 1.0
    return max(0.0, min(1.0, remaining_s / fade_duration_s))


def fade_out(buffer: FrameBuffer, fade: float, blank_threshold: float = 0.1) -> None:
    """
    Fade the given frame towards a blank screen, in place

    A fade value of 1.0 leaves the frame unchanged, 0.0 blanks it completely.
    Colors are scaled by `fade`; cells whose luminance drops below
    `blank_threshold` get a space glyph.
    """
    if fade >= 1.0:
        return

    cells = buffer.cells
    for index, cell in enumerate(cells):
        color = cell.color.scale(fade)
        glyph = " " if color.luminance() < blank_threshold else cell.glyph
        cells[index] = Cell(glyph=glyph, color=color)


class TransitionService:
    """
    Applies the configured end-of-run transition to frames

    Example:
        service = TransitionService(TransitionConfig(duration_s=2.0))

        remaining = run_end - now
        if service.in_fade_window(remaining):
            service.apply(buffer, remaining)
    """

    def __init__(self, config: Optional[TransitionConfig] = None):
        self.config = config or TransitionConfig()

        log.debug("TransitionService initialized", config=repr(self.config))

    def in_fade_window(self, remaining_s: float) -> bool:
        """True when the run is close enough to its end to fade."""
        if self.config.type == TransitionType.NONE:
            return False
        return remaining_s < self.config.duration_s

    def apply(self, buffer: FrameBuffer, remaining_s: float) -> float:
        """
        Fade the buffer for the given remaining run time

        Returns:
            The fade factor that was applied (after easing)
        """
        progress = fade_ratio(remaining_s, self.config.duration_s)
        factor = max(0.0, min(1.0, self.config.ease_function(progress)))
        fade_out(buffer, factor, self.config.blank_threshold)
        return factor
