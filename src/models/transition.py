"""
Transition Models

Defines the run-to-run transition configuration used by the scheduler.
"""

from typing import Callable, Dict, Optional
from models.enums import TransitionType


class TransitionConfig:
    """
    Configuration for the end-of-run transition

    Attributes:
        type: Type of transition (NONE, FADE)
        duration_s: Length of the fade-out at the end of each run (seconds)
        blank_threshold: Cells darker than this luminance are blanked to a space
        ease_function: Easing function (progress: 0.0-1.0) -> (factor: 0.0-1.0)

    Examples:
        # Default two-second linear fade
        fade = TransitionConfig()

        # Slow, smooth dissolve
        slow = TransitionConfig(duration_s=5.0, ease_function=ease_in_quad)

        # Hard cut between generators
        cut = TransitionConfig(type=TransitionType.NONE)
    """

    def __init__(
        self,
        type: TransitionType = TransitionType.FADE,
        duration_s: float = 2.0,
        blank_threshold: float = 0.1,
        ease_function: Optional[Callable[[float], float]] = None
    ):
        self.type = type
        self.duration_s = max(0.0, duration_s)
        self.blank_threshold = blank_threshold
        self.ease_function = ease_function or ease_linear

    def __repr__(self):
        return f"TransitionConfig({self.type.name}, {self.duration_s}s, threshold={self.blank_threshold})"


# === Easing Functions ===

def ease_linear(t: float) -> float:
    """
    Linear easing (constant speed)

    Args:
        t: Progress (0.0 = start, 1.0 = end)

    Returns:
        Factor (0.0 to 1.0) for brightness
    """
    return t


def ease_in_quad(t: float) -> float:
    """Quadratic ease-in (slow start → fast end)"""
    return t * t


def ease_out_quad(t: float) -> float:
    """Quadratic ease-out (fast start → slow end)"""
    return 1 - (1 - t) * (1 - t)


def ease_in_out_quad(t: float) -> float:
    """Quadratic ease-in-out (slow start → fast middle → slow end)"""
    return 2 * t * t if t < 0.5 else 1 - (-2 * t + 2) ** 2 / 2


EASING_FUNCTIONS: Dict[str, Callable[[float], float]] = {
    "linear": ease_linear,
    "in_quad": ease_in_quad,
    "out_quad": ease_out_quad,
    "in_out_quad": ease_in_out_quad,
}
