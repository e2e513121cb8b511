"""Services layer"""

from .transition_service import TransitionService, fade_out, fade_ratio

__all__ = [
    "TransitionService",
    "fade_out",
    "fade_ratio",
]
