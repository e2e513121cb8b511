"""
Utility functions for termshow
"""

from .colors import (
    clamp01,
    hsv_to_rgb,
    channel_to_byte,
    luminance,
)

__all__ = [
    'clamp01',
    'hsv_to_rgb',
    'channel_to_byte',
    'luminance',
]
