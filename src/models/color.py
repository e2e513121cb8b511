"""
Color model - RGB and HSV representations

All channels are normalized reals in [0.0, 1.0]. Colors are immutable:
every adjustment returns a new Color, clamped back into range.
Uses utils.colors for the underlying conversion functions.
"""

import random
from dataclasses import dataclass
from typing import Tuple
from utils.colors import clamp01, hsv_to_rgb, channel_to_byte, luminance


@dataclass(frozen=True)
class Color:
    """
    RGB color with normalized channels

    Examples:
        red = Color(1.0, 0.0, 0.0)

        # Dim to 50%
        dimmed = red.scale(0.5)

        # Blend halfway to blue
        purple = red.interpolate(Color(0.0, 0.0, 1.0), 0.5)

        # Escape sequence values
        r, g, b = purple.to_rgb_bytes()
    """

    r: float = 0.0
    g: float = 0.0
    b: float = 0.0

    # === CONSTRUCTORS ===

    @classmethod
    def from_hsv(cls, h: float, s: float, v: float) -> 'Color':
        """
        Create from HSV (each 0.0-1.0)

        Hue is not wrapped; callers reduce it with `% 1.0` first.
        """
        return cls(*hsv_to_rgb(h, s, v))

    @staticmethod
    def black() -> 'Color':
        return Color(0.0, 0.0, 0.0)

    @staticmethod
    def white() -> 'Color':
        return Color(1.0, 1.0, 1.0)

    @staticmethod
    def red() -> 'Color':
        return Color(1.0, 0.0, 0.0)

    @staticmethod
    def green() -> 'Color':
        return Color(0.0, 1.0, 0.0)

    @staticmethod
    def blue() -> 'Color':
        return Color(0.0, 0.0, 1.0)

    # === ADJUSTMENTS ===

    def scale(self, factor: float) -> 'Color':
        """
        Multiply every channel by factor

        Args:
            factor: Brightness factor (0.0 = black, 1.0 = unchanged)

        Returns:
            New Color with channels clamped to 0.0-1.0
        """
        return Color(
            clamp01(self.r * factor),
            clamp01(self.g * factor),
            clamp01(self.b * factor),
        )

    def subtract(self, delta: float) -> 'Color':
        """
        Subtract delta from every channel (used for trailing decay)

        Returns:
            New Color with channels clamped to 0.0-1.0
        """
        return Color(
            clamp01(self.r - delta),
            clamp01(self.g - delta),
            clamp01(self.b - delta),
        )

    def luminance(self) -> float:
        """Perceptual brightness (0.3 R + 0.59 G + 0.11 B)"""
        return luminance(self.r, self.g, self.b)

    def interpolate(self, other: 'Color', t: float) -> 'Color':
        """
        Linear blend towards another color

        Args:
            other: Target color
            t: Blend position, clamped to 0.0-1.0 (0.0 = self, 1.0 = other)

        Returns:
            New blended Color
        """
        t = clamp01(t)
        return Color(
            clamp01(self.r + (other.r - self.r) * t),
            clamp01(self.g + (other.g - self.g) * t),
            clamp01(self.b + (other.b - self.b) * t),
        )

    # === RENDERING ===

    def to_rgb_bytes(self) -> Tuple[int, int, int]:
        """
        Get 0-255 values for the true-color escape sequence

        Returns:
            (r, g, b) tuple with values 0-255
        """
        return (channel_to_byte(self.r), channel_to_byte(self.g), channel_to_byte(self.b))

    def __str__(self) -> str:
        return f"Color(r={self.r:.2f}, g={self.g:.2f}, b={self.b:.2f})"


@dataclass(frozen=True)
class HSVColor:
    """
    HSV color, each component in [0.0, 1.0]

    Example:
        color = HSVColor(h=(offset + 0.3) % 1.0, s=1.0, v=1.0).to_color()
    """

    h: float
    s: float = 1.0
    v: float = 1.0

    @classmethod
    def random_hue(cls) -> 'HSVColor':
        """Fully saturated, full value color with a uniformly random hue"""
        return cls(h=random.random(), s=1.0, v=1.0)

    def to_color(self) -> Color:
        return Color.from_hsv(self.h, self.s, self.v)


def random_hue() -> HSVColor:
    """Module-level shortcut for HSVColor.random_hue()"""
    return HSVColor.random_hue()
