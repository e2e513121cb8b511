"""
Color conversion utilities

Pure functions on normalized channel values (0.0-1.0).
Color and HSVColor in models.color are built on top of these.
"""

from typing import Tuple


def clamp01(value: float) -> float:
    """Clamp a channel value into [0.0, 1.0]"""
    return max(0.0, min(1.0, value))


def hsv_to_rgb(h: float, s: float, v: float) -> Tuple[float, float, float]:
    """
    Convert HSV (each 0.0-1.0) to RGB (each 0.0-1.0)

    Six-sector piecewise conversion: sector = floor(h * 360 / 60).
    Hue is not wrapped here - reduce it with `% 1.0` before calling.
    A hue of exactly 1.0 lands in sector 6 and is treated as sector 0 (red).

    Args:
        h: Hue (0.0-1.0)
        s: Saturation (0.0-1.0)
        v: Value (0.0-1.0)

    Returns:
        (r, g, b) tuple with values 0.0-1.0

    Example:
        hsv_to_rgb(0.0, 1.0, 1.0)    # (1.0, 0.0, 0.0) red
        hsv_to_rgb(1/3, 1.0, 1.0)    # (0.0, 1.0, 0.0) green
        hsv_to_rgb(2/3, 1.0, 1.0)    # (0.0, 0.0, 1.0) blue
    """
    degrees = h * 360.0
    sector = int(degrees / 60.0)
    f = degrees / 60.0 - sector

    p = v * (1.0 - s)
    q = v * (1.0 - s * f)
    t = v * (1.0 - s * (1.0 - f))

    sector = sector % 6

    if sector == 1:
        rgb = (q, v, p)
    elif sector == 2:
        rgb = (p, v, t)
    elif sector == 3:
        rgb = (p, q, v)
    elif sector == 4:
        rgb = (t, p, v)
    elif sector == 5:
        rgb = (v, p, q)
    else:
        rgb = (v, t, p)

    r, g, b = rgb
    return (clamp01(r), clamp01(g), clamp01(b))


def channel_to_byte(value: float) -> int:
    """
    Convert a normalized channel to the 0-255 escape sequence value

    Scales by 256 and saturates, so 1.0 maps to 255.
    """
    return max(0, min(255, int(value * 256.0)))


def luminance(r: float, g: float, b: float) -> float:
    """Perceptual luminance: 0.3*r + 0.59*g + 0.11*b"""
    return 0.3 * r + 0.59 * g + 0.11 * b
