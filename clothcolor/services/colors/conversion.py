"""RGB to HSV conversion for palette classification."""

import math
from typing import Tuple

from clothcolor.schemas import HSV, RGB


def rgb_to_hsv(r: float, g: float, b: float) -> Tuple[float, float, float]:
    """
    Convert an RGB color to HSV.

    Args:
        r, g, b: Channels in [0, 255]; floats are accepted for cluster centroids.

    Returns:
        (h, s, v) with hue in [0, 360) degrees and saturation/value in [0, 100].
        Hue is 0 for achromatic colors.
    """
    r /= 255.0
    g /= 255.0
    b /= 255.0

    max_c = max(r, g, b)
    min_c = min(r, g, b)
    diff = max_c - min_c

    h = 0.0
    s = 0.0 if max_c == 0 else diff / max_c
    v = max_c

    if diff != 0:
        # First channel equal to max wins: r, then g, then b
        if max_c == r:
            h = 60.0 * math.fmod((g - b) / diff, 6.0)
        elif max_c == g:
            h = 60.0 * ((b - r) / diff + 2.0)
        else:
            h = 60.0 * ((r - g) / diff + 4.0)

    if h < 0:
        h += 360.0
    if h >= 360.0:
        h -= 360.0

    return h, s * 100.0, v * 100.0


def hsv_from_rgb(rgb: RGB) -> HSV:
    """Schema-typed wrapper around rgb_to_hsv."""
    h, s, v = rgb_to_hsv(rgb.r, rgb.g, rgb.b)
    return HSV(h=h, s=s, v=v)
