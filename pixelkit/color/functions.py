# -*- coding: utf-8 -*-
"""
Pointwise Color Functions - Ready-made callbacks for the pixel mapper.

Unary RGB functions (``invert``, ``grayscale``), factories returning unary
functions (``brightness``, ``threshold``, ``hue_shift``), and binary RGB
functions (``blend``, ``difference``). All are written with elementwise
arithmetic so they work with scalar and array-valued ``ColorVector``
inputs alike, and can be passed to the mapper with ``vectorized=True``.

Examples
--------
>>> from pixelkit.color.functions import brightness, hue_shift
>>> from pixelkit.image_processing.mapping import map_unary, map_unary_hsv
>>> brighter = map_unary(image, brightness(1.2), vectorized=True)
>>> rotated = map_unary_hsv(image, hue_shift(0.5), vectorized=True)

License
-------
MIT License
Copyright (c) 2024 geoint.org
See LICENSE file for full text.

Created
-------
2026-10-18

Modified
--------
2026-10-18
"""

# Standard library
from typing import Callable

# Third-party
import numpy as np

# pixelkit internal
from pixelkit.color.vector import ColorVector, luminance

UnaryColorFunction = Callable[[ColorVector], ColorVector]
BinaryColorFunction = Callable[[ColorVector, ColorVector], ColorVector]

WHITE = ColorVector(1.0, 1.0, 1.0)
BLACK = ColorVector(0.0, 0.0, 0.0)


def invert(rgb: ColorVector) -> ColorVector:
    """Photographic negative, ``1 - c`` per channel."""
    return WHITE - rgb


def grayscale(rgb: ColorVector) -> ColorVector:
    """Replace every channel with the pixel's luminance."""
    luma = luminance(rgb)
    return ColorVector(luma, luma, luma)


def brightness(factor: float) -> UnaryColorFunction:
    """Scale every channel by *factor*; clamping happens on re-encoding."""
    def apply(rgb: ColorVector) -> ColorVector:
        return rgb * factor
    return apply


def threshold(level: float = 0.5) -> UnaryColorFunction:
    """Binarize on luminance: white at or above *level*, black below."""
    def apply(rgb: ColorVector) -> ColorVector:
        on = np.where(luminance(rgb) >= level, 1.0, 0.0)
        return ColorVector(on, on, on)
    return apply


def hue_shift(delta: float) -> UnaryColorFunction:
    """Rotate hue by *delta* turns. Operates on HSV vectors.

    The shifted hue is not wrapped here; HSV re-encoding wraps it.
    """
    def apply(hsv: ColorVector) -> ColorVector:
        return ColorVector(hsv.x + delta, hsv.y, hsv.z)
    return apply


def blend(alpha: float = 0.5) -> BinaryColorFunction:
    """Linear mix, ``(1 - alpha) * a + alpha * b``."""
    def apply(a: ColorVector, b: ColorVector) -> ColorVector:
        return a * (1.0 - alpha) + b * alpha
    return apply


def difference(a: ColorVector, b: ColorVector) -> ColorVector:
    """Absolute per-channel difference."""
    return ColorVector(np.abs(a.x - b.x), np.abs(a.y - b.y), np.abs(a.z - b.z))
