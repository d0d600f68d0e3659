# -*- coding: utf-8 -*-
"""
Color Module - Color vectors and RGB/HSV conversions.

Provides the ``ColorVector`` value type, conversions between packed
24-bit RGB, RGB vectors and HSV vectors, 8-bit channel and metric
extractors used as histogram mappers, and ready-made pointwise color
functions.

Sub-modules
-----------
vector.py
    ``ColorVector``, ``add``, ``scale``, ``dot``, ``approx_equal``,
    ``LUMA_WEIGHTS``, ``luminance``.
conversions.py
    ``to_vector``, ``to_packed_rgb``, ``to_hsv``, ``from_hsv``, the
    ``*_channel8`` / ``hue8`` / ``saturation8`` / ``value8`` extractors,
    and pixel buffer packing helpers.
functions.py
    ``invert``, ``grayscale``, ``brightness``, ``threshold``,
    ``hue_shift``, ``blend``, ``difference``.

Dependencies
------------
numpy

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

from pixelkit.color.vector import (
    ColorVector,
    DEFAULT_EPSILON,
    LUMA_WEIGHTS,
    add,
    approx_equal,
    dot,
    luminance,
    scale,
)
from pixelkit.color.conversions import (
    as_pixel_buffer,
    blue_channel8,
    from_hsv,
    green_channel8,
    hue8,
    pack_channels,
    pack_rgb,
    red_channel8,
    saturation8,
    to_hsv,
    to_packed_rgb,
    to_vector,
    unpack_rgb,
    value8,
    vectorized_mapper,
)

__all__ = [
    'ColorVector',
    'DEFAULT_EPSILON',
    'LUMA_WEIGHTS',
    'add',
    'approx_equal',
    'dot',
    'luminance',
    'scale',
    'as_pixel_buffer',
    'blue_channel8',
    'from_hsv',
    'green_channel8',
    'hue8',
    'pack_channels',
    'pack_rgb',
    'red_channel8',
    'saturation8',
    'to_hsv',
    'to_packed_rgb',
    'to_vector',
    'unpack_rgb',
    'value8',
    'vectorized_mapper',
]
