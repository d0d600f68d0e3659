# -*- coding: utf-8 -*-
"""
Color Space Conversions - Packed RGB, RGB vectors, and HSV vectors.

Converts between packed 24-bit ``0xRRGGBB`` integers, RGB ``ColorVector``
values with channels in [0, 1], and HSV ``ColorVector`` values with hue,
saturation, and value in [0, 1]. Also provides the 8-bit scalar extractors
used as histogram mappers and the helpers that validate, pack, and unpack
whole pixel buffers.

Every conversion accepts either a single packed integer or a numpy array
of packed integers and returns a matching scalar or array result.

Quantization
------------
Re-encoding clamps each component to [0, 1] and maps it to an 8-bit
channel with ``floor(v * 255 + 0.5)`` (round half up). For any 8-bit
input, ``to_packed_rgb(to_vector(v)) == v`` exactly.

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

# Standard library
from typing import Any, Callable, Tuple, Union

# Third-party
import numpy as np

# pixelkit internal
from pixelkit.color.vector import ColorVector
from pixelkit.exceptions import ValidationError

Packed = Union[int, np.ndarray]

MAX_PACKED = 0xFFFFFF


def _as_result(value: np.ndarray) -> Packed:
    if np.ndim(value) == 0:
        return int(value)
    return value


def _split(rgb: Packed) -> Tuple[np.ndarray, np.ndarray, np.ndarray]:
    packed = np.asarray(rgb, dtype=np.uint32)
    return (packed >> 16) & 0xFF, (packed >> 8) & 0xFF, packed & 0xFF


def quantize(component: Any) -> np.ndarray:
    """Clamp to [0, 1] and round half up to an 8-bit channel value.

    NaN components quantize to 0.
    """
    v = np.nan_to_num(np.asarray(component, dtype=np.float64), nan=0.0)
    return np.floor(np.clip(v, 0.0, 1.0) * 255.0 + 0.5).astype(np.uint32)


def pack_channels(red: Any, green: Any, blue: Any) -> Packed:
    """Pack 8-bit channel values into ``0xRRGGBB``.

    Channels are masked to 8 bits; no clamping is applied.
    """
    r = np.asarray(red, dtype=np.uint32) & 0xFF
    g = np.asarray(green, dtype=np.uint32) & 0xFF
    b = np.asarray(blue, dtype=np.uint32) & 0xFF
    return _as_result((r << 16) | (g << 8) | b)


# ---------------------------------------------------------------------
# Packed RGB <-> RGB vector
# ---------------------------------------------------------------------

def to_vector(rgb: Packed) -> ColorVector:
    """Decode packed RGB into an RGB ``ColorVector`` with channels in [0, 1]."""
    r, g, b = _split(rgb)
    return ColorVector(r / 255.0, g / 255.0, b / 255.0)


def to_packed_rgb(vec: ColorVector) -> Packed:
    """Encode an RGB ``ColorVector`` as packed RGB, clamping each channel."""
    return pack_channels(quantize(vec.x), quantize(vec.y), quantize(vec.z))


# ---------------------------------------------------------------------
# RGB vector <-> HSV vector
# ---------------------------------------------------------------------

def rgb_vector_to_hsv(rgb: ColorVector) -> ColorVector:
    """Convert an RGB vector to HSV with hue in [0, 1).

    Achromatic colors (all channels equal) have hue 0; black has
    saturation 0.
    """
    r = np.asarray(rgb.x, dtype=np.float64)
    g = np.asarray(rgb.y, dtype=np.float64)
    b = np.asarray(rgb.z, dtype=np.float64)

    cmax = np.maximum(np.maximum(r, g), b)
    cmin = np.minimum(np.minimum(r, g), b)
    delta = cmax - cmin

    with np.errstate(divide='ignore', invalid='ignore'):
        saturation = np.where(cmax > 0.0, delta / cmax, 0.0)
        hue = np.select(
            [delta == 0.0, cmax == r, cmax == g],
            [0.0, (g - b) / delta, 2.0 + (b - r) / delta],
            default=4.0 + (r - g) / delta,
        ) / 6.0
    hue = np.where(hue < 0.0, hue + 1.0, hue)
    return ColorVector(hue, saturation, cmax)


def hsv_vector_to_rgb(hsv: ColorVector) -> ColorVector:
    """Convert an HSV vector to RGB.

    Saturation and value are clamped to [0, 1]. Hue is not clamped; the
    sector computation uses ``hue - floor(hue)`` so values outside [0, 1)
    wrap around the color wheel.
    """
    h = np.asarray(hsv.x, dtype=np.float64)
    s = np.clip(np.asarray(hsv.y, dtype=np.float64), 0.0, 1.0)
    v = np.clip(np.asarray(hsv.z, dtype=np.float64), 0.0, 1.0)

    h6 = (h - np.floor(h)) * 6.0
    sector = np.floor(h6)
    f = h6 - sector
    sector = sector.astype(np.int64) % 6

    p = v * (1.0 - s)
    q = v * (1.0 - s * f)
    t = v * (1.0 - s * (1.0 - f))

    conditions = [sector == i for i in range(6)]
    r = np.select(conditions, [v, q, p, p, t, v])
    g = np.select(conditions, [t, v, v, q, p, p])
    b = np.select(conditions, [p, p, t, v, v, q])
    return ColorVector(r, g, b)


def to_hsv(rgb: Packed) -> ColorVector:
    """Decode packed RGB into an HSV ``ColorVector``."""
    return rgb_vector_to_hsv(to_vector(rgb))


def from_hsv(hsv: ColorVector) -> ColorVector:
    """Convert an HSV ``ColorVector`` back to an RGB ``ColorVector``.

    Re-encode the result with :func:`to_packed_rgb`.
    """
    return hsv_vector_to_rgb(hsv)


# ---------------------------------------------------------------------
# 8-bit scalar extractors
# ---------------------------------------------------------------------

def vectorized_mapper(func: Callable) -> Callable:
    """Mark a scalar mapper as accepting whole arrays of packed values.

    Histogram computation applies marked mappers to the full pixel buffer
    in one call instead of once per pixel.
    """
    func.__vectorized__ = True
    return func


@vectorized_mapper
def red_channel8(rgb: Packed) -> Packed:
    """Red channel, 0-255."""
    return _as_result(_split(rgb)[0])


@vectorized_mapper
def green_channel8(rgb: Packed) -> Packed:
    """Green channel, 0-255."""
    return _as_result(_split(rgb)[1])


@vectorized_mapper
def blue_channel8(rgb: Packed) -> Packed:
    """Blue channel, 0-255."""
    return _as_result(_split(rgb)[2])


@vectorized_mapper
def hue8(rgb: Packed) -> Packed:
    """HSV hue quantized to 0-255, wrapped modulo 1 first."""
    h = np.asarray(to_hsv(rgb).x, dtype=np.float64)
    return _as_result(quantize(h - np.floor(h)))


@vectorized_mapper
def saturation8(rgb: Packed) -> Packed:
    """HSV saturation quantized to 0-255."""
    return _as_result(quantize(to_hsv(rgb).y))


@vectorized_mapper
def value8(rgb: Packed) -> Packed:
    """HSV value quantized to 0-255."""
    return _as_result(quantize(to_hsv(rgb).z))


# ---------------------------------------------------------------------
# Pixel buffers
# ---------------------------------------------------------------------

def as_pixel_buffer(image: Any, name: str = 'image') -> np.ndarray:
    """Validate a packed pixel buffer and return it as ``uint32``.

    Parameters
    ----------
    image : array_like
        2D ``(rows, cols)`` array of packed ``0xRRGGBB`` integers.
    name : str
        Argument name for error messages.

    Returns
    -------
    np.ndarray
        The buffer as ``uint32``. No copy is made when the input already
        has that dtype.

    Raises
    ------
    ValidationError
        If the input is not 2D, not integer-typed, or holds values outside
        ``[0, 0xFFFFFF]``.
    """
    arr = np.asarray(image)
    if arr.ndim != 2:
        raise ValidationError(
            f"{name} must be a 2D (rows, cols) pixel buffer, "
            f"got shape {arr.shape}"
        )
    if arr.size == 0:
        return arr.astype(np.uint32, copy=False)
    if not np.issubdtype(arr.dtype, np.integer):
        raise ValidationError(
            f"{name} must hold packed integer colors, got dtype {arr.dtype}"
        )
    if arr.min() < 0 or arr.max() > MAX_PACKED:
        raise ValidationError(
            f"{name} values must lie in [0, 0x{MAX_PACKED:06X}]"
        )
    return arr.astype(np.uint32, copy=False)


def pack_rgb(channels: np.ndarray) -> np.ndarray:
    """Pack a ``(rows, cols, 3)`` uint8 array into a packed pixel buffer."""
    channels = np.asarray(channels)
    if channels.ndim != 3 or channels.shape[2] != 3:
        raise ValidationError(
            f"Expected (rows, cols, 3) channel array, got shape {channels.shape}"
        )
    return np.asarray(
        pack_channels(channels[..., 0], channels[..., 1], channels[..., 2]),
        dtype=np.uint32,
    )


def unpack_rgb(image: np.ndarray) -> np.ndarray:
    """Unpack a pixel buffer into a ``(rows, cols, 3)`` uint8 array."""
    r, g, b = _split(as_pixel_buffer(image))
    return np.stack([r, g, b], axis=-1).astype(np.uint8)
