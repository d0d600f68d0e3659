# -*- coding: utf-8 -*-
"""
Pixel Mapper - Apply color functions to every pixel of one or two images.

Decodes each packed pixel to a ``ColorVector``, hands it to a caller
supplied color function, re-encodes the returned vector, and writes it to
a freshly allocated output buffer.

- ``map_unary``: one image, RGB vectors.
- ``map_unary_hsv``: one image, HSV vectors (the function sees hue,
  saturation, value rather than red, green, blue).
- ``map_binary``: two images, RGB vectors. The output covers only the
  overlapping top-left region; differently sized inputs are not an error.

By default the function is called once per pixel with float components.
With ``vectorized=True`` it is called once with array-valued components
covering the whole image; any function written with elementwise
arithmetic (including everything in :mod:`pixelkit.color.functions`)
produces identical output either way.

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
import logging
from typing import Annotated, Any, Callable

# Third-party
import numpy as np

# pixelkit internal
from pixelkit.color.conversions import (
    as_pixel_buffer,
    from_hsv,
    to_hsv,
    to_packed_rgb,
    to_vector,
)
from pixelkit.color.vector import ColorVector
from pixelkit.exceptions import ProcessorError
from pixelkit.image_processing.base import ImageTransform
from pixelkit.image_processing.params import Desc, Options
from pixelkit.image_processing.versioning import processor_tags, processor_version
from pixelkit.vocabulary import ColorSpace, ProcessorCategory

logger = logging.getLogger(__name__)


def _checked(result: Any, func: Callable) -> ColorVector:
    if not isinstance(result, ColorVector):
        name = getattr(func, '__qualname__', repr(func))
        raise ProcessorError(
            f"Color function {name} must return a ColorVector, "
            f"got {type(result).__name__}"
        )
    return result


def _encode_hsv(hsv: ColorVector):
    return to_packed_rgb(from_hsv(hsv))


def _encode_into(shape, packed) -> np.ndarray:
    # A function returning a constant vector yields a scalar; spread it.
    out = np.empty(shape, dtype=np.uint32)
    out[...] = packed
    return out


def _map_one(source, func, decode, encode, vectorized) -> np.ndarray:
    if vectorized:
        result = _checked(func(decode(source)), func)
        return _encode_into(source.shape, encode(result))

    out = np.empty_like(source)
    for (row, col), packed in np.ndenumerate(source):
        result = _checked(func(decode(int(packed))), func)
        out[row, col] = encode(result)
    return out


def map_unary(
    image: np.ndarray,
    func: Callable[[ColorVector], ColorVector],
    vectorized: bool = False,
) -> np.ndarray:
    """Apply an RGB color function to every pixel.

    Parameters
    ----------
    image : np.ndarray
        Packed RGB buffer, shape ``(rows, cols)``.
    func : callable
        ``ColorVector -> ColorVector`` in RGB space.
    vectorized : bool
        Call *func* once with array components instead of per pixel.

    Returns
    -------
    np.ndarray
        New packed RGB buffer of the same shape.

    Raises
    ------
    ProcessorError
        If *func* returns something other than a ``ColorVector``.
    """
    source = as_pixel_buffer(image)
    return _map_one(source, func, to_vector, to_packed_rgb, vectorized)


def map_unary_hsv(
    image: np.ndarray,
    func: Callable[[ColorVector], ColorVector],
    vectorized: bool = False,
) -> np.ndarray:
    """Apply an HSV color function to every pixel.

    Each pixel is decoded to ``(hue, saturation, value)``; the returned
    vector is re-encoded from HSV, clamping saturation and value and
    wrapping hue.
    """
    source = as_pixel_buffer(image)
    return _map_one(source, func, to_hsv, _encode_hsv, vectorized)


def map_binary(
    image_a: np.ndarray,
    image_b: np.ndarray,
    func: Callable[[ColorVector, ColorVector], ColorVector],
    vectorized: bool = False,
) -> np.ndarray:
    """Combine two images pixel by pixel with an RGB color function.

    The output shape is ``(min(rows_a, rows_b), min(cols_a, cols_b))``;
    only the overlapping top-left region of each input is read. A size
    mismatch is not an error.

    Parameters
    ----------
    image_a, image_b : np.ndarray
        Packed RGB buffers. Need not have the same shape.
    func : callable
        ``(ColorVector, ColorVector) -> ColorVector``; receives the pixels
        of *image_a* and *image_b* at the same position.
    vectorized : bool
        Call *func* once with array components instead of per pixel.

    Returns
    -------
    np.ndarray
        New packed RGB buffer covering the overlap.
    """
    a = as_pixel_buffer(image_a, 'image_a')
    b = as_pixel_buffer(image_b, 'image_b')
    rows = min(a.shape[0], b.shape[0])
    cols = min(a.shape[1], b.shape[1])
    if a.shape != b.shape:
        logger.debug("map_binary inputs %s and %s differ; using %dx%d overlap",
                     a.shape, b.shape, rows, cols)
    a = a[:rows, :cols]
    b = b[:rows, :cols]

    if vectorized:
        result = _checked(func(to_vector(a), to_vector(b)), func)
        return _encode_into((rows, cols), to_packed_rgb(result))

    out = np.empty((rows, cols), dtype=np.uint32)
    for (row, col), packed_a in np.ndenumerate(a):
        result = _checked(
            func(to_vector(int(packed_a)), to_vector(int(b[row, col]))), func
        )
        out[row, col] = to_packed_rgb(result)
    return out


@processor_version('1.0.0')
@processor_tags(
    category=ProcessorCategory.COLOR,
    color_spaces=[ColorSpace.RGB, ColorSpace.HSV],
    description='Apply a color function to every pixel',
)
class PointwiseTransform(ImageTransform):
    """Wrap a unary color function as an ``ImageTransform``.

    Parameters
    ----------
    func : callable
        ``ColorVector -> ColorVector``.
    color_space : str
        ``'rgb'`` (default) or ``'hsv'``; the space *func* operates in.
    vectorized : bool
        Call *func* once with array components. Default ``False``.

    Examples
    --------
    >>> from pixelkit.color.functions import hue_shift
    >>> rotate = PointwiseTransform(hue_shift(0.25), color_space='hsv')
    >>> rotated = rotate.apply(image)
    """

    color_space: Annotated[str, Options('rgb', 'hsv'),
                           Desc('Color space the function operates in')] = 'rgb'
    vectorized: Annotated[bool, Desc('Call the function once per image')] = False

    def __init__(
        self,
        func: Callable[[ColorVector], ColorVector],
        color_space: str = 'rgb',
        vectorized: bool = False,
    ) -> None:
        if not callable(func):
            raise TypeError(f"func must be callable, got {type(func).__name__}")
        self.func = func
        self.color_space = color_space
        self.vectorized = vectorized
        self._resolve_params({})

    def apply(self, source: np.ndarray, **kwargs: Any) -> np.ndarray:
        """Map the color function over *source*."""
        params = self._resolve_params(kwargs)
        if params['color_space'] == ColorSpace.HSV.value:
            return map_unary_hsv(source, self.func, params['vectorized'])
        return map_unary(source, self.func, params['vectorized'])
