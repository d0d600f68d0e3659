# -*- coding: utf-8 -*-
"""
3x3 Convolution - Weighted neighborhood sum with mirrored borders.

For every pixel ``(x, y)`` the output color is the weighted sum of the RGB
vectors of its nine neighbors at offsets ``(col - 1, row - 1)``, using
``kernel[row][col]`` as the weight, re-encoded with per-channel clamping.
The kernel is applied as written (correlation, no flip).

Border handling
---------------
Out-of-bounds neighbor indices are mirrored across the pixel *next to*
the edge, not the edge itself: index ``-1`` reads index ``1`` and index
``limit`` reads ``limit - 2``. This is ``scipy.ndimage``'s ``'mirror'``
mode (``d c b | a b c d | c b a``). A single-row or single-column image
has no second pixel, so the edge pixel itself is read.

Dependencies
------------
scipy

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
from typing import Annotated, Any, Optional

# Third-party
import numpy as np
from scipy.ndimage import correlate

# pixelkit internal
from pixelkit.color.conversions import as_pixel_buffer, to_packed_rgb, unpack_rgb
from pixelkit.color.vector import ColorVector
from pixelkit.image_processing.base import ImageTransform
from pixelkit.image_processing.filters._validation import validate_kernel
from pixelkit.image_processing.filters.kernels import KERNEL_PRESETS
from pixelkit.image_processing.params import Desc, Options
from pixelkit.image_processing.versioning import processor_tags, processor_version
from pixelkit.vocabulary import ProcessorCategory

BORDER_MODE = 'mirror'


def convolve(image: np.ndarray, kernel: Any) -> np.ndarray:
    """Convolve a packed RGB image with a 3x3 kernel.

    Parameters
    ----------
    image : np.ndarray
        Packed RGB buffer, shape ``(rows, cols)``.
    kernel : array_like
        3x3 real weights, ``kernel[row][col]``. Not normalized.

    Returns
    -------
    np.ndarray
        New packed RGB buffer of the same shape.

    Raises
    ------
    ValidationError
        If the kernel is not a finite 3x3 matrix or the image is not a
        valid pixel buffer. Raised before any pixel is processed.

    Examples
    --------
    >>> from pixelkit.image_processing.filters import convolve, SHARPEN
    >>> sharpened = convolve(image, SHARPEN)
    """
    weights = validate_kernel(kernel)
    source = as_pixel_buffer(image)
    if source.size == 0:
        return source.copy()

    channels = unpack_rgb(source) / 255.0
    summed = np.empty_like(channels)
    for band in range(3):
        summed[..., band] = correlate(
            channels[..., band], weights, mode=BORDER_MODE
        )
    return np.asarray(to_packed_rgb(ColorVector.from_array(summed)),
                      dtype=np.uint32)


@processor_version('1.0.0')
@processor_tags(
    category=ProcessorCategory.FILTERS,
    description='3x3 convolution with mirrored borders',
)
class ConvolutionFilter(ImageTransform):
    """3x3 convolution as an ``ImageTransform``.

    Parameters
    ----------
    kernel : array_like, optional
        Explicit 3x3 weights. Takes precedence over *preset*.
    preset : str
        Name of a preset from ``KERNEL_PRESETS``. Default ``'box_blur'``.

    Examples
    --------
    >>> blur = ConvolutionFilter(preset='gaussian_blur')
    >>> smoothed = blur.apply(image)
    >>> edges = blur.apply(image, preset='edge_detect')
    """

    preset: Annotated[str, Options(*KERNEL_PRESETS),
                      Desc('Named 3x3 kernel')] = 'box_blur'

    def __init__(self, kernel: Optional[Any] = None,
                 preset: str = 'box_blur') -> None:
        self.kernel = None if kernel is None else validate_kernel(kernel)
        self.preset = preset
        self._resolve_params({})

    def apply(self, source: np.ndarray, **kwargs: Any) -> np.ndarray:
        """Convolve *source*. A ``preset`` kwarg overrides an explicit kernel."""
        params = self._resolve_params(kwargs)
        if self.kernel is not None and 'preset' not in kwargs:
            weights = self.kernel
        else:
            weights = KERNEL_PRESETS[params['preset']]
        result = convolve(source, weights)
        self._report_progress(kwargs, 1.0)
        return result
