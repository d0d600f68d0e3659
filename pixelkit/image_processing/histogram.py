# -*- coding: utf-8 -*-
"""
Histograms - Frequency counts, cumulative counts, and bar-chart rendering.

``histogram`` counts how often each value 0-255 of a scalar metric occurs
in an image. The metric is a *mapper*: a callable taking a packed RGB
integer and returning an integer in [0, 255]. The built-in extractors in
:mod:`pixelkit.color.conversions` (red/green/blue channel, hue,
saturation, value) are flagged with ``@vectorized_mapper`` and are applied
to the whole buffer in one call; any other callable is invoked once per
pixel.

``render_histogram`` draws a 256-bucket histogram as a fixed 512 x 600
bar chart, two pixel columns per bucket, scaled so the tallest bucket
fills the full height.

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
from typing import Any, Callable, Optional

# Third-party
import numpy as np

# pixelkit internal
from pixelkit.color.conversions import as_pixel_buffer, green_channel8
from pixelkit.exceptions import ValidationError
from pixelkit.image_processing.drawing import draw_vertical_line, new_canvas

HISTOGRAM_BINS = 256

CHART_WIDTH = 512
CHART_HEIGHT = 600
CHART_BACKGROUND = 0xFFFFFF
CHART_FOREGROUND = 0x000000


def _mapped_values(source: np.ndarray, mapper: Callable) -> np.ndarray:
    if getattr(mapper, '__vectorized__', False):
        values = np.asarray(mapper(source))
    else:
        values = np.array([mapper(int(p)) for p in source.flat])
    if not np.issubdtype(values.dtype, np.integer):
        raise ValidationError(
            f"Histogram mapper must return integers, got dtype {values.dtype}"
        )
    return values.ravel()


def histogram(image: np.ndarray,
              mapper: Optional[Callable[[int], int]] = None) -> np.ndarray:
    """Count the occurrences of each mapper value over all pixels.

    Parameters
    ----------
    image : np.ndarray
        Packed RGB buffer, shape ``(rows, cols)``.
    mapper : callable, optional
        ``packed_rgb -> int`` in [0, 255]. Default ``green_channel8``.

    Returns
    -------
    np.ndarray
        ``int64`` array of 256 counts summing to ``rows * cols``.

    Raises
    ------
    ValidationError
        If the mapper returns a non-integer or a value outside [0, 255].
        Out-of-range values are a bug in the mapper and are never clamped.

    Examples
    --------
    >>> from pixelkit.color import hue8
    >>> counts = histogram(image, hue8)
    >>> int(counts.sum()) == image.size
    True
    """
    source = as_pixel_buffer(image)
    if mapper is None:
        mapper = green_channel8
    if source.size == 0:
        return np.zeros(HISTOGRAM_BINS, dtype=np.int64)

    values = _mapped_values(source, mapper)
    low, high = values.min(), values.max()
    if low < 0 or high >= HISTOGRAM_BINS:
        bad = low if low < 0 else high
        raise ValidationError(
            f"Histogram mapper returned {int(bad)}, outside [0, "
            f"{HISTOGRAM_BINS - 1}]"
        )
    return np.bincount(values, minlength=HISTOGRAM_BINS).astype(np.int64)


def accumulate(hist: Any) -> np.ndarray:
    """Running prefix sum: ``out[0] = hist[0]``, ``out[i] = out[i-1] + hist[i]``."""
    counts = np.asarray(hist)
    if counts.ndim != 1:
        raise ValidationError(
            f"Histogram must be 1D, got shape {counts.shape}"
        )
    return np.cumsum(counts, dtype=np.int64)


def render_histogram(hist: Any) -> np.ndarray:
    """Render 256 counts as a 512 x 600 bar chart.

    Column ``c`` shows bucket ``c // 2`` as a bar from
    ``y = 600 - floor(count * 600 / max + 0.5)`` down to the bottom row.
    An all-zero histogram renders a flat chart instead of dividing by zero.

    Parameters
    ----------
    hist : array_like
        256 non-negative counts, e.g. from :func:`histogram` or
        :func:`accumulate`.

    Returns
    -------
    np.ndarray
        Packed RGB buffer, shape ``(600, 512)``, black bars on white.

    Raises
    ------
    ValidationError
        If *hist* is not 256 non-negative counts.
    """
    counts = np.asarray(hist)
    if counts.shape != (HISTOGRAM_BINS,):
        raise ValidationError(
            f"Histogram must have shape ({HISTOGRAM_BINS},), got {counts.shape}"
        )
    if counts.min() < 0:
        raise ValidationError("Histogram counts must be non-negative")

    peak = counts.max()
    scale = CHART_HEIGHT / peak if peak > 0 else 0.0

    canvas = new_canvas(CHART_WIDTH, CHART_HEIGHT, CHART_BACKGROUND)
    for column in range(CHART_WIDTH):
        bucket = counts[column // 2]
        top = CHART_HEIGHT - int(np.floor(bucket * scale + 0.5))
        draw_vertical_line(canvas, column, top, CHART_HEIGHT - 1,
                           CHART_FOREGROUND)
    return canvas
