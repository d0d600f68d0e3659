# -*- coding: utf-8 -*-
"""
Image Processing Module - Pixel transforms, morphology, and histograms.

Every transform reads a 2D ``(rows, cols)`` buffer of packed ``0xRRGGBB``
values and returns a newly allocated buffer; inputs are never modified.

Sub-modules
-----------
mapping.py
    Pixel mapper -- ``map_unary``, ``map_unary_hsv``, ``map_binary`` and
    the ``PointwiseTransform`` wrapper.
filters/
    3x3 convolution with mirrored borders, ``ConvolutionFilter``, and
    kernel presets.
morphology.py
    Luminance-ordered ``erode``, ``dilate``, ``opening``, ``closing``,
    ``morphological_gradient``, ``MorphologicalFilter``, and structuring
    element presets.
histogram.py
    ``histogram``, ``accumulate``, ``render_histogram``.
drawing.py
    Vertical line rasterizer used by histogram rendering.
pipeline.py
    Sequential composition of ``ImageTransform`` steps.
base.py, params.py, versioning.py
    ``ImageProcessor`` / ``ImageTransform`` base classes, ``Range``,
    ``Options``, ``Desc`` tunable parameter markers, and the
    ``@processor_version`` / ``@processor_tags`` decorators.

Usage
-----
Blur, open, and chart the value channel of an image:

    >>> from pixelkit.IO import read_image
    >>> from pixelkit.color import value8
    >>> from pixelkit.image_processing import (
    ...     ConvolutionFilter, MorphologicalFilter, Pipeline,
    ...     histogram, render_histogram,
    ... )
    >>> image = read_image('photo.png')
    >>> pipe = Pipeline([
    ...     ConvolutionFilter(preset='gaussian_blur'),
    ...     MorphologicalFilter(operation='open'),
    ... ])
    >>> chart = render_histogram(histogram(pipe.apply(image), value8))

Dependencies
------------
numpy
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

from pixelkit.image_processing.base import ImageProcessor, ImageTransform
from pixelkit.image_processing.mapping import (
    PointwiseTransform,
    map_binary,
    map_unary,
    map_unary_hsv,
)
from pixelkit.image_processing.filters import (
    ConvolutionFilter,
    KERNEL_PRESETS,
    convolve,
)
from pixelkit.image_processing.morphology import (
    CROSS,
    DIAGONAL,
    HORIZONTAL,
    SQUARE,
    STRUCTURING_ELEMENTS,
    VERTICAL,
    MorphologicalFilter,
    closing,
    dilate,
    erode,
    morphological_gradient,
    opening,
)
from pixelkit.image_processing.histogram import (
    accumulate,
    histogram,
    render_histogram,
)
from pixelkit.image_processing.pipeline import Pipeline
from pixelkit.image_processing.versioning import processor_version, processor_tags
from pixelkit.image_processing.params import Desc, Options, ParamSpec, Range

__all__ = [
    'ImageProcessor',
    'ImageTransform',
    'PointwiseTransform',
    'map_binary',
    'map_unary',
    'map_unary_hsv',
    'ConvolutionFilter',
    'KERNEL_PRESETS',
    'convolve',
    'CROSS',
    'DIAGONAL',
    'HORIZONTAL',
    'SQUARE',
    'STRUCTURING_ELEMENTS',
    'VERTICAL',
    'MorphologicalFilter',
    'closing',
    'dilate',
    'erode',
    'morphological_gradient',
    'opening',
    'accumulate',
    'histogram',
    'render_histogram',
    'Pipeline',
    'processor_version',
    'processor_tags',
    'Desc',
    'Options',
    'ParamSpec',
    'Range',
]
