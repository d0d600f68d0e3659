# -*- coding: utf-8 -*-
"""
pixelkit - Pixel-processing toolkit.

Color-space conversions and image-transform primitives over rectangular
buffers of packed 24-bit RGB pixels: pointwise color mapping, 3x3
convolution with mirrored borders, luminance-ordered morphology, and
histogram extraction and rendering. Intended as the library underneath
higher-level image-editing exercises.

Dependencies
------------
numpy
scipy
Pillow

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

__version__ = "0.1.0"

from pixelkit.exceptions import (
    PixelkitError,
    ValidationError,
    ProcessorError,
    DependencyError,
    CodecError,
)
from pixelkit.vocabulary import (
    ColorSpace,
    ProcessorCategory,
    MorphologyOperation,
)

__all__ = [
    'PixelkitError',
    'ValidationError',
    'ProcessorError',
    'DependencyError',
    'CodecError',
    'ColorSpace',
    'ProcessorCategory',
    'MorphologyOperation',
]
