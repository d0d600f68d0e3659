# -*- coding: utf-8 -*-
"""
Vocabulary - Canonical enums for pixelkit.

Defines the single source of truth for controlled vocabularies used across
pixelkit: color spaces, processor categories, and morphological operation
names. Processors and helpers import from this module so that tag values
are guaranteed consistent and typo-free.

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

from enum import Enum


class ColorSpace(Enum):
    """Color spaces a ``ColorVector`` can be interpreted in.

    RGB vectors hold red, green, blue in [0, 1]. HSV vectors hold hue,
    saturation, value in [0, 1].
    """

    RGB = "rgb"
    HSV = "hsv"


class ProcessorCategory(Enum):
    """Processing categories for processor tagging.

    ``FILTERS`` covers 3x3 convolution, ``MORPHOLOGY`` the
    luminance-ordered erosion family, and ``COLOR`` pointwise color
    mapping.
    """

    FILTERS = "filters"
    MORPHOLOGY = "morphology"
    COLOR = "color"


class MorphologyOperation(Enum):
    """Luminance-ordered morphological operations.

    ``ERODE`` and ``DILATE`` are the single-step primitives; ``OPEN`` and
    ``CLOSE`` compose them; ``GRADIENT`` is the per-channel difference
    between dilation and erosion.
    """

    ERODE = "erode"
    DILATE = "dilate"
    OPEN = "open"
    CLOSE = "close"
    GRADIENT = "gradient"
