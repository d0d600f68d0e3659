# -*- coding: utf-8 -*-
"""
Spatial Filters - 3x3 convolution and kernel presets.

``convolve`` applies a 3x3 weighted sum per pixel with mirrored borders;
``ConvolutionFilter`` wraps it as an ``ImageTransform``. Kernel presets
cover box and Gaussian blur, sharpening, edge detection, and embossing.

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

from pixelkit.image_processing.filters.convolution import ConvolutionFilter, convolve
from pixelkit.image_processing.filters.kernels import (
    BOX_BLUR,
    EDGE_DETECT,
    EMBOSS,
    GAUSSIAN_BLUR,
    IDENTITY,
    KERNEL_PRESETS,
    SHARPEN,
)

__all__ = [
    'ConvolutionFilter',
    'convolve',
    'BOX_BLUR',
    'EDGE_DETECT',
    'EMBOSS',
    'GAUSSIAN_BLUR',
    'IDENTITY',
    'KERNEL_PRESETS',
    'SHARPEN',
]
