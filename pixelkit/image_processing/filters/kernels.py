# -*- coding: utf-8 -*-
"""
Kernel Presets - Read-only 3x3 convolution weights.

Weights are indexed ``kernel[row][col]``: the row selects the vertical
offset ``row - 1`` and the column the horizontal offset ``col - 1``.
Brightness-preserving presets sum to 1; ``EDGE_DETECT`` sums to 0.

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

# Third-party
import numpy as np


def _frozen(rows) -> np.ndarray:
    kernel = np.array(rows, dtype=np.float64)
    kernel.setflags(write=False)
    return kernel


IDENTITY = _frozen([[0, 0, 0],
                    [0, 1, 0],
                    [0, 0, 0]])

BOX_BLUR = _frozen(np.full((3, 3), 1.0 / 9.0))

GAUSSIAN_BLUR = _frozen(np.array([[1, 2, 1],
                                  [2, 4, 2],
                                  [1, 2, 1]]) / 16.0)

SHARPEN = _frozen([[0, -1, 0],
                   [-1, 5, -1],
                   [0, -1, 0]])

EDGE_DETECT = _frozen([[-1, -1, -1],
                       [-1, 8, -1],
                       [-1, -1, -1]])

EMBOSS = _frozen([[-2, -1, 0],
                  [-1, 1, 1],
                  [0, 1, 2]])

KERNEL_PRESETS = {
    'identity': IDENTITY,
    'box_blur': BOX_BLUR,
    'gaussian_blur': GAUSSIAN_BLUR,
    'sharpen': SHARPEN,
    'edge_detect': EDGE_DETECT,
    'emboss': EMBOSS,
}
