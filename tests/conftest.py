# -*- coding: utf-8 -*-
"""
Shared pytest fixtures for pixelkit tests.

Synthetic packed RGB buffers: random color noise, a flat color, a
grayscale ramp, a binary black/white pattern, and a 3x3 image whose
luminance ordering is known by construction.

License
-------
MIT License
Copyright (c) 2024 geoint.org
See LICENSE file for full text.

Created
-------
2026-10-18
"""

import numpy as np
import pytest


@pytest.fixture
def rng():
    return np.random.default_rng(1234)


@pytest.fixture
def random_image(rng):
    """12 rows x 17 cols of random packed colors."""
    return rng.integers(0, 0x1000000, size=(12, 17), dtype=np.uint32)


@pytest.fixture
def flat_image():
    return np.full((9, 11), 0x3C78B4, dtype=np.uint32)


@pytest.fixture
def gray_image(rng):
    """Random grayscale pixels (R == G == B)."""
    levels = rng.integers(0, 256, size=(10, 13), dtype=np.uint32)
    return (levels << 16) | (levels << 8) | levels


@pytest.fixture
def binary_image(rng):
    """Black background with white blocks, lines, and isolated specks."""
    mask = np.zeros((24, 24), dtype=bool)
    mask[2:9, 3:12] = True
    mask[14:20, 14:22] = True
    mask[11, :] = True
    mask[5, 18] = True
    mask[20, 4] = True
    mask |= rng.random((24, 24)) < 0.08
    return np.where(mask, 0xFFFFFF, 0x000000).astype(np.uint32)


# Luminance of each pixel, for reference:
#   0x808080 .502   0xFF0000 .299   0x00FF00 .587
#   0x0000FF .114   0xFFFFFF 1.00   0x202020 .125
#   0xFFFF00 .886   0x00FFFF .701   0x400000 .075
@pytest.fixture
def ordered_image():
    return np.array([
        [0x808080, 0xFF0000, 0x00FF00],
        [0x0000FF, 0xFFFFFF, 0x202020],
        [0xFFFF00, 0x00FFFF, 0x400000],
    ], dtype=np.uint32)
