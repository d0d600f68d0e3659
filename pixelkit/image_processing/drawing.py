# -*- coding: utf-8 -*-
"""
Raster Drawing - Minimal line primitives for chart rendering.

Only what histogram rendering needs: axis-aligned vertical segments drawn
in place into a caller-owned packed RGB buffer.

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


def new_canvas(width: int, height: int, color: int) -> np.ndarray:
    """Allocate a ``(height, width)`` packed RGB buffer filled with *color*."""
    return np.full((height, width), color, dtype=np.uint32)


def draw_vertical_line(buffer: np.ndarray, x: int, y0: int, y1: int,
                       color: int) -> None:
    """Draw rows ``min(y0, y1)`` through ``max(y0, y1)`` of column *x*.

    Endpoints are inclusive. The segment is clipped to the buffer; a
    column outside the buffer draws nothing. Modifies *buffer* in place.
    """
    rows, cols = buffer.shape
    if not 0 <= x < cols:
        return
    top = max(min(y0, y1), 0)
    bottom = min(max(y0, y1), rows - 1)
    if top <= bottom:
        buffer[top:bottom + 1, x] = color
