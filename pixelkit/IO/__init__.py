# -*- coding: utf-8 -*-
"""
IO Module - Read and write pixel buffers.

Pixel buffers are 2D ``(rows, cols)`` uint32 arrays of packed
``0xRRGGBB`` values. ``RasterReader`` and ``RasterWriter`` convert between
them and image files through Pillow; ``read_image`` and ``write_image``
are one-call conveniences.

Dependencies
------------
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

# Standard library
from pathlib import Path
from typing import Optional, Union

# Third-party
import numpy as np

# pixelkit internal
from pixelkit.IO.base import ImageReader, ImageWriter
from pixelkit.IO.raster import RasterReader, RasterWriter


def read_image(path: Union[str, Path]) -> np.ndarray:
    """Decode an image file into a packed RGB buffer.

    Raises
    ------
    FileNotFoundError
        If *path* does not exist.
    CodecError
        If the file cannot be decoded.

    Examples
    --------
    >>> from pixelkit.IO import read_image
    >>> image = read_image('photo.png')
    >>> image.shape
    (480, 640)
    """
    with RasterReader(path) as reader:
        return reader.read_full()


def write_image(data: np.ndarray, path: Union[str, Path],
                format: Optional[str] = None) -> None:
    """Encode a packed RGB buffer to *path*.

    Raises
    ------
    ValidationError
        If *data* is not a valid pixel buffer.
    CodecError
        If the format is unknown or writing fails.
    """
    with RasterWriter(path, format=format) as writer:
        writer.write(data)


__all__ = [
    'ImageReader',
    'ImageWriter',
    'RasterReader',
    'RasterWriter',
    'read_image',
    'write_image',
]
