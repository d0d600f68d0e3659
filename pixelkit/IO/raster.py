# -*- coding: utf-8 -*-
"""
Raster Codec - Pillow-backed pixel buffer reader and writer.

Decodes any raster format Pillow understands (PNG, BMP, TIFF, JPEG, GIF,
...) into a packed RGB buffer and encodes buffers back out, choosing the
format from the file extension. Alpha and palette information are
discarded on read; 8-bit channels round-trip losslessly through lossless
formats.

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
import logging
from pathlib import Path
from typing import Optional, Union

# Third-party
import numpy as np

try:
    from PIL import Image
    _HAS_PIL = True
except ImportError:
    _HAS_PIL = False

# pixelkit internal
from pixelkit.color.conversions import pack_rgb, unpack_rgb
from pixelkit.exceptions import CodecError, DependencyError
from pixelkit.IO.base import ImageReader, ImageWriter

logger = logging.getLogger(__name__)


def _require_pil() -> None:
    if not _HAS_PIL:
        raise DependencyError(
            "Pillow is required for image file IO. "
            "Install with: pip install Pillow"
        )


class RasterReader(ImageReader):
    """Read a raster image file as a packed RGB buffer.

    Parameters
    ----------
    filepath : str or Path
        Image file to read.

    Raises
    ------
    DependencyError
        If Pillow is not installed.
    FileNotFoundError
        If *filepath* does not exist.
    CodecError
        If the file cannot be identified or decoded.

    Examples
    --------
    >>> from pixelkit.IO import RasterReader
    >>> with RasterReader('photo.png') as reader:
    ...     rows, cols = reader.get_shape()
    ...     image = reader.read_full()
    """

    def __init__(self, filepath: Union[str, Path]) -> None:
        _require_pil()
        super().__init__(filepath)

    def _load_metadata(self) -> None:
        try:
            with Image.open(self.filepath) as img:
                self.metadata = {
                    'rows': img.height,
                    'cols': img.width,
                    'format': img.format,
                    'mode': img.mode,
                }
        except OSError as exc:
            raise CodecError(f"Cannot identify image file {self.filepath}") from exc

    def read_full(self) -> np.ndarray:
        try:
            with Image.open(self.filepath) as img:
                channels = np.asarray(img.convert('RGB'))
        except OSError as exc:
            raise CodecError(f"Cannot decode {self.filepath}") from exc
        logger.debug("Read %s (%d x %d, %s)", self.filepath.name,
                     channels.shape[1], channels.shape[0],
                     self.metadata.get('mode'))
        return pack_rgb(channels)


class RasterWriter(ImageWriter):
    """Write a packed RGB buffer to a raster image file.

    Parameters
    ----------
    filepath : str or Path
        Output path. The format is taken from the extension unless
        *format* is given.
    format : str, optional
        Pillow format name (e.g. ``'PNG'``, ``'BMP'``).

    Raises
    ------
    DependencyError
        If Pillow is not installed.
    """

    def __init__(self, filepath: Union[str, Path],
                 format: Optional[str] = None) -> None:
        _require_pil()
        super().__init__(filepath)
        self.format = format

    def write(self, data: np.ndarray) -> None:
        channels = unpack_rgb(data)
        try:
            Image.fromarray(channels).save(str(self.filepath), format=self.format)
        except (OSError, ValueError, KeyError) as exc:
            raise CodecError(f"Cannot encode {self.filepath}") from exc
        logger.debug("Wrote %s (%d x %d)", self.filepath.name,
                     channels.shape[1], channels.shape[0])
