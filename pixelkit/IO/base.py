# -*- coding: utf-8 -*-
"""
IO Base Classes - Abstract interfaces for pixel buffer readers and writers.

Readers decode an image file into a ``(rows, cols)`` buffer of packed
``0xRRGGBB`` values; writers encode such a buffer back to a file. Both are
context managers.

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

from abc import ABC, abstractmethod
from pathlib import Path
from typing import Any, Dict, Tuple, Union

import numpy as np


class ImageReader(ABC):
    """
    Abstract base class for pixel buffer readers.

    Attributes
    ----------
    filepath : Path
        Path to the image file.
    metadata : Dict[str, Any]
        Format-specific metadata gathered when the file is opened.
    """

    def __init__(self, filepath: Union[str, Path]) -> None:
        """
        Parameters
        ----------
        filepath : Union[str, Path]
            Path to the image file.

        Raises
        ------
        FileNotFoundError
            If *filepath* does not exist.
        """
        self.filepath = Path(filepath)
        if not self.filepath.exists():
            raise FileNotFoundError(f"File not found: {self.filepath}")

        self.metadata: Dict[str, Any] = {}
        self._load_metadata()

    @abstractmethod
    def _load_metadata(self) -> None:
        """Populate ``self.metadata`` (at least ``rows`` and ``cols``)."""

    @abstractmethod
    def read_full(self) -> np.ndarray:
        """
        Decode the whole image.

        Returns
        -------
        np.ndarray
            Packed RGB buffer, shape ``(rows, cols)``, dtype uint32.
        """

    def get_shape(self) -> Tuple[int, int]:
        """Image shape as ``(rows, cols)``."""
        return self.metadata['rows'], self.metadata['cols']

    def close(self) -> None:
        """Release resources. Default does nothing."""

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()
        return False


class ImageWriter(ABC):
    """
    Abstract base class for pixel buffer writers.

    Attributes
    ----------
    filepath : Path
        Output path.
    """

    def __init__(self, filepath: Union[str, Path]) -> None:
        self.filepath = Path(filepath)

    @abstractmethod
    def write(self, data: np.ndarray) -> None:
        """
        Encode a packed RGB buffer to ``self.filepath``.

        Raises
        ------
        ValidationError
            If *data* is not a valid pixel buffer.
        CodecError
            If encoding or writing fails.
        """

    def close(self) -> None:
        """Release resources. Default does nothing."""

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()
        return False
