# -*- coding: utf-8 -*-
"""
Filter Validation Helpers - Shared 3x3 kernel and structuring element checks.

All neighborhood operators in pixelkit work on a fixed 3x3 window. These
helpers reject any other shape, and non-finite weights, at the API
boundary so that no pixel loop starts on bad input.

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
from typing import Any

# Third-party
import numpy as np

# pixelkit internal
from pixelkit.exceptions import ValidationError


KERNEL_SHAPE = (3, 3)


def validate_kernel(kernel: Any, name: str = 'kernel') -> np.ndarray:
    """Validate a 3x3 real-valued convolution kernel.

    Parameters
    ----------
    kernel : array_like
        Weights indexed ``kernel[row][col]``.
    name : str
        Parameter name for error messages. Default ``'kernel'``.

    Returns
    -------
    np.ndarray
        The kernel as a float64 ``(3, 3)`` array.

    Raises
    ------
    ValidationError
        If the kernel is not numeric, not 3x3, or holds NaN/inf weights.
    """
    try:
        weights = np.asarray(kernel, dtype=np.float64)
    except (TypeError, ValueError) as exc:
        raise ValidationError(f"{name} must be a numeric 3x3 matrix") from exc
    if weights.shape != KERNEL_SHAPE:
        raise ValidationError(
            f"{name} must have shape {KERNEL_SHAPE}, got {weights.shape}"
        )
    if not np.all(np.isfinite(weights)):
        raise ValidationError(f"{name} weights must be finite")
    return weights


def validate_structuring_element(
    element: Any,
    name: str = 'structuring element',
) -> np.ndarray:
    """Validate a 3x3 boolean structuring element.

    Boolean arrays and integer arrays of 0/1 are accepted.

    Returns
    -------
    np.ndarray
        The element as a bool ``(3, 3)`` array.

    Raises
    ------
    ValidationError
        If the element is not 3x3 or holds values other than 0/1.
    """
    flags = np.asarray(element)
    if flags.shape != KERNEL_SHAPE:
        raise ValidationError(
            f"{name} must have shape {KERNEL_SHAPE}, got {flags.shape}"
        )
    if flags.dtype != np.bool_:
        if not np.issubdtype(flags.dtype, np.number) or not np.all(
            (flags == 0) | (flags == 1)
        ):
            raise ValidationError(f"{name} must contain only booleans or 0/1")
        flags = flags.astype(bool)
    return flags
