# -*- coding: utf-8 -*-
"""
pixelkit Exception Hierarchy - Domain-specific exceptions for pixelkit operations.

Provides a small exception hierarchy that lets downstream consumers (image
editing exercises, batch scripts) catch pixelkit-specific errors distinctly
from Python built-in exceptions. All pixelkit exceptions subclass both
``PixelkitError`` and the appropriate built-in exception for backward
compatibility.

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


class PixelkitError(Exception):
    """Base exception for all pixelkit errors."""


class ValidationError(PixelkitError, ValueError):
    """Invalid input data, parameters, or configuration.

    Raised for kernel and structuring element shape errors, malformed
    pixel buffers, out-of-range histogram mapper output, and other input
    validation failures. Always raised before any pixel is written.
    """


class ProcessorError(PixelkitError, RuntimeError):
    """Algorithm or processing failure during apply().

    Raised when a transform encounters a non-recoverable error during
    execution, such as a mapping callback that returns something other
    than a ``ColorVector``.
    """


class DependencyError(PixelkitError, ImportError):
    """Missing optional dependency required for a specific module.

    Raised when a module requires an optional package (Pillow) that is
    not installed.
    """


class CodecError(PixelkitError, IOError):
    """Pixel buffer decode or encode failure.

    Raised by the ``pixelkit.IO`` readers and writers when the underlying
    image library cannot read or write a file. The original exception is
    chained as ``__cause__``.
    """
