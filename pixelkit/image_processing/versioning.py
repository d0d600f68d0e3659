# -*- coding: utf-8 -*-
"""
Processor Versioning - Version and capability tag decorators.

Provides the ``@processor_version`` class decorator for stamping semantic
version strings on image processor classes, and ``@processor_tags`` for
category and color-space metadata that lets callers discover processors
by capability.

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
import importlib.metadata
from typing import Optional, Sequence, Type, TypeVar

# pixelkit internal
from pixelkit.vocabulary import ColorSpace, ProcessorCategory

T = TypeVar('T')


def processor_version(version: Optional[str] = None):
    """Class decorator that stamps ``__processor_version__`` on a processor.

    Parameters
    ----------
    version : str, optional
        Semantic version string (e.g. ``'1.0.0'``). When omitted, the
        installed ``pixelkit`` distribution version is used, or
        ``'unknown'`` if the package is not installed.

    Examples
    --------
    >>> @processor_version('1.0.0')
    ... class Passthrough(ImageTransform):
    ...     def apply(self, source, **kwargs):
    ...         return source
    >>> Passthrough.__processor_version__
    '1.0.0'
    """
    def decorator(cls: Type[T]) -> Type[T]:
        if version:
            cls.__processor_version__ = version
        else:
            try:
                cls.__processor_version__ = importlib.metadata.version('pixelkit')
            except importlib.metadata.PackageNotFoundError:
                cls.__processor_version__ = 'unknown'
        return cls
    return decorator


def processor_tags(
    category: Optional[ProcessorCategory] = None,
    color_spaces: Optional[Sequence[ColorSpace]] = None,
    description: Optional[str] = None,
):
    """Class decorator for processor capability metadata.

    Stamps ``__processor_tags__`` on the class.

    Parameters
    ----------
    category : ProcessorCategory, optional
        Processing category.
    color_spaces : Sequence[ColorSpace], optional
        Color spaces the processor's color functions operate in.
    description : str, optional
        Short human-readable description.

    Raises
    ------
    TypeError
        If *category* or any element of *color_spaces* is not the
        matching enum member. Checked eagerly so typos fail at import.
    """
    if category is not None and not isinstance(category, ProcessorCategory):
        raise TypeError(
            f"category must be a ProcessorCategory member, got {category!r}"
        )
    for space in color_spaces or ():
        if not isinstance(space, ColorSpace):
            raise TypeError(
                f"color_spaces must be ColorSpace members, got {space!r}"
            )

    def decorator(cls: Type[T]) -> Type[T]:
        cls.__processor_tags__ = {
            'category': category,
            'color_spaces': tuple(color_spaces) if color_spaces else (),
            'description': description,
        }
        return cls
    return decorator
