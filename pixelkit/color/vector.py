# -*- coding: utf-8 -*-
"""
Color Vector - Three-component real-valued color representation.

Provides ``ColorVector``, the value type every pixelkit transform uses to
hand a decoded pixel to a color function. A vector is interpreted as RGB
(red, green, blue) or HSV (hue, saturation, value) depending on the
conversion that produced it; no range is enforced while it is held, so
intermediate results may leave [0, 1] freely. Clamping happens only when
a vector is re-encoded to a packed integer color.

Components may be Python floats or numpy arrays of a common shape. With
array components every operation is elementwise, which lets a single call
to a color function process a whole image at once.

Dependencies
------------
numpy

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
from typing import Any, Iterator, Tuple, Union

# Third-party
import numpy as np

Component = Union[float, np.ndarray]

#: One 8-bit quantization step. Default tolerance for ``approx_equal``.
DEFAULT_EPSILON = 1.0 / 256.0


def _unwrap(value: Any) -> Component:
    """Return a Python float for 0-d values, the array otherwise."""
    if np.ndim(value) == 0:
        return float(value)
    return value


class ColorVector:
    """Three real components ``(x, y, z)`` representing one color.

    Parameters
    ----------
    x, y, z : float or np.ndarray
        Components. For RGB vectors these are red, green, blue; for HSV
        vectors hue, saturation, value.

    Examples
    --------
    >>> from pixelkit.color import ColorVector
    >>> a = ColorVector(0.2, 0.4, 0.6)
    >>> (a + a).z
    1.2
    >>> a.dot(ColorVector(1.0, 0.0, 0.0))
    0.2
    """

    __slots__ = ('x', 'y', 'z')

    # Defer to ColorVector operators when an ndarray is the left operand.
    __array_ufunc__ = None

    def __init__(self, x: Component, y: Component, z: Component) -> None:
        object.__setattr__(self, 'x', _unwrap(x))
        object.__setattr__(self, 'y', _unwrap(y))
        object.__setattr__(self, 'z', _unwrap(z))

    def __setattr__(self, name: str, value: Any) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable")

    @classmethod
    def from_array(cls, values: np.ndarray) -> 'ColorVector':
        """Build a vector from an array whose last axis has length 3."""
        values = np.asarray(values, dtype=np.float64)
        return cls(values[..., 0], values[..., 1], values[..., 2])

    # -----------------------------------------------------------------
    # Arithmetic
    # -----------------------------------------------------------------
    def add(self, other: 'ColorVector') -> 'ColorVector':
        """Componentwise sum."""
        return ColorVector(self.x + other.x, self.y + other.y, self.z + other.z)

    def subtract(self, other: 'ColorVector') -> 'ColorVector':
        """Componentwise difference."""
        return ColorVector(self.x - other.x, self.y - other.y, self.z - other.z)

    def scale(self, factor: Component) -> 'ColorVector':
        """Multiply every component by *factor*."""
        return ColorVector(self.x * factor, self.y * factor, self.z * factor)

    def dot(self, other: 'ColorVector') -> Component:
        """Dot product ``x*x' + y*y' + z*z'``."""
        return _unwrap(self.x * other.x + self.y * other.y + self.z * other.z)

    def __add__(self, other: 'ColorVector') -> 'ColorVector':
        if not isinstance(other, ColorVector):
            return NotImplemented
        return self.add(other)

    def __sub__(self, other: 'ColorVector') -> 'ColorVector':
        if not isinstance(other, ColorVector):
            return NotImplemented
        return self.subtract(other)

    def __mul__(self, factor: Component) -> 'ColorVector':
        if isinstance(factor, ColorVector):
            return NotImplemented
        return self.scale(factor)

    __rmul__ = __mul__

    # -----------------------------------------------------------------
    # Comparison helpers
    # -----------------------------------------------------------------
    def approx_equal(
        self,
        other: 'ColorVector',
        epsilon: float = DEFAULT_EPSILON,
    ) -> bool:
        """Whether every component is within *epsilon* of *other*'s."""
        return all(
            bool(np.all(approx_equal(a, b, epsilon)))
            for a, b in zip(self, other)
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ColorVector):
            return NotImplemented
        return all(bool(np.all(a == b)) for a, b in zip(self, other))

    __hash__ = None

    # -----------------------------------------------------------------
    # Conversion
    # -----------------------------------------------------------------
    def __iter__(self) -> Iterator[Component]:
        yield self.x
        yield self.y
        yield self.z

    def as_tuple(self) -> Tuple[Component, Component, Component]:
        return (self.x, self.y, self.z)

    def as_array(self) -> np.ndarray:
        """Stack the components along a new last axis."""
        return np.stack(np.broadcast_arrays(self.x, self.y, self.z), axis=-1)

    def __repr__(self) -> str:
        if np.ndim(self.x) == 0:
            return f"ColorVector({self.x!r}, {self.y!r}, {self.z!r})"
        return f"ColorVector(<array shape={np.shape(self.x)}>)"


def add(a: ColorVector, b: ColorVector) -> ColorVector:
    """Componentwise sum of two vectors."""
    return a.add(b)


def scale(v: ColorVector, factor: Component) -> ColorVector:
    """Multiply every component of *v* by *factor*."""
    return v.scale(factor)


def dot(a: ColorVector, b: ColorVector) -> Component:
    """Dot product of two vectors."""
    return a.dot(b)


def approx_equal(
    a: Component,
    b: Component,
    epsilon: float = DEFAULT_EPSILON,
) -> Union[bool, np.ndarray]:
    """Whether two reals differ by at most *epsilon*.

    Parameters
    ----------
    a, b : float or np.ndarray
        Values to compare.
    epsilon : float
        Inclusive tolerance. Default is one 8-bit quantization step.

    Returns
    -------
    bool or np.ndarray
        Elementwise result for array inputs.
    """
    result = np.abs(np.subtract(a, b)) <= epsilon
    if np.ndim(result) == 0:
        return bool(result)
    return result


#: Perceptual luma weights for red, green, blue.
LUMA_WEIGHTS = ColorVector(0.299, 0.587, 0.114)


def luminance(rgb: ColorVector) -> Component:
    """Perceptual brightness of an RGB vector, ``dot(rgb, LUMA_WEIGHTS)``."""
    return rgb.dot(LUMA_WEIGHTS)
