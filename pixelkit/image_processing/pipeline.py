# -*- coding: utf-8 -*-
"""
Pipeline - Composable sequence of pixel buffer transforms.

Chains ``ImageTransform`` instances so that the output buffer of each step
feeds the next, e.g. a blur followed by a morphological opening followed
by a hue rotation.

The source buffer is validated once on entry. Every intermediate buffer is
checked against the packed RGB contract (2D, integer, values within
``0xFFFFFF``) as it leaves its step, so a misbehaving transform is reported
by position and name instead of failing somewhere further down the chain.
Progress reporting is rescaled so that step ``i`` of ``n`` covers the
interval ``[i / n, (i + 1) / n]``.

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
from typing import Any, Callable, Iterator, Optional, Sequence, Tuple

# Third-party
import numpy as np

# pixelkit internal
from pixelkit.color.conversions import as_pixel_buffer
from pixelkit.exceptions import ProcessorError, ValidationError
from pixelkit.image_processing.base import ImageTransform
from pixelkit.image_processing.versioning import processor_version

logger = logging.getLogger(__name__)

ProgressCallback = Callable[[float], None]


def _step_name(index: int, step: ImageTransform) -> str:
    return f"step {index} ({type(step).__name__})"


def _scaled_callback(
    outer: Optional[ProgressCallback],
    index: int,
    count: int,
) -> Optional[ProgressCallback]:
    """Map a step's own [0, 1] progress onto its slice of the whole chain."""
    if outer is None:
        return None
    low = index / count
    width = 1.0 / count

    def report(fraction: float) -> None:
        outer(low + min(max(fraction, 0.0), 1.0) * width)
    return report


@processor_version('1.0.0')
class Pipeline(ImageTransform):
    """Sequential chain of pixel buffer transforms.

    The pipeline is itself an ``ImageTransform`` and can be nested.

    Parameters
    ----------
    steps : Sequence[ImageTransform]
        Ordered transforms. Must contain at least one.

    Raises
    ------
    ValidationError
        If *steps* is empty or holds anything other than ``ImageTransform``
        instances (plain color functions must be wrapped in
        ``PointwiseTransform`` first).

    Examples
    --------
    >>> from pixelkit.color.functions import hue_shift
    >>> from pixelkit.image_processing import (
    ...     ConvolutionFilter, MorphologicalFilter, Pipeline, PointwiseTransform,
    ... )
    >>> pipe = Pipeline([
    ...     ConvolutionFilter(preset='gaussian_blur'),
    ...     MorphologicalFilter(operation='open', iterations=2),
    ...     PointwiseTransform(hue_shift(0.25), color_space='hsv'),
    ... ])
    >>> result = pipe.apply(image)
    """

    def __init__(self, steps: Sequence[ImageTransform]) -> None:
        steps = tuple(steps)
        if not steps:
            raise ValidationError("Pipeline requires at least one transform")
        for index, step in enumerate(steps):
            if not isinstance(step, ImageTransform):
                hint = (
                    "; wrap color functions in PointwiseTransform"
                    if callable(step) else ""
                )
                raise ValidationError(
                    f"Pipeline step {index} must be an ImageTransform, "
                    f"got {type(step).__name__}{hint}"
                )
        self._steps: Tuple[ImageTransform, ...] = steps

    @property
    def steps(self) -> Tuple[ImageTransform, ...]:
        """The transforms in execution order."""
        return self._steps

    def __len__(self) -> int:
        return len(self._steps)

    def __iter__(self) -> Iterator[ImageTransform]:
        return iter(self._steps)

    def __repr__(self) -> str:
        names = ' -> '.join(type(step).__name__ for step in self._steps)
        return f"Pipeline({names})"

    def apply(self, source: np.ndarray, **kwargs: Any) -> np.ndarray:
        """Run every step in order on a packed RGB buffer.

        Parameters
        ----------
        source : np.ndarray
            Packed RGB buffer, shape ``(rows, cols)``.
        **kwargs
            Forwarded to every step; each step reads the parameters it
            declares and ignores the rest. ``progress_callback`` is
            rescaled per step.

        Returns
        -------
        np.ndarray
            Output buffer of the last step.

        Raises
        ------
        ValidationError
            If *source* is not a valid packed RGB buffer.
        ProcessorError
            If a step returns something that is not a valid packed RGB
            buffer. The message names the offending step.
        """
        buffer = as_pixel_buffer(source, 'source')
        outer_cb = kwargs.pop('progress_callback', None)
        count = len(self._steps)

        for index, step in enumerate(self._steps):
            name = _step_name(index, step)
            logger.debug("Pipeline %s of %d, input %s", name, count, buffer.shape)
            step_cb = _scaled_callback(outer_cb, index, count)
            if step_cb is not None:
                kwargs['progress_callback'] = step_cb
            output = step.apply(buffer, **kwargs)
            try:
                buffer = as_pixel_buffer(output, name)
            except ValidationError as exc:
                raise ProcessorError(
                    f"Pipeline {name} returned an invalid pixel buffer: {exc}"
                ) from exc
            if outer_cb is not None:
                outer_cb((index + 1) / count)

        return buffer
