# -*- coding: utf-8 -*-
"""
Pixel Mapper Tests - map_unary, map_unary_hsv, map_binary, PointwiseTransform.

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

import numpy as np
import pytest

from pixelkit.color import ColorVector, blue_channel8, green_channel8, red_channel8
from pixelkit.color.functions import (
    blend,
    difference,
    grayscale,
    hue_shift,
    invert,
    threshold,
)
from pixelkit.exceptions import ProcessorError, ValidationError
from pixelkit.image_processing import (
    ImageTransform,
    PointwiseTransform,
    map_binary,
    map_unary,
    map_unary_hsv,
)


def _max_channel_delta(a, b):
    return max(
        int(np.abs(f(a).astype(np.int64) - f(b).astype(np.int64)).max())
        for f in (red_channel8, green_channel8, blue_channel8)
    )


class TestMapUnary:
    """RGB pixel mapping."""

    def test_identity_returns_equal_new_buffer(self, random_image):
        result = map_unary(random_image, lambda v: v)
        np.testing.assert_array_equal(result, random_image)
        assert result is not random_image
        assert result.dtype == np.uint32

    def test_invert_twice_is_identity(self, random_image):
        once = map_unary(random_image, invert)
        twice = map_unary(once, invert)
        np.testing.assert_array_equal(twice, random_image)

    def test_invert_known_pixels(self):
        image = np.array([[0x000000, 0xFFFFFF, 0x123456]], dtype=np.uint32)
        result = map_unary(image, invert)
        np.testing.assert_array_equal(result, [[0xFFFFFF, 0x000000, 0xEDCBA9]])

    def test_input_not_modified(self, random_image):
        before = random_image.copy()
        map_unary(random_image, invert)
        np.testing.assert_array_equal(random_image, before)

    def test_grayscale_output_is_gray(self, random_image):
        result = map_unary(random_image, grayscale)
        np.testing.assert_array_equal(red_channel8(result), green_channel8(result))
        np.testing.assert_array_equal(green_channel8(result), blue_channel8(result))

    def test_threshold_is_binary(self, random_image):
        result = map_unary(random_image, threshold(0.5))
        assert set(np.unique(result)) <= {0x000000, 0xFFFFFF}

    def test_out_of_range_output_clamped(self, flat_image):
        result = map_unary(flat_image, lambda v: v * 10.0)
        assert np.all(result == 0xFFFFFF)

    def test_vectorized_matches_per_pixel(self, random_image):
        for func in (invert, grayscale, threshold(0.4)):
            per_pixel = map_unary(random_image, func)
            whole = map_unary(random_image, func, vectorized=True)
            np.testing.assert_array_equal(whole, per_pixel)

    def test_vectorized_constant_result_fills_image(self, random_image):
        result = map_unary(random_image, lambda v: ColorVector(1.0, 0.0, 0.0),
                           vectorized=True)
        assert result.shape == random_image.shape
        assert np.all(result == 0xFF0000)

    def test_non_vector_result_raises(self, flat_image):
        with pytest.raises(ProcessorError, match="ColorVector"):
            map_unary(flat_image, lambda v: (0.0, 0.0, 0.0))

    def test_empty_image(self):
        result = map_unary(np.zeros((0, 4), dtype=np.uint32), invert)
        assert result.shape == (0, 4)

    def test_rejects_invalid_buffer(self):
        with pytest.raises(ValidationError):
            map_unary(np.zeros((2, 2, 3), dtype=np.uint32), invert)


class TestMapUnaryHSV:
    """HSV pixel mapping."""

    def test_identity_within_one_step(self, random_image):
        result = map_unary_hsv(random_image, lambda v: v)
        assert _max_channel_delta(result, random_image) <= 1

    def test_full_turn_hue_shift_is_identity(self, random_image):
        result = map_unary_hsv(random_image, hue_shift(1.0))
        assert _max_channel_delta(result, random_image) <= 1

    def test_half_turn_maps_red_to_cyan(self):
        image = np.array([[0xFF0000]], dtype=np.uint32)
        result = map_unary_hsv(image, hue_shift(0.5))
        assert int(result[0, 0]) == 0x00FFFF

    def test_receives_hsv_components(self):
        seen = []

        def record(hsv):
            seen.append(hsv)
            return hsv

        map_unary_hsv(np.array([[0x00FF00]], dtype=np.uint32), record)
        assert seen[0].as_tuple() == pytest.approx((1.0 / 3.0, 1.0, 1.0))

    def test_saturation_zeroed_gives_gray(self, random_image):
        result = map_unary_hsv(random_image,
                               lambda v: ColorVector(v.x, 0.0, v.z),
                               vectorized=True)
        np.testing.assert_array_equal(red_channel8(result), blue_channel8(result))


class TestMapBinary:
    """Two-image pixel mapping."""

    def test_same_image_difference_is_black(self, random_image):
        result = map_binary(random_image, random_image, difference)
        assert np.all(result == 0)

    def test_overlap_shape(self, rng):
        a = rng.integers(0, 0x1000000, size=(4, 5), dtype=np.uint32)
        b = rng.integers(0, 0x1000000, size=(3, 7), dtype=np.uint32)
        result = map_binary(a, b, lambda p, q: p)
        assert result.shape == (3, 5)
        np.testing.assert_array_equal(result, a[:3, :5])

    def test_second_argument_from_second_image(self, rng):
        a = rng.integers(0, 0x1000000, size=(5, 3), dtype=np.uint32)
        b = rng.integers(0, 0x1000000, size=(2, 6), dtype=np.uint32)
        result = map_binary(a, b, lambda p, q: q)
        np.testing.assert_array_equal(result, b[:2, :3])

    def test_blend_midpoint(self):
        black = np.zeros((2, 2), dtype=np.uint32)
        white = np.full((2, 2), 0xFFFFFF, dtype=np.uint32)
        result = map_binary(black, white, blend(0.5))
        assert np.all(result == 0x808080)

    def test_vectorized_matches_per_pixel(self, random_image, rng):
        other = rng.integers(0, 0x1000000, size=random_image.shape,
                             dtype=np.uint32)
        for func in (difference, blend(0.3)):
            np.testing.assert_array_equal(
                map_binary(random_image, other, func, vectorized=True),
                map_binary(random_image, other, func),
            )

    def test_non_vector_result_raises(self, flat_image):
        with pytest.raises(ProcessorError):
            map_binary(flat_image, flat_image, lambda p, q: None)


class TestPointwiseTransform:
    """ImageTransform wrapper around a color function."""

    def test_is_image_transform(self):
        assert isinstance(PointwiseTransform(invert), ImageTransform)

    def test_rgb_apply(self, random_image):
        result = PointwiseTransform(invert).apply(random_image)
        np.testing.assert_array_equal(result, map_unary(random_image, invert))

    def test_hsv_apply(self, random_image):
        transform = PointwiseTransform(hue_shift(0.25), color_space='hsv')
        np.testing.assert_array_equal(
            transform.apply(random_image),
            map_unary_hsv(random_image, hue_shift(0.25)),
        )

    def test_runtime_override(self, random_image):
        transform = PointwiseTransform(hue_shift(0.25))
        np.testing.assert_array_equal(
            transform.apply(random_image, color_space='hsv', vectorized=True),
            map_unary_hsv(random_image, hue_shift(0.25)),
        )

    def test_rejects_unknown_color_space(self):
        with pytest.raises(ValidationError):
            PointwiseTransform(invert, color_space='lab')

    def test_rejects_non_callable(self):
        with pytest.raises(TypeError):
            PointwiseTransform('invert')

    def test_tags(self):
        tags = PointwiseTransform.__processor_tags__
        assert tags['category'].value == 'color'
        assert PointwiseTransform.__processor_version__ == '1.0.0'
