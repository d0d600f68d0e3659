# -*- coding: utf-8 -*-
"""
Morphology Tests - Luminance-ordered erosion, dilation, opening, closing.

Uses a 3x3 fixture whose per-pixel luminance ordering is known, so each
output pixel can be checked against the neighbor that must win.

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

from pixelkit.color import luminance, to_vector
from pixelkit.color.functions import invert
from pixelkit.exceptions import ValidationError
from pixelkit.image_processing import (
    CROSS,
    DIAGONAL,
    HORIZONTAL,
    SQUARE,
    STRUCTURING_ELEMENTS,
    VERTICAL,
    MorphologicalFilter,
    closing,
    dilate,
    erode,
    map_unary,
    morphological_gradient,
    opening,
)


class TestErodeDilate:
    """Single-pass selection on a known luminance layout."""

    def test_erode_cross_full_image(self, ordered_image):
        expected = np.array([
            [0x0000FF, 0xFF0000, 0x202020],
            [0x0000FF, 0x0000FF, 0x400000],
            [0x0000FF, 0x400000, 0x400000],
        ], dtype=np.uint32)
        np.testing.assert_array_equal(erode(ordered_image), expected)

    def test_default_element_is_cross(self, ordered_image):
        np.testing.assert_array_equal(erode(ordered_image),
                                      erode(ordered_image, element=CROSS))

    def test_center_pixel(self, ordered_image):
        assert erode(ordered_image, element=SQUARE)[1, 1] == 0x400000
        assert erode(ordered_image, element=CROSS)[1, 1] == 0x0000FF
        assert dilate(ordered_image, element=CROSS)[1, 1] == 0xFFFFFF

    def test_corner_skips_out_of_bounds(self, ordered_image):
        assert dilate(ordered_image)[0, 0] == 0x808080
        assert erode(ordered_image)[0, 0] == 0x0000FF
        assert dilate(ordered_image, element=SQUARE)[2, 2] == 0xFFFFFF
        assert erode(ordered_image, element=SQUARE)[2, 2] == 0x400000

    def test_horizontal_and_vertical_elements(self, ordered_image):
        assert dilate(ordered_image, element=HORIZONTAL)[2, 1] == 0xFFFF00
        assert dilate(ordered_image, element=VERTICAL)[2, 1] == 0xFFFFFF

    def test_diagonal_excludes_edge_neighbors(self, ordered_image):
        # Corners .502 .587 .886 .075 plus the center itself at 1.0
        assert erode(ordered_image, element=DIAGONAL)[1, 1] == 0x400000
        assert dilate(ordered_image, element=DIAGONAL)[1, 1] == 0xFFFFFF

    def test_output_colors_come_from_input(self, random_image):
        colors = set(np.unique(random_image).tolist())
        for op in (erode, dilate):
            assert set(np.unique(op(random_image)).tolist()) <= colors

    def test_erode_darkens_dilate_brightens(self, random_image):
        lum = luminance(to_vector(random_image))
        assert np.all(luminance(to_vector(erode(random_image))) <= lum)
        assert np.all(luminance(to_vector(dilate(random_image))) >= lum)

    def test_repeated_passes(self, random_image):
        np.testing.assert_array_equal(erode(random_image, 2),
                                      erode(erode(random_image)))
        np.testing.assert_array_equal(dilate(random_image, 3, SQUARE),
                                      dilate(dilate(dilate(random_image, 1, SQUARE),
                                                    1, SQUARE), 1, SQUARE))

    def test_input_not_modified(self, random_image):
        before = random_image.copy()
        erode(random_image)
        dilate(random_image)
        np.testing.assert_array_equal(random_image, before)

    def test_zero_times_returns_input(self, random_image):
        assert erode(random_image, 0) is random_image
        assert dilate(random_image, times=0) is random_image

    def test_all_false_element_gives_black(self, random_image):
        empty = np.zeros((3, 3), dtype=bool)
        assert np.all(erode(random_image, element=empty) == 0)
        assert np.all(dilate(random_image, element=empty) == 0)

    @pytest.mark.parametrize('times', [-1, 1.5, True])
    def test_invalid_times_raises(self, random_image, times):
        with pytest.raises(ValidationError):
            erode(random_image, times)

    def test_invalid_element_raises(self, random_image):
        with pytest.raises(ValidationError):
            dilate(random_image, element=np.ones((5, 5), dtype=bool))

    def test_duality_under_inversion(self, gray_image):
        inverted = map_unary(gray_image, invert)
        dual = map_unary(erode(inverted, element=SQUARE), invert)
        np.testing.assert_array_equal(dilate(gray_image, element=SQUARE), dual)

    def test_single_pixel_image(self):
        image = np.array([[0x123456]], dtype=np.uint32)
        np.testing.assert_array_equal(erode(image, element=SQUARE), image)


class TestOpeningClosing:
    """Composite operators."""

    def test_opening_composition(self, random_image):
        np.testing.assert_array_equal(opening(random_image, 2),
                                      dilate(erode(random_image, 2), 2))

    def test_closing_composition(self, random_image):
        np.testing.assert_array_equal(closing(random_image, 1, SQUARE),
                                      erode(dilate(random_image, 1, SQUARE),
                                            1, SQUARE))

    @pytest.mark.parametrize('element', [CROSS, SQUARE])
    @pytest.mark.parametrize('times', [1, 2])
    def test_opening_idempotent(self, binary_image, element, times):
        once = opening(binary_image, times, element)
        np.testing.assert_array_equal(opening(once, times, element), once)

    @pytest.mark.parametrize('element', [CROSS, SQUARE])
    @pytest.mark.parametrize('times', [1, 2])
    def test_closing_idempotent(self, binary_image, element, times):
        once = closing(binary_image, times, element)
        np.testing.assert_array_equal(closing(once, times, element), once)

    def test_opening_removes_isolated_speck(self):
        image = np.zeros((7, 7), dtype=np.uint32)
        image[3, 3] = 0xFFFFFF
        assert np.all(opening(image) == 0)

    def test_closing_fills_isolated_hole(self):
        image = np.full((7, 7), 0xFFFFFF, dtype=np.uint32)
        image[3, 3] = 0
        assert np.all(closing(image) == 0xFFFFFF)

    def test_opening_darkens_closing_brightens(self, gray_image):
        lum = luminance(to_vector(gray_image))
        assert np.all(luminance(to_vector(opening(gray_image))) <= lum + 1e-12)
        assert np.all(luminance(to_vector(closing(gray_image))) >= lum - 1e-12)


class TestMorphologicalGradient:
    def test_flat_image_is_black(self, flat_image):
        assert np.all(morphological_gradient(flat_image) == 0)

    def test_known_pixels(self, ordered_image):
        result = morphological_gradient(ordered_image)
        # 0xFFFFFF - 0x0000FF
        assert result[1, 1] == 0xFFFF00
        # 0x808080 - 0x0000FF, blue clipped at zero
        assert result[0, 0] == 0x808000

    def test_gray_matches_level_difference(self, gray_image):
        high = dilate(gray_image) & 0xFF
        low = erode(gray_image) & 0xFF
        levels = (high - low).astype(np.uint32)
        expected = (levels << 16) | (levels << 8) | levels
        np.testing.assert_array_equal(morphological_gradient(gray_image), expected)


class TestStructuringElements:
    def test_presets(self):
        assert set(STRUCTURING_ELEMENTS) == {
            'cross', 'square', 'diagonal', 'horizontal', 'vertical',
        }
        assert CROSS.sum() == 5
        assert SQUARE.sum() == 9
        assert DIAGONAL.sum() == 5
        assert HORIZONTAL.sum() == 3
        assert VERTICAL.sum() == 3

    def test_read_only(self):
        with pytest.raises(ValueError):
            CROSS[0, 0] = True


class TestMorphologicalFilter:
    """ImageTransform wrapper."""

    def test_default_is_single_cross_erosion(self, random_image):
        np.testing.assert_array_equal(MorphologicalFilter().apply(random_image),
                                      erode(random_image))

    @pytest.mark.parametrize('operation, func', [
        ('erode', erode),
        ('dilate', dilate),
        ('open', opening),
        ('close', closing),
        ('gradient', morphological_gradient),
    ])
    def test_operations(self, random_image, operation, func):
        filt = MorphologicalFilter(operation=operation, iterations=2,
                                   structure='square')
        np.testing.assert_array_equal(filt.apply(random_image),
                                      func(random_image, 2, SQUARE))

    def test_operation_case_insensitive(self, random_image):
        np.testing.assert_array_equal(
            MorphologicalFilter(operation='OPEN').apply(random_image),
            opening(random_image),
        )

    def test_explicit_element(self, ordered_image):
        filt = MorphologicalFilter(operation='dilate', element=HORIZONTAL)
        assert filt.apply(ordered_image)[2, 1] == 0xFFFF00

    def test_runtime_structure_overrides_element(self, ordered_image):
        filt = MorphologicalFilter(operation='dilate', element=HORIZONTAL)
        result = filt.apply(ordered_image, structure='vertical')
        assert result[2, 1] == 0xFFFFFF

    def test_runtime_iterations(self, random_image):
        filt = MorphologicalFilter()
        np.testing.assert_array_equal(filt.apply(random_image, iterations=3),
                                      erode(random_image, 3))

    def test_invalid_operation(self):
        with pytest.raises(ValidationError):
            MorphologicalFilter(operation='thin')

    def test_invalid_iterations(self):
        with pytest.raises(ValidationError):
            MorphologicalFilter(iterations=-1)
        with pytest.raises(TypeError):
            MorphologicalFilter(iterations=1.5)

    def test_invalid_structure(self):
        with pytest.raises(ValidationError):
            MorphologicalFilter(structure='disk')

    def test_progress_callback(self, flat_image):
        seen = []
        MorphologicalFilter().apply(flat_image, progress_callback=seen.append)
        assert seen == [1.0]


def _equal_luma_pair():
    """Two distinct packed colors whose computed luminance is identical.

    ``299*11 + 587*1 - 114*34 == 0``, so shifting a color by
    ``(+11, +1, -34)`` keeps the integer luma sum; among many such pairs,
    the first whose floating-point luminance also matches exactly is used.
    """
    r, g, b = np.meshgrid(np.arange(0, 245), np.array([60, 120, 180]),
                          np.arange(34, 256), indexing='ij')
    r, g, b = (c.astype(np.uint32).ravel() for c in (r, g, b))
    first = (r << 16) | (g << 8) | b
    second = ((r + 11) << 16) | ((g + 1) << 8) | (b - 34)
    hits = np.flatnonzero(luminance(to_vector(first))
                          == luminance(to_vector(second)))
    assert hits.size > 0
    return int(first[hits[0]]), int(second[hits[0]])


class TestTieBreak:
    """Equal-luminance neighbors: column-major visiting, first strict winner.

    With ``SQUARE`` at the center of a 3x3 image, the neighbor at
    ``(row 2, col 0)`` is visited before ``(row 0, col 1)`` because columns
    are the outer loop.
    """

    @pytest.fixture
    def pair(self):
        return _equal_luma_pair()

    def _image(self, fill, early, late):
        image = np.full((3, 3), fill, dtype=np.uint32)
        image[2, 0] = early
        image[0, 1] = late
        return image

    def test_pair_is_a_real_tie(self, pair):
        a, b = pair
        assert a != b
        lum = luminance(to_vector(np.array([a, b], dtype=np.uint32)))
        assert lum[0] == lum[1]
        assert 0.0 < lum[0] < 0.99

    def test_erode_keeps_first_visited(self, pair):
        a, b = pair
        assert erode(self._image(0xFFFFFF, a, b), element=SQUARE)[1, 1] == a
        assert erode(self._image(0xFFFFFF, b, a), element=SQUARE)[1, 1] == b

    def test_dilate_keeps_first_visited(self, pair):
        a, b = pair
        assert dilate(self._image(0x000000, a, b), element=SQUARE)[1, 1] == a
        assert dilate(self._image(0x000000, b, a), element=SQUARE)[1, 1] == b

    def test_same_row_earlier_column_wins(self, pair):
        a, b = pair
        image = np.full((3, 3), 0xFFFFFF, dtype=np.uint32)
        image[1, 0] = b
        image[1, 2] = a
        assert erode(image, element=HORIZONTAL)[1, 1] == b
        image[1, 0], image[1, 2] = a, b
        assert erode(image, element=HORIZONTAL)[1, 1] == a
