# -*- coding: utf-8 -*-
"""
Raster IO Tests - RasterReader, RasterWriter, read_image, write_image.

Dependencies
------------
pytest
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

import numpy as np
import pytest

try:
    from PIL import Image
    _HAS_PIL = True
except ImportError:
    _HAS_PIL = False

from pixelkit.exceptions import CodecError, DependencyError, ValidationError
from pixelkit.IO import RasterReader, RasterWriter, read_image, write_image

pytestmark = pytest.mark.skipif(
    not _HAS_PIL, reason="Pillow not installed"
)


class TestRoundTrip:
    """Lossless formats reproduce the buffer exactly."""

    @pytest.mark.parametrize('suffix', ['png', 'bmp'])
    def test_roundtrip(self, tmp_path, random_image, suffix):
        path = tmp_path / f"image.{suffix}"
        write_image(random_image, path)
        np.testing.assert_array_equal(read_image(path), random_image)

    def test_explicit_format(self, tmp_path, random_image):
        path = tmp_path / "image.dat"
        write_image(random_image, path, format='PNG')
        with RasterReader(path) as reader:
            assert reader.metadata['format'] == 'PNG'
            np.testing.assert_array_equal(reader.read_full(), random_image)

    def test_writer_context_manager(self, tmp_path, flat_image):
        path = tmp_path / "flat.png"
        with RasterWriter(path) as writer:
            writer.write(flat_image)
        assert path.exists()
        np.testing.assert_array_equal(read_image(path), flat_image)


class TestRasterReader:
    """Decoding and metadata."""

    def test_shape_and_metadata(self, tmp_path, random_image):
        path = tmp_path / "image.png"
        write_image(random_image, path)
        with RasterReader(path) as reader:
            assert reader.get_shape() == random_image.shape
            assert reader.metadata['mode'] == 'RGB'

    def test_packs_channels(self, tmp_path):
        channels = np.zeros((2, 3, 3), dtype=np.uint8)
        channels[0, 0] = (0x12, 0x34, 0x56)
        channels[1, 2] = (0xFF, 0x00, 0x80)
        path = tmp_path / "pixels.png"
        Image.fromarray(channels).save(path)
        image = read_image(path)
        assert image.dtype == np.uint32
        assert image[0, 0] == 0x123456
        assert image[1, 2] == 0xFF0080

    def test_alpha_discarded(self, tmp_path):
        rgba = np.zeros((4, 4, 4), dtype=np.uint8)
        rgba[..., 0] = 0xAA
        rgba[..., 3] = 0x10
        path = tmp_path / "rgba.png"
        Image.fromarray(rgba).save(path)
        assert np.all(read_image(path) == 0xAA0000)

    def test_grayscale_expanded(self, tmp_path):
        gray = np.full((3, 5), 0x40, dtype=np.uint8)
        path = tmp_path / "gray.png"
        Image.fromarray(gray).save(path)
        assert np.all(read_image(path) == 0x404040)

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            read_image(tmp_path / "missing.png")

    def test_garbage_file(self, tmp_path):
        path = tmp_path / "garbage.png"
        path.write_bytes(b"not an image at all")
        with pytest.raises(CodecError):
            RasterReader(path)

    def test_codec_error_is_ioerror(self, tmp_path):
        path = tmp_path / "garbage.bmp"
        path.write_bytes(b"\x00" * 16)
        with pytest.raises(IOError):
            read_image(path)


class TestRasterWriter:
    """Encoding errors."""

    def test_unknown_extension(self, tmp_path, random_image):
        with pytest.raises(CodecError):
            write_image(random_image, tmp_path / "image.nosuchformat")

    def test_invalid_buffer(self, tmp_path):
        with pytest.raises(ValidationError):
            write_image(np.zeros((2, 2, 3), dtype=np.uint8), tmp_path / "bad.png")


class TestDependency:
    def test_missing_pillow_raises(self, monkeypatch, tmp_path, flat_image):
        from pixelkit.IO import raster

        monkeypatch.setattr(raster, '_HAS_PIL', False)
        with pytest.raises(DependencyError, match="Pillow"):
            RasterWriter(tmp_path / "out.png")
        with pytest.raises(ImportError):
            RasterReader(tmp_path / "out.png")
