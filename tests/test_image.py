"""Tests for PixelImage construction and validation."""

import io

import numpy as np
import pytest
from PIL import Image

from framecodec.convert import Traversal, rgb_to_nv21
from framecodec.errors import (
    CHECK_ALPHA,
    CHECK_BUFFER_LENGTH,
    CHECK_CHANNELS,
    CHECK_CONTIGUOUS,
    CHECK_DIMENSIONS,
    CHECK_ROW_STRIDE,
    ImageFormatError,
)
from framecodec.image import PixelImage


class TestValidation:
    """A PixelImage is validated before any pixel is read."""

    def test_valid_rgb(self):
        image = PixelImage(4, 2, 3, bytes(24))
        assert image.row_stride == 12
        assert image.padding == 0
        assert not image.has_alpha

    def test_valid_rgba(self):
        image = PixelImage(4, 2, 4, bytearray(32))
        assert image.has_alpha

    @pytest.mark.parametrize("length", [23, 25, 0, 48])
    def test_wrong_buffer_length(self, length):
        with pytest.raises(ImageFormatError) as exc_info:
            PixelImage(4, 2, 3, bytes(length))
        assert exc_info.value.check == CHECK_BUFFER_LENGTH

    @pytest.mark.parametrize("channels", [0, 1, 2, 5])
    def test_unsupported_channels(self, channels):
        with pytest.raises(ImageFormatError) as exc_info:
            PixelImage(2, 2, channels, bytes(4 * channels))
        assert exc_info.value.check == CHECK_CHANNELS

    @pytest.mark.parametrize("width, height", [(0, 2), (2, 0), (-2, 2)])
    def test_non_positive_dimensions(self, width, height):
        with pytest.raises(ImageFormatError) as exc_info:
            PixelImage(width, height, 3, b"")
        assert exc_info.value.check == CHECK_DIMENSIONS

    def test_stride_too_small(self):
        with pytest.raises(ImageFormatError) as exc_info:
            PixelImage(4, 2, 3, bytes(22), row_stride=11)
        assert exc_info.value.check == CHECK_ROW_STRIDE

    def test_padded_rows(self):
        image = PixelImage(4, 2, 3, bytes(32), row_stride=16)
        assert image.padding == 4

    def test_strided_buffer_rejected(self):
        strided = memoryview(np.zeros((2, 4, 3), dtype=np.uint8)[:, ::2])
        with pytest.raises(ImageFormatError) as exc_info:
            PixelImage(2, 2, 3, strided)
        assert exc_info.value.check == CHECK_CONTIGUOUS

    def test_strided_array_rejected(self):
        with pytest.raises(ImageFormatError) as exc_info:
            PixelImage(2, 2, 3, np.zeros((2, 4, 3), dtype=np.uint8)[:, ::2])
        assert exc_info.value.check == CHECK_CONTIGUOUS

    def test_contiguous_memoryview_accepted(self):
        image = PixelImage(2, 2, 3, memoryview(np.zeros((2, 2, 3), dtype=np.uint8)))
        assert image.to_nv21().size == 6

    def test_error_is_a_value_error(self):
        with pytest.raises(ValueError):
            PixelImage(4, 2, 3, bytes(1))

    def test_error_message_names_check(self):
        with pytest.raises(ImageFormatError, match="buffer_length"):
            PixelImage(4, 2, 3, bytes(1))


class TestAsArray:
    """Tests for PixelImage.as_array."""

    def test_row_major_layout(self):
        data = bytes(range(12))
        frame = PixelImage(2, 2, 3, data).as_array()
        assert frame.shape == (2, 2, 3)
        assert frame[0, 1].tolist() == [3, 4, 5]
        assert frame[1, 0].tolist() == [6, 7, 8]

    def test_padding_stripped(self):
        data = bytes([1, 2, 3, 0xEE, 4, 5, 6, 0xEE])
        frame = PixelImage(1, 2, 3, data, row_stride=4).as_array()
        assert frame.reshape(-1).tolist() == [1, 2, 3, 4, 5, 6]


class TestConstructors:
    """Tests for from_array, from_pil and decode."""

    def test_from_array(self):
        frame = np.arange(2 * 4 * 3, dtype=np.uint8).reshape(2, 4, 3)
        image = PixelImage.from_array(frame)
        assert (image.width, image.height, image.channels) == (4, 2, 3)
        np.testing.assert_array_equal(image.as_array(), frame)

    def test_from_array_rejects_wrong_dtype(self):
        with pytest.raises(ImageFormatError):
            PixelImage.from_array(np.zeros((2, 2, 3), dtype=np.float32))

    def test_from_pil_rgba(self):
        pil = Image.new("RGBA", (3, 2), (10, 20, 30, 40))
        image = PixelImage.from_pil(pil)
        assert image.channels == 4
        assert image.as_array()[1, 2].tolist() == [10, 20, 30, 40]

    def test_from_pil_converts_grayscale(self):
        pil = Image.new("L", (2, 2), 200)
        image = PixelImage.from_pil(pil)
        assert image.channels == 3
        assert image.as_array()[0, 0].tolist() == [200, 200, 200]

    def test_decode_png(self):
        buf = io.BytesIO()
        Image.new("RGB", (4, 2), (255, 0, 0)).save(buf, format="PNG")
        image = PixelImage.decode(buf.getvalue())
        assert (image.width, image.height, image.channels) == (4, 2, 3)
        assert image.as_array()[1, 3].tolist() == [255, 0, 0]

    def test_decode_jpeg(self):
        buf = io.BytesIO()
        Image.new("RGB", (16, 8), (0, 0, 0)).save(buf, format="JPEG")
        image = PixelImage.decode(buf.getvalue())
        assert (image.width, image.height) == (16, 8)


class TestEncoders:
    """Tests for PixelImage.to_nv21 and to_bgra8888."""

    def test_to_nv21_matches_frame_encoder(self):
        rng = np.random.default_rng(31)
        frame = rng.integers(0, 256, size=(4, 6, 3), dtype=np.uint8)
        image = PixelImage.from_array(frame)
        for traversal in Traversal:
            expected = rgb_to_nv21(frame, traversal)
            np.testing.assert_array_equal(image.to_nv21(traversal), expected)

    def test_to_nv21_ignores_row_padding(self):
        padded = bytes([255, 255, 255, 0, 0, 0, 9, 9]) * 2
        image = PixelImage(2, 2, 3, padded, row_stride=8)
        out = image.to_nv21()
        assert out.tolist() == [235, 16, 235, 16, 128, 128]

    def test_to_bgra8888_expands_alpha(self):
        image = PixelImage(2, 2, 3, bytes([10, 20, 30]) * 4)
        out, stride = image.to_bgra8888()
        assert stride == 8
        assert out.tolist() == [30, 20, 10, 255] * 4

    def test_to_bgra8888_without_alpha_expansion(self):
        image = PixelImage(2, 2, 3, bytes(12))
        with pytest.raises(ImageFormatError) as exc_info:
            image.to_bgra8888(add_alpha=False)
        assert exc_info.value.check == CHECK_ALPHA

    def test_to_bgra8888_propagates_stride(self):
        image = PixelImage(2, 3, 4, bytes(range(8)) + bytes(4) + bytes(24), row_stride=12)
        out, stride = image.to_bgra8888()
        assert stride == 12
        assert out.size == 3 * 12
        assert out[:8].tolist() == [2, 1, 0, 3, 6, 5, 4, 7]
        assert out[8:12].tolist() == [0, 0, 0, 0]

    def test_to_bgra8888_stride_for_padded_rgb(self):
        image = PixelImage(2, 2, 3, bytes(16), row_stride=8)
        _, stride = image.to_bgra8888()
        assert stride == 2 * 4 + 2
