"""Decoded still images as flat, row-major byte buffers."""

import io
from dataclasses import dataclass, field

import numpy as np
from numpy.typing import NDArray
from PIL import Image

from .convert import Traversal, rgb_to_nv21, rgba_to_bgra
from .convert.validate import (
    check_buffer_length,
    check_channels,
    check_contiguous,
    check_dimensions,
    check_row_stride,
    frame_shape,
)

# Pillow modes we hand over unchanged; everything else is converted to RGB
_PIL_MODES = {"RGB": 3, "RGBA": 4}


@dataclass(frozen=True)
class PixelImage:
    """A decoded RGB or RGBA image.

    Samples are stored row-major, left to right, top to bottom, one byte per
    channel. Rows start ``row_stride`` bytes apart; the stride may exceed
    ``width * channels`` when the decoder pads rows.

    The buffer is validated on construction: a PixelImage that exists always
    satisfies ``len(data) == height * row_stride``.
    """

    width: int
    height: int
    channels: int
    data: bytes | bytearray | memoryview | NDArray[np.uint8] = field(repr=False)
    row_stride: int | None = None

    def __post_init__(self):
        check_dimensions(self.width, self.height)
        check_channels(self.channels)
        min_stride = self.width * self.channels
        if self.row_stride is None:
            object.__setattr__(self, "row_stride", min_stride)
        check_row_stride(self.row_stride, min_stride)
        view = memoryview(self.data)
        check_contiguous(view.c_contiguous)
        check_buffer_length(view.nbytes, self.height * self.row_stride)

    @classmethod
    def from_array(cls, frame: NDArray[np.uint8]) -> "PixelImage":
        """Wrap an (H, W, 3|4) uint8 array."""
        height, width, channels = frame_shape(frame)
        return cls(width, height, channels, np.ascontiguousarray(frame).reshape(-1))

    @classmethod
    def from_pil(cls, image: Image.Image) -> "PixelImage":
        """Wrap a Pillow image, converting to RGB unless it is RGB or RGBA."""
        if image.mode not in _PIL_MODES:
            image = image.convert("RGB")
        return cls(image.width, image.height, _PIL_MODES[image.mode], image.tobytes())

    @classmethod
    def decode(cls, data: bytes) -> "PixelImage":
        """Decode an encoded still (JPEG, PNG, ...) with Pillow."""
        with Image.open(io.BytesIO(data)) as image:
            image.load()
            return cls.from_pil(image)

    @property
    def has_alpha(self) -> bool:
        return self.channels == 4

    @property
    def padding(self) -> int:
        """Bytes of padding at the end of each row."""
        return self.row_stride - self.width * self.channels

    def as_array(self) -> NDArray[np.uint8]:
        """View the pixels as an (H, W, C) array with row padding stripped."""
        rows = np.frombuffer(self.data, dtype=np.uint8).reshape(self.height, self.row_stride)
        return rows[:, : self.width * self.channels].reshape(self.height, self.width, self.channels)

    def to_nv21(self, traversal: Traversal = Traversal.IDENTITY, require_even: bool = True) -> NDArray[np.uint8]:
        """Encode as NV21 (see convert.rgb_to_nv21)."""
        return rgb_to_nv21(self.as_array(), traversal=traversal, require_even=require_even)

    def to_bgra8888(self, add_alpha: bool = True) -> tuple[NDArray[np.uint8], int]:
        """Encode as packed BGRA8888.

        Row padding carried by the source is kept: the output stride is
        ``width * 4 + padding``.

        Returns:
            Tuple of (flat buffer, row stride in bytes).
        """
        return rgba_to_bgra(
            self.as_array(),
            add_alpha=add_alpha,
            row_stride=self.width * 4 + self.padding,
        )
