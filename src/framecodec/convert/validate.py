"""Precondition checks shared by the encoders.

Every check runs before any pixel is read and raises ImageFormatError
naming the failed check. Nothing here truncates or pads a buffer.
"""

import numpy as np
from numpy.typing import NDArray

from ..errors import (
    CHECK_ALPHA,
    CHECK_BUFFER_LENGTH,
    CHECK_CHANNELS,
    CHECK_CONTIGUOUS,
    CHECK_DIMENSIONS,
    CHECK_EVEN_DIMENSIONS,
    CHECK_ROW_STRIDE,
    ImageFormatError,
)

SUPPORTED_CHANNELS = (3, 4)


def check_dimensions(width: int, height: int) -> None:
    if width <= 0 or height <= 0:
        raise ImageFormatError(CHECK_DIMENSIONS, f"width and height must be positive, got {width}x{height}")


def check_channels(channels: int) -> None:
    if channels not in SUPPORTED_CHANNELS:
        raise ImageFormatError(CHECK_CHANNELS, f"expected 3 (RGB) or 4 (RGBA) channels, got {channels}")


def check_row_stride(row_stride: int, min_stride: int) -> None:
    if row_stride < min_stride:
        raise ImageFormatError(CHECK_ROW_STRIDE, f"row stride {row_stride} is smaller than {min_stride} bytes")


def check_buffer_length(length: int, expected: int) -> None:
    if length != expected:
        raise ImageFormatError(CHECK_BUFFER_LENGTH, f"buffer holds {length} bytes, expected {expected}")


def check_contiguous(c_contiguous: bool) -> None:
    if not c_contiguous:
        raise ImageFormatError(CHECK_CONTIGUOUS, "buffer is not C-contiguous (strided view?)")


def check_alpha(channels: int) -> None:
    if channels != 4:
        raise ImageFormatError(CHECK_ALPHA, "image has no alpha channel (expected RGBA)")


def check_even(width: int, height: int) -> None:
    if width % 2 or height % 2:
        raise ImageFormatError(
            CHECK_EVEN_DIMENSIONS,
            f"4:2:0 output needs even width and height, got {width}x{height}",
        )


def frame_shape(frame: NDArray[np.uint8]) -> tuple[int, int, int]:
    """Validate a frame array and return its (height, width, channels).

    Args:
        frame: numpy array of shape (H, W, 3) or (H, W, 4), dtype uint8.
    """
    if frame.ndim != 3:
        raise ImageFormatError(CHECK_DIMENSIONS, f"expected an (H, W, C) array, got shape {frame.shape}")
    if frame.dtype != np.uint8:
        raise ImageFormatError(CHECK_CHANNELS, f"expected 8-bit channels, got dtype {frame.dtype}")
    height, width, channels = frame.shape
    check_dimensions(width, height)
    check_channels(channels)
    return height, width, channels
