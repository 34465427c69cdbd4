"""RGB(A) to packed BGRA8888.

Each output pixel is four bytes in blue, green, red, alpha order. Rows are
``row_stride`` bytes apart; bytes past ``width * 4`` in a row are padding
and are zero-filled.
"""

import numpy as np
from numpy.typing import NDArray

from .validate import check_alpha, check_row_stride, frame_shape

OPAQUE = 255

# Source RGBA index for each BGRA output byte
_RGBA_TO_BGRA = [2, 1, 0, 3]


def add_alpha_channel(frame: NDArray[np.uint8], alpha: int = OPAQUE) -> NDArray[np.uint8]:
    """Append a constant alpha channel to an (H, W, 3) RGB frame."""
    height, width, _ = frame.shape
    alpha_plane = np.full((height, width, 1), alpha, dtype=np.uint8)
    return np.concatenate([frame, alpha_plane], axis=2)


def rgba_to_bgra(
    frame: NDArray[np.uint8],
    add_alpha: bool = False,
    row_stride: int | None = None,
) -> tuple[NDArray[np.uint8], int]:
    """Convert an RGBA frame to a packed BGRA8888 buffer.

    Args:
        frame: numpy array of shape (H, W, 4) in RGBA order, or (H, W, 3)
            RGB when add_alpha is set.
        add_alpha: Expand a 3-channel frame with an opaque alpha channel
            instead of rejecting it.
        row_stride: Bytes per output row. Defaults to W * 4.

    Returns:
        Tuple of (flat uint8 buffer of H * row_stride bytes, row_stride).
    """
    height, width, channels = frame_shape(frame)
    if channels == 3 and add_alpha:
        frame = add_alpha_channel(frame)
    else:
        check_alpha(channels)

    packed_width = width * 4
    if row_stride is None:
        row_stride = packed_width
    check_row_stride(row_stride, packed_width)

    out = np.zeros((height, row_stride), dtype=np.uint8)
    out[:, :packed_width] = frame[:, :, _RGBA_TO_BGRA].reshape(height, packed_width)
    return out.reshape(-1), row_stride
