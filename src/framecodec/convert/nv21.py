"""RGB to NV21 (semi-planar YUV 4:2:0, V before U).

Layout of the output buffer for a W x H image:

    [0, W*H)              Y plane, one byte per pixel in visit order
    [W*H, W*H + W*H/2)    interleaved V, U pairs, one pair per 2x2 block
"""

import numpy as np
from numpy.typing import NDArray

from .colorspace import chroma, luma
from .traversal import Traversal, even_extent
from .validate import check_even, frame_shape


def nv21_size(width: int, height: int) -> int:
    """Number of bytes in an NV21 buffer (trailing odd row/column carries no chroma)."""
    return width * height + (even_extent(width) * even_extent(height)) // 2


def rgb_to_nv21(
    frame: NDArray[np.uint8],
    traversal: Traversal = Traversal.IDENTITY,
    require_even: bool = True,
) -> NDArray[np.uint8]:
    """Encode an RGB(A) frame as NV21.

    Args:
        frame: numpy array of shape (H, W, 3) or (H, W, 4); alpha is ignored.
        traversal: Order in which pixels are written (see Traversal).
        require_even: If True, odd width or height is rejected. Otherwise
            the trailing row/column gets luma only.

    Returns:
        Flat uint8 array of nv21_size(W, H) bytes.
    """
    height, width, _ = frame_shape(frame)
    if require_even:
        check_even(width, height)

    frame_size = width * height
    out = np.empty(nv21_size(width, height), dtype=np.uint8)

    visited = traversal.visit(frame)
    out[:frame_size] = luma(visited).reshape(-1)

    u, v = chroma(traversal.chroma_sites(visited))
    vu = out[frame_size:].reshape(-1, 2)
    vu[:, 0] = v.reshape(-1)
    vu[:, 1] = u.reshape(-1)
    return out
