"""Fixed-point RGB to YCbCr conversion (ITU-R BT.601, studio swing).

Each component is a weighted sum of R, G and B in 8.8 fixed point:

    y = ((66*r + 129*g +  25*b + 128) >> 8) + 16
    u = ((-38*r - 74*g + 112*b + 128) >> 8) + 128
    v = ((112*r - 94*g -  18*b + 128) >> 8) + 128

then clamped to 0..255. The +128 before the shift rounds to nearest.
Luma therefore spans 16..235; pure white maps to 235, not 255.
"""

import numpy as np
from numpy.typing import NDArray

# Weights of (R, G, B) for each component, scaled by 256
LUMA_COEFFICIENTS = (66, 129, 25)
U_COEFFICIENTS = (-38, -74, 112)
V_COEFFICIENTS = (112, -94, -18)

ROUNDING = 128
SHIFT = 8
LUMA_OFFSET = 16
CHROMA_OFFSET = 128


def clamp8(x: int) -> int:
    """Clamp an integer to the 0..255 range."""
    return max(0, min(255, x))


def _weighted(r: int, g: int, b: int, coefficients: tuple[int, int, int], offset: int) -> int:
    cr, cg, cb = coefficients
    return clamp8(((cr * r + cg * g + cb * b + ROUNDING) >> SHIFT) + offset)


def rgb_to_yuv(r: int, g: int, b: int) -> tuple[int, int, int]:
    """Convert one RGB triplet to (y, u, v).

    Args:
        r, g, b: 8-bit channel values.

    Returns:
        Tuple of clamped (y, u, v) values.
    """
    return (
        _weighted(r, g, b, LUMA_COEFFICIENTS, LUMA_OFFSET),
        _weighted(r, g, b, U_COEFFICIENTS, CHROMA_OFFSET),
        _weighted(r, g, b, V_COEFFICIENTS, CHROMA_OFFSET),
    )


def _weighted_plane(rgb: NDArray[np.uint8], coefficients: tuple[int, int, int], offset: int) -> NDArray[np.uint8]:
    # int32 holds the largest sum (255 * 220 + 128) with plenty of room;
    # numpy's >> on signed ints is an arithmetic shift
    r = rgb[..., 0].astype(np.int32)
    g = rgb[..., 1].astype(np.int32)
    b = rgb[..., 2].astype(np.int32)
    cr, cg, cb = coefficients
    acc = cr * r + cg * g + cb * b + ROUNDING
    return np.clip((acc >> SHIFT) + offset, 0, 255).astype(np.uint8)


def luma(rgb: NDArray[np.uint8]) -> NDArray[np.uint8]:
    """Compute Y for every pixel of an array of shape (..., 3+)."""
    return _weighted_plane(rgb, LUMA_COEFFICIENTS, LUMA_OFFSET)


def chroma(rgb: NDArray[np.uint8]) -> tuple[NDArray[np.uint8], NDArray[np.uint8]]:
    """Compute (U, V) for every pixel of an array of shape (..., 3+)."""
    return (
        _weighted_plane(rgb, U_COEFFICIENTS, CHROMA_OFFSET),
        _weighted_plane(rgb, V_COEFFICIENTS, CHROMA_OFFSET),
    )
