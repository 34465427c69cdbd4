"""Pixel format conversion for detector input.

Decoded stills arrive as RGB or RGBA numpy arrays of shape (H, W, C).
These encoders produce the byte layouts vision detectors consume:
NV21 on Android and BGRA8888 on iOS.
"""

from .bgra import add_alpha_channel, rgba_to_bgra
from .colorspace import chroma, clamp8, luma, rgb_to_yuv
from .nv21 import nv21_size, rgb_to_nv21
from .traversal import Traversal, even_extent

__all__ = [
    "Traversal",
    "add_alpha_channel",
    "chroma",
    "clamp8",
    "even_extent",
    "luma",
    "nv21_size",
    "rgb_to_nv21",
    "rgb_to_yuv",
    "rgba_to_bgra",
]
