"""Encode decoded stills for the platform's vision detector.

Android detectors read NV21, iOS detectors read BGRA8888. Orientation is
handled one of two ways:

- describe: bytes stay in source order and the metadata carries the
  rotation (what both platform detectors honour);
- bake: NV21 bytes are written in the rotated traversal order and the
  metadata reports no remaining rotation.
"""

import sys
import time
from enum import Enum

from . import log
from .convert import Traversal
from .image import PixelImage
from .metadata import EncodedImage, ImageFormat, ImageMetadata, ImageRotation

logger = log.get_logger()

# Stills from the camera accessory arrive rotated a quarter turn
DEFAULT_ROTATION = ImageRotation.ROTATION_90


class TargetPlatform(Enum):
    """Platform whose detector consumes the encoded image."""

    ANDROID = "android"
    IOS = "ios"

    @property
    def image_format(self) -> ImageFormat:
        """Pixel format the platform's detector expects."""
        if self is TargetPlatform.IOS:
            return ImageFormat.BGRA8888
        return ImageFormat.NV21

    @classmethod
    def detect(cls) -> "TargetPlatform":
        """Guess the target platform from the running interpreter."""
        if sys.platform in ("ios", "darwin"):
            return cls.IOS
        return cls.ANDROID

    @classmethod
    def from_name(cls, name: str) -> "TargetPlatform":
        """Resolve 'android', 'ios' or 'auto' (detect)."""
        name = name.strip().lower()
        if name == "auto":
            return cls.detect()
        try:
            return cls(name)
        except ValueError:
            choices = ", ".join(["auto"] + [p.value for p in cls])
            raise ValueError(f"Unknown platform '{name}' (expected one of: {choices})") from None


def encode_for_detector(
    image: PixelImage,
    platform: TargetPlatform | None = None,
    rotation: ImageRotation = DEFAULT_ROTATION,
    bake_rotation: bool = False,
    add_alpha: bool = True,
    require_even: bool = True,
) -> EncodedImage:
    """Encode an image in the format the target platform's detector reads.

    Args:
        image: Decoded RGB or RGBA still.
        platform: Target platform. Detected from the interpreter if None.
        rotation: Rotation the consumer must apply to view the image upright.
        bake_rotation: Write NV21 bytes in the rotated traversal order instead
            of describing the rotation. Only a 90 degree rotation can be baked.
        add_alpha: For BGRA8888, expand RGB input with an opaque alpha channel
            instead of rejecting it.
        require_even: For NV21, reject odd width or height.

    Returns:
        EncodedImage with bytes and metadata.

    Raises:
        ImageFormatError: If the image fails validation.
        ValueError: If the rotation cannot be baked for this platform.
    """
    if platform is None:
        platform = TargetPlatform.detect()
    image_format = platform.image_format

    if bake_rotation:
        if image_format is not ImageFormat.NV21:
            raise ValueError(f"Rotation can only be baked into NV21 output, not {image_format.value}")
        if rotation is not ImageRotation.ROTATION_90:
            raise ValueError(f"Only a 90 degree rotation can be baked, got {rotation.value}")

    start = time.perf_counter()

    if image_format is ImageFormat.NV21:
        traversal = Traversal.ROTATE_90_CCW if bake_rotation else Traversal.IDENTITY
        buffer = image.to_nv21(traversal=traversal, require_even=require_even)
        metadata = ImageMetadata(
            width=image.width,
            height=image.height,
            format=image_format,
            rotation=ImageRotation.ROTATION_0 if bake_rotation else rotation,
            bytes_per_row=0,
            traversal=traversal,
        )
    else:
        buffer, stride = image.to_bgra8888(add_alpha=add_alpha)
        metadata = ImageMetadata(
            width=image.width,
            height=image.height,
            format=image_format,
            rotation=rotation,
            bytes_per_row=stride,
        )

    if log.is_debug_enabled():
        elapsed_ms = (time.perf_counter() - start) * 1000
        logger.debug(
            "conversion complete",
            format=image_format.value,
            width=image.width,
            height=image.height,
            traversal=metadata.traversal.value,
            time_ms=f"{elapsed_ms:.0f}",
        )

    return EncodedImage(data=buffer.tobytes(), metadata=metadata)
