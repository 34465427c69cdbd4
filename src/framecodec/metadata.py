"""Format and orientation metadata handed to the detector with the bytes."""

from dataclasses import dataclass
from enum import Enum

from .convert import Traversal


class ImageFormat(Enum):
    """Byte layout of an encoded image."""

    NV21 = "nv21"
    BGRA8888 = "bgra8888"

    @property
    def file_extension(self) -> str:
        """Extension used when writing raw buffers to disk."""
        return {ImageFormat.NV21: ".nv21", ImageFormat.BGRA8888: ".bgra"}[self]


class ImageRotation(Enum):
    """Clockwise rotation the consumer must apply to view the image upright."""

    ROTATION_0 = 0
    ROTATION_90 = 90
    ROTATION_180 = 180
    ROTATION_270 = 270

    @classmethod
    def from_degrees(cls, degrees: int) -> "ImageRotation":
        """Look up a rotation by its angle (multiples of 90, any sign)."""
        try:
            return cls(int(degrees) % 360)
        except ValueError:
            raise ValueError(f"Unsupported rotation: {degrees} (must be a multiple of 90)") from None


@dataclass(frozen=True)
class ImageMetadata:
    """Everything the detector needs to interpret an encoded buffer.

    width and height are always the source dimensions, even when the bytes
    were written in a rotated traversal order.
    """

    width: int
    height: int
    format: ImageFormat
    rotation: ImageRotation
    bytes_per_row: int = 0  # 0 for NV21, where the consumer ignores it
    traversal: Traversal = Traversal.IDENTITY


@dataclass(frozen=True)
class EncodedImage:
    """Encoded bytes plus their metadata."""

    data: bytes
    metadata: ImageMetadata

    @property
    def size(self) -> tuple[int, int]:
        return (self.metadata.width, self.metadata.height)

    def __len__(self) -> int:
        return len(self.data)
