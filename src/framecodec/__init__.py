"""framecodec - pixel format conversion for on-device barcode detection.

Takes decoded stills from a head-worn camera and re-encodes them in the
layouts platform vision detectors consume (NV21 on Android, BGRA8888 on
iOS), together with the orientation metadata the detector needs.
"""

__version__ = "0.1.0"

from .detector import TargetPlatform, encode_for_detector
from .errors import ImageFormatError
from .image import PixelImage
from .metadata import EncodedImage, ImageFormat, ImageMetadata, ImageRotation

__all__ = [
    "EncodedImage",
    "ImageFormat",
    "ImageFormatError",
    "ImageMetadata",
    "ImageRotation",
    "PixelImage",
    "TargetPlatform",
    "encode_for_detector",
    "__version__",
]
