"""Command-line entry point for framecodec.

This module is executed when running:
- python -m framecodec
- framecodec (via pyproject.toml entry point)
"""

import argparse
import sys
from pathlib import Path

import yaml
from PIL import UnidentifiedImageError

from . import log
from .config import Config
from .detector import encode_for_detector
from .errors import ImageFormatError
from .image import PixelImage


def _parse_arguments(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse command-line arguments."""
    parser = argparse.ArgumentParser(
        description="Convert a captured still to detector input (NV21 or BGRA8888)"
    )
    parser.add_argument(
        "input",
        type=Path,
        help="Encoded still to convert (JPEG, PNG, ...)"
    )
    parser.add_argument(
        "--output", "-o",
        type=Path,
        default=None,
        help="Where to write the raw buffer (default: input path with .nv21/.bgra suffix)"
    )
    parser.add_argument(
        "--config", "-c",
        type=str,
        default=None,
        help="Path to config file (default: config.yml)"
    )
    parser.add_argument(
        "--platform", "-p",
        type=str,
        choices=["auto", "android", "ios"],
        default=None,
        help="Target detector platform (overrides config)"
    )
    parser.add_argument(
        "--rotation", "-r",
        type=int,
        default=None,
        help="Rotation of the still in degrees clockwise (overrides config)"
    )
    parser.add_argument(
        "--bake-rotation",
        action="store_true",
        help="Write NV21 bytes in rotated order instead of describing the rotation"
    )
    parser.add_argument(
        "--allow-odd",
        action="store_true",
        help="Accept odd width or height for NV21 (trailing row/column gets no chroma)"
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Log conversion timings"
    )
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    """Run the converter. Returns the process exit code."""
    args = _parse_arguments(argv)
    try:
        config = Config.load(args.config)
    except (OSError, ValueError, yaml.YAMLError) as e:
        log.configure(debug=args.debug)
        log.get_logger("cli").error("invalid config", path=args.config, err=str(e))
        return 1

    log.configure(config.log_level, debug=args.debug)
    logger = log.get_logger("cli")

    if args.platform is not None:
        config.platform = args.platform
    if args.rotation is not None:
        config.rotation = args.rotation
    if args.bake_rotation:
        config.bake_rotation = True
    if args.allow_odd:
        config.require_even = False

    try:
        image = PixelImage.decode(args.input.read_bytes())
        encoded = encode_for_detector(
            image,
            platform=config.target_platform(),
            rotation=config.image_rotation(),
            bake_rotation=config.bake_rotation,
            add_alpha=config.add_alpha,
            require_even=config.require_even,
        )
    except ImageFormatError as e:
        logger.error("invalid image", path=str(args.input), check=e.check, err=str(e))
        return 1
    except (OSError, UnidentifiedImageError, ValueError) as e:
        logger.error("conversion failed", path=str(args.input), err=str(e))
        return 1

    meta = encoded.metadata
    output = args.output or args.input.with_suffix(meta.format.file_extension)
    try:
        output.write_bytes(encoded.data)
    except OSError as e:
        logger.error("write failed", output=str(output), err=str(e))
        return 1

    logger.info(
        "encoded image",
        output=str(output),
        format=meta.format.value,
        width=meta.width,
        height=meta.height,
        rotation=meta.rotation.value,
        bytes_per_row=meta.bytes_per_row,
        traversal=meta.traversal.value,
        bytes=len(encoded),
    )
    return 0


if __name__ == "__main__":
    sys.exit(main())
