"""Configuration management for framecodec."""

import os
from pathlib import Path

import yaml

from . import log
from .detector import TargetPlatform
from .metadata import ImageRotation

logger = log.get_logger()

DEFAULT_CONFIG = """# Target detector platform: "auto", "android" (NV21) or "ios" (BGRA8888)
platform: auto

# Rotation of stills coming from the camera, in degrees clockwise
rotation: 90

# Write NV21 bytes in rotated order instead of passing rotation as metadata
bake_rotation: false

# Expand RGB stills with an opaque alpha channel for BGRA8888 output
add_alpha: true

# Reject stills with odd width or height for NV21 output
require_even: true

# Log level: DEBUG, INFO, WARNING, ERROR
log_level: INFO
"""


class Config:
    """Conversion settings."""

    def __init__(
        self,
        platform: str = "auto",
        rotation: int = 90,
        bake_rotation: bool = False,
        add_alpha: bool = True,
        require_even: bool = True,
        log_level: str = "INFO",
    ):
        self.platform = platform
        self.rotation = rotation
        self.bake_rotation = bake_rotation
        self.add_alpha = add_alpha
        self.require_even = require_even
        self.log_level = log_level

    @classmethod
    def load(cls, config_path: str | None = None) -> "Config":
        """Load configuration from a YAML file.

        Args:
            config_path: Path to config file. If None, looks for config.yml
                        in common locations.

        Returns:
            Config instance with loaded values.
        """
        if config_path is not None and not os.path.exists(config_path):
            logger.warning("config file not found, using defaults", path=config_path)
            return cls()

        if config_path is None:
            search_paths = [
                Path("config.yml"),
                Path(__file__).parent.parent / "config.yml",
                Path.home() / ".framecodec" / "config.yml",
            ]
            for path in search_paths:
                if path.exists():
                    config_path = str(path)
                    break

        if config_path and os.path.exists(config_path):
            with open(config_path, "r", encoding="utf-8") as f:
                data = yaml.safe_load(f) or {}
            if not isinstance(data, dict):
                raise ValueError(f"Config file {config_path} must contain a mapping of settings")
            return cls(
                platform=str(data.get("platform", "auto")),
                rotation=int(data.get("rotation", 90)),
                bake_rotation=bool(data.get("bake_rotation", False)),
                add_alpha=bool(data.get("add_alpha", True)),
                require_even=bool(data.get("require_even", True)),
                log_level=str(data.get("log_level", "INFO")),
            )

        config = cls()
        config._create_default_config()
        return config

    def _create_default_config(self) -> None:
        """Create a default config file in the user's home directory."""
        config_dir = Path.home() / ".framecodec"
        config_path = config_dir / "config.yml"

        if config_path.exists():
            return

        config_dir.mkdir(parents=True, exist_ok=True)
        with open(config_path, "w", encoding="utf-8") as f:
            f.write(DEFAULT_CONFIG)

    def target_platform(self) -> TargetPlatform:
        """Resolve the configured platform name."""
        return TargetPlatform.from_name(self.platform)

    def image_rotation(self) -> ImageRotation:
        """Resolve the configured rotation angle."""
        return ImageRotation.from_degrees(self.rotation)
