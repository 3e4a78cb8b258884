"""Configuration persistence for the wallpaper studio.

Settings are stored as JSON in the user's home directory.
"""
from __future__ import annotations

import json
import logging
from dataclasses import asdict, dataclass, field
from pathlib import Path
from typing import Optional, Tuple

from wallpaper_studio.models.image_model import DEFAULT_TARGET_HEIGHT, DEFAULT_TARGET_WIDTH
from wallpaper_studio.services.export_service import DEFAULT_PREFIX

logger = logging.getLogger(__name__)

CONFIG_FILE = Path.home() / ".pixel_wallpaper_studio.json"


@dataclass
class WallpaperSettings:
    """User-adjustable settings."""

    target_width: int = DEFAULT_TARGET_WIDTH  # px
    target_height: int = DEFAULT_TARGET_HEIGHT  # px
    processing_delay_ms: int = 0  # pause before rendering, UI pacing only
    output_dir: str = field(default_factory=lambda: str(Path.home() / "Pictures"))
    filename_prefix: str = DEFAULT_PREFIX


def _positive_int(value: object, default: int) -> int:
    if isinstance(value, bool) or not isinstance(value, int) or value <= 0:
        return default
    return value


class ConfigManager:
    """Handles loading and saving of wallpaper settings."""

    def __init__(self, config_path: Path = CONFIG_FILE):
        """Initialize config manager.

        Args:
            config_path: Path to configuration file (defaults to ~/.pixel_wallpaper_studio.json)
        """
        self.config_path = config_path

    def load(self) -> WallpaperSettings:
        """Load settings from file, returning defaults if not found.

        Invalid individual values fall back to their defaults.
        """
        settings = WallpaperSettings()

        if not self.config_path.exists():
            return settings

        try:
            with open(self.config_path, "r", encoding="utf-8") as f:
                data = json.load(f)
        except (OSError, json.JSONDecodeError) as e:
            logger.warning(f"Could not load config file {self.config_path}: {e}")
            return settings

        if not isinstance(data, dict):
            logger.warning(f"Ignoring config file {self.config_path}: expected a JSON object")
            return settings

        settings.target_width = _positive_int(data.get("target_width"), settings.target_width)
        settings.target_height = _positive_int(data.get("target_height"), settings.target_height)
        delay = data.get("processing_delay_ms", settings.processing_delay_ms)
        if isinstance(delay, int) and not isinstance(delay, bool) and delay >= 0:
            settings.processing_delay_ms = delay
        if isinstance(data.get("output_dir"), str) and data["output_dir"]:
            settings.output_dir = data["output_dir"]
        if isinstance(data.get("filename_prefix"), str) and data["filename_prefix"]:
            settings.filename_prefix = data["filename_prefix"]

        logger.info(f"Loaded configuration from {self.config_path}")
        return settings

    def save(self, settings: WallpaperSettings) -> Tuple[bool, Optional[str]]:
        """Save settings to file.

        Returns:
            Tuple of (success: bool, error_message: Optional[str])
        """
        try:
            with open(self.config_path, "w", encoding="utf-8") as f:
                json.dump(asdict(settings), f, indent=2)
            return True, None
        except OSError as e:
            logger.error(f"Could not save config file {self.config_path}: {e}")
            return False, str(e)
