"""
Configuration management for harvester.

All settings are optional; a missing config file means defaults. Example:

    paths:
      incoming: /srv/downloads/complete
      library: /srv/media
    extensions:
      video: [mkv, mp4, avi]
      garbage: [srt, sub, idx, nfo, txt, jpg, png]
    logging:
      level: INFO
      file: /var/log/harvester.log
"""

import logging
from pathlib import Path
from typing import Any, Dict, FrozenSet, Optional, Tuple

import yaml

from harvester.scanner.patterns import GARBAGE_EXTENSIONS, VIDEO_EXTENSIONS

logger = logging.getLogger(__name__)

# Default locations to search for a config file
CONFIG_SEARCH_PATHS = [
    Path("harvester.yaml"),
    Path("config.yaml"),
    Path.home() / ".harvester" / "config.yaml",
]


def load_config(config_path: Optional[Path] = None) -> Dict[str, Any]:
    """
    Load configuration from a YAML file.

    Args:
        config_path: Specific path to config file. If None, searches default locations.

    Returns:
        Dictionary containing configuration (empty if no file was found).

    Raises:
        FileNotFoundError: If config_path is given and does not exist.
        ValueError: If the file does not hold a mapping.
        yaml.YAMLError: If the file is not valid YAML.
    """
    path_to_load = None

    if config_path:
        if config_path.exists():
            path_to_load = config_path
        else:
            raise FileNotFoundError(f"Config file not found: {config_path}")
    else:
        for path in CONFIG_SEARCH_PATHS:
            if path.exists():
                path_to_load = path
                break

    if not path_to_load:
        logger.debug("No config file found, using defaults")
        return {}

    logger.info("Loading config from %s", path_to_load)

    with open(path_to_load, "r", encoding="utf-8") as f:
        config = yaml.safe_load(f)

    if config is None:
        return {}
    if not isinstance(config, dict):
        raise ValueError(f"Config file must contain a mapping: {path_to_load}")
    return config


def _section(config: Dict[str, Any], name: str) -> Dict[str, Any]:
    section = config.get(name) or {}
    if not isinstance(section, dict):
        raise ValueError(f"Config section '{name}' must be a mapping.")
    return section


def _extension_set(value: Any, key: str, default: FrozenSet[str]) -> FrozenSet[str]:
    if value is None:
        return default
    if not isinstance(value, list):
        raise ValueError(f"Config 'extensions.{key}' must be a list.")
    return frozenset(str(ext).lower().lstrip(".") for ext in value)


def get_extensions(config: Dict[str, Any]) -> Tuple[FrozenSet[str], FrozenSet[str]]:
    """
    Get the video and garbage extension sets from config.

    Args:
        config: Configuration dictionary

    Returns:
        Tuple of (video_extensions, garbage_extensions), lower-case without dots
    """
    section = _section(config, "extensions")
    video = _extension_set(section.get("video"), "video", VIDEO_EXTENSIONS)
    garbage = _extension_set(section.get("garbage"), "garbage", GARBAGE_EXTENSIONS)

    overlap = video & garbage
    if overlap:
        raise ValueError(f"Extensions listed as both video and garbage: {sorted(overlap)}")

    return video, garbage


def get_paths(config: Dict[str, Any]) -> Tuple[Optional[Path], Optional[Path]]:
    """
    Get the default incoming and library directories from config.

    Returns:
        Tuple of (incoming, library); either may be None
    """
    section = _section(config, "paths")
    incoming = section.get("incoming")
    library = section.get("library")
    return (
        Path(incoming).expanduser() if incoming else None,
        Path(library).expanduser() if library else None,
    )


def get_logging_config(config: Dict[str, Any]) -> Dict[str, Any]:
    """
    Get the logging settings from config.

    Returns:
        Dictionary with "level" (default "INFO") and "file" (default None)
    """
    section = _section(config, "logging")
    return {
        "level": section.get("level", "INFO"),
        "file": section.get("file"),
    }
