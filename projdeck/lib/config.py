"""
Configuration loader for projdeck.

Loads projdeck.yaml. Every key is optional; a missing or malformed file
yields the defaults.

Example:

    notifications:
      display_seconds: 3.0
      exit_seconds: 0.3
    display:
      date_format: "%d/%m/%Y"
    storage:
      path: ~/.local/share/projdeck/projects.json
    seed_demo: true
    log_level: WARNING
"""

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

import yaml

from projdeck.board.view import DEFAULT_DATE_FORMAT
from projdeck.notifications import DISPLAY_SECONDS, EXIT_SECONDS

logger = logging.getLogger(__name__)

CONFIG_FILENAME = "projdeck.yaml"
VALID_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")


@dataclass
class BoardConfig:
    """Settings from projdeck.yaml"""
    display_seconds: float = DISPLAY_SECONDS
    exit_seconds: float = EXIT_SECONDS
    date_format: str = DEFAULT_DATE_FORMAT
    storage_path: Optional[Path] = None    # None keeps projects in memory
    seed_demo: bool = True
    log_level: str = "WARNING"


def find_config(explicit: Optional[Path] = None, cwd: Optional[Path] = None) -> Optional[Path]:
    """Return the config file to use: explicit path, else ./projdeck.yaml if present."""
    if explicit is not None:
        return explicit
    candidate = (cwd or Path.cwd()) / CONFIG_FILENAME
    return candidate if candidate.exists() else None


def _section(data: dict, name: str) -> dict:
    value = data.get(name) or {}
    if not isinstance(value, dict):
        logger.warning(f"Ignoring '{name}' in config: expected a mapping")
        return {}
    return value


def load_board_config(config_path: Optional[Path]) -> BoardConfig:
    """Load projdeck.yaml and return BoardConfig.

    If config_path is None or the file doesn't exist, returns defaults.
    """
    if config_path is None or not config_path.exists():
        return BoardConfig()

    try:
        data = yaml.safe_load(config_path.read_text()) or {}
        if not isinstance(data, dict):
            raise ValueError("top level must be a mapping")

        notifications = _section(data, "notifications")
        display = _section(data, "display")
        storage = _section(data, "storage")

        storage_path = storage.get("path")
        log_level = str(data.get("log_level", "WARNING")).upper()
        if log_level not in VALID_LOG_LEVELS:
            logger.warning(f"Unknown log_level '{log_level}', using 'WARNING'")
            log_level = "WARNING"

        seed_demo = data.get("seed_demo", True)
        if not isinstance(seed_demo, bool):
            logger.warning(f"Ignoring seed_demo {seed_demo!r} in config: expected true or false")
            seed_demo = True

        return BoardConfig(
            display_seconds=float(notifications.get("display_seconds", DISPLAY_SECONDS)),
            exit_seconds=float(notifications.get("exit_seconds", EXIT_SECONDS)),
            date_format=str(display.get("date_format", DEFAULT_DATE_FORMAT)),
            storage_path=Path(storage_path).expanduser() if storage_path else None,
            seed_demo=seed_demo,
            log_level=log_level,
        )
    except (yaml.YAMLError, ValueError, TypeError) as e:
        logger.warning(f"Failed to parse {config_path}: {e}")
        return BoardConfig()
