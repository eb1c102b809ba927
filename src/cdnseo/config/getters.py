"""Configuration getter functions."""

import logging
import os
from pathlib import Path
from typing import Any

from .env_loader import load_global_config, load_project_config

logger = logging.getLogger(__name__)


def get_config(key: str, project_dir: Path | None = None, default: Any = None) -> Any:
    """
    Get configuration value with priority:
    1. Environment variable
    2. Project .env file
    3. Global config file
    4. Default value

    Args:
        key: Configuration key
        project_dir: Optional project directory
        default: Default value if not found

    Returns:
        Configuration value or default
    """
    env_value = os.environ.get(key)
    if env_value:
        return env_value

    project_config = load_project_config(project_dir)
    if key in project_config:
        return project_config[key]

    global_config = load_global_config()
    if key in global_config:
        return global_config[key]

    return default


def get_int(key: str, default: int, project_dir: Path | None = None, minimum: int = 0) -> int:
    """Integer setting; values that do not parse or fall below ``minimum`` use the default."""
    raw = get_config(key, project_dir, default)
    try:
        value = int(raw)
    except (TypeError, ValueError):
        logger.warning("Ignoring %s=%r: not an integer", key, raw)
        return default
    if value < minimum:
        logger.warning("Ignoring %s=%r: must be at least %s", key, raw, minimum)
        return default
    return value


def get_float(key: str, default: float, project_dir: Path | None = None) -> float:
    """Positive float setting with fallback default."""
    raw = get_config(key, project_dir, default)
    try:
        value = float(raw)
    except (TypeError, ValueError):
        logger.warning("Ignoring %s=%r: not a number", key, raw)
        return default
    if value <= 0:
        logger.warning("Ignoring %s=%r: must be positive", key, raw)
        return default
    return value


def get_bool(key: str, default: bool, project_dir: Path | None = None) -> bool:
    raw = get_config(key, project_dir, None)
    if raw is None:
        return default
    if isinstance(raw, bool):
        return raw
    return str(raw).strip().lower() in {"1", "true", "yes", "on"}
