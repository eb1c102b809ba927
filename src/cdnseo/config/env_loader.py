"""Environment variable and configuration file loading."""

import tempfile
from pathlib import Path
from typing import Any

import yaml

PROJECT_MARKER = ".cdnseo"


def load_env_file(env_path: Path) -> dict[str, str]:
    """Load environment variables from .env file."""
    env_vars = {}
    if env_path.exists():
        with open(env_path) as f:
            for line in f:
                line = line.strip()
                if line and not line.startswith("#") and "=" in line:
                    key, value = line.split("=", 1)
                    value = value.strip().strip("\"'")
                    env_vars[key.strip()] = value
    return env_vars


def get_global_config_path() -> Path:
    return Path.home() / PROJECT_MARKER / "config.yml"


def load_global_config() -> dict[str, Any]:
    """Load global configuration from ~/.cdnseo/config.yml."""
    config_path = get_global_config_path()
    if config_path.exists():
        with open(config_path) as f:
            return yaml.safe_load(f) or {}
    return {}


def find_project_dir(start: Path | None = None) -> Path | None:
    """Walk up from ``start`` (default: cwd) to the nearest .cdnseo/.env.

    Stops at the home directory, whose .cdnseo holds global config, and at
    the system temp root.
    """
    current = (start or Path.cwd()).resolve()
    home = Path.home().resolve()
    try:
        temp_root = Path(tempfile.gettempdir()).resolve()
    except OSError:
        temp_root = None
    while current != current.parent:
        if current == home or current == temp_root:
            return None
        if (current / PROJECT_MARKER / ".env").is_file():
            return current
        current = current.parent
    return None


def get_project_env_path(project_dir: Path) -> Path:
    return project_dir / PROJECT_MARKER / ".env"


def load_project_config(project_dir: Path | None = None) -> dict[str, str]:
    """Load project-specific configuration from .cdnseo/.env."""
    if project_dir is None:
        project_dir = find_project_dir()
    if project_dir:
        return load_env_file(get_project_env_path(project_dir))
    return {}
