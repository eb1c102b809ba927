"""
Configuration management for cdnseo.

Supports multiple configuration sources in order of priority:
1. Command line options (applied by the CLI)
2. Environment variables
3. Project .env file (.cdnseo/.env)
4. Global config file (~/.cdnseo/config.yml)
5. Default values (lowest priority)
"""

from .env_loader import (
    PROJECT_MARKER,
    find_project_dir,
    get_global_config_path,
    get_project_env_path,
    load_env_file,
    load_global_config,
    load_project_config,
)
from .getters import get_bool, get_config, get_float, get_int
from .settings import METHODS, AuditSettings, load_settings, normalize_method

__all__ = [
    # env_loader
    "PROJECT_MARKER",
    "find_project_dir",
    "get_global_config_path",
    "get_project_env_path",
    "load_env_file",
    "load_global_config",
    "load_project_config",
    # getters
    "get_bool",
    "get_config",
    "get_float",
    "get_int",
    # settings
    "METHODS",
    "AuditSettings",
    "load_settings",
    "normalize_method",
]
