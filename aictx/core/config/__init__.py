"""Configuration loading — ai-context.yaml ↔ AppConfig."""

from aictx.core.config.loader import (
    DEFAULT_CONFIG_FILE,
    ConfigError,
    ConfigNotFound,
    ConfigParseError,
    ConfigValidationError,
    find_config_file,
    load_config,
    project_root,
    save_config,
)

__all__ = [
    "DEFAULT_CONFIG_FILE",
    "ConfigError",
    "ConfigNotFound",
    "ConfigParseError",
    "ConfigValidationError",
    "find_config_file",
    "load_config",
    "project_root",
    "save_config",
]
