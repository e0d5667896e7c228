"""
Configuration loader — reads ai-context.yaml into domain models.

This is the primary entry point for loading configuration.
It reads YAML, validates against Pydantic schemas, checks required
fields, and returns a typed ``AppConfig``.
"""

from __future__ import annotations

import logging
from pathlib import Path

import yaml
from pydantic import ValidationError

from aictx.core.models.config import AppConfig

logger = logging.getLogger(__name__)

# Default config filename
DEFAULT_CONFIG_FILE = "ai-context.yaml"


class ConfigError(Exception):
    """Raised when configuration is invalid or missing."""


class ConfigNotFound(ConfigError):
    """The config file does not exist."""


class ConfigParseError(ConfigError):
    """The config file is not valid YAML or does not match the schema."""


class ConfigValidationError(ConfigError):
    """The config parsed but required fields are empty."""

    def __init__(self, errors: list[str]):
        self.errors = errors
        super().__init__("Invalid configuration: " + "; ".join(errors))


def find_config_file(start_dir: Path | None = None) -> Path | None:
    """Search for ai-context.yaml starting from the given directory, walking up.

    Args:
        start_dir: Directory to start searching from (default: cwd).

    Returns:
        Path to ai-context.yaml, or None if not found.
    """
    current = (start_dir or Path.cwd()).resolve()

    for _ in range(20):  # safety limit
        candidate = current / DEFAULT_CONFIG_FILE
        if candidate.is_file():
            return candidate
        parent = current.parent
        if parent == current:
            break  # filesystem root
        current = parent

    return None


def resolve_config_path(path: Path | None = None) -> Path:
    """Return an explicit path, or search upward for the default file.

    Raises:
        ConfigNotFound: If no path was given and none was found.
    """
    if path is not None:
        return path

    found = find_config_file()
    if found is None:
        raise ConfigNotFound(
            f"No {DEFAULT_CONFIG_FILE} found. "
            "Run 'aictx init' to create one, or specify --config."
        )
    return found


def load_config(path: Path | None = None) -> AppConfig:
    """Load and validate configuration.

    Args:
        path: Explicit path to ai-context.yaml. If None, searches upward.

    Returns:
        Validated AppConfig.

    Raises:
        ConfigNotFound: The file is missing.
        ConfigParseError: Malformed YAML or schema mismatch.
        ConfigValidationError: Required fields are empty.
    """
    path = resolve_config_path(path)

    if not path.is_file():
        raise ConfigNotFound(f"Config file not found: {path}")

    logger.debug("Loading config from %s", path)

    try:
        raw = path.read_text(encoding="utf-8")
    except OSError as e:
        raise ConfigError(f"Cannot read {path}: {e}") from e

    try:
        data = yaml.safe_load(raw)
    except yaml.YAMLError as e:
        raise ConfigParseError(f"Invalid YAML in {path}: {e}") from e

    if not isinstance(data, dict):
        raise ConfigParseError(
            f"Expected a YAML mapping in {path}, got {type(data).__name__}"
        )

    try:
        config = AppConfig.model_validate(data)
    except ValidationError as e:
        raise ConfigParseError(f"Invalid configuration in {path}: {e}") from e

    errors = validate_required_fields(config)
    if errors:
        raise ConfigValidationError(errors)

    logger.info(
        "Loaded config %s (mode=%s, %d agent(s) enabled)",
        path,
        config.output_mode.value,
        len(config.enabled_agents()),
    )
    return config


def validate_required_fields(config: AppConfig) -> list[str]:
    """Check fields that must be present and non-empty."""
    errors: list[str] = []
    if not config.version.strip():
        errors.append("'version' must not be empty")
    if not config.base_docs_dir.strip():
        errors.append("'base_docs_dir' must not be empty")
    return errors


def save_config(config: AppConfig, path: Path) -> None:
    """Write configuration as YAML, creating parent directories."""
    path.parent.mkdir(parents=True, exist_ok=True)
    content = yaml.dump(
        config.to_yaml_data(),
        default_flow_style=False,
        sort_keys=False,
        allow_unicode=True,
    )
    path.write_text(content, encoding="utf-8")
    logger.debug("Wrote config to %s", path)


def project_root(config_path: Path) -> Path:
    """Get the project root directory from a config file path."""
    return config_path.parent.resolve()
