"""
Init use case — write a starter ai-context.yaml and docs directory.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path

from aictx.core.config.loader import DEFAULT_CONFIG_FILE, project_root, save_config
from aictx.core.models.config import default_config
from aictx.core.services.collector import resolve_under_root

logger = logging.getLogger(__name__)


@dataclass
class InitResult:
    """Result of an init run."""

    config_path: Path
    created: bool = False
    docs_dir: Path | None = None
    docs_dir_created: bool = False
    error: str | None = None

    def to_dict(self) -> dict:
        return {
            "config_path": str(self.config_path),
            "created": self.created,
            "docs_dir": str(self.docs_dir) if self.docs_dir else None,
            "docs_dir_created": self.docs_dir_created,
            "error": self.error,
        }


def init_config(config_path: Path | None = None) -> InitResult:
    """Create the default configuration unless one already exists.

    Args:
        config_path: Where to write (default: ./ai-context.yaml).

    Returns:
        InitResult. ``created`` is False when the file was already there.
    """
    path = config_path or Path.cwd() / DEFAULT_CONFIG_FILE
    result = InitResult(config_path=path)

    if path.exists():
        logger.info("Config already exists at %s", path)
        return result

    config = default_config()
    try:
        save_config(config, path)
        result.created = True

        docs_dir = resolve_under_root(project_root(path), config.base_docs_dir)
        result.docs_dir = docs_dir
        if not docs_dir.is_dir():
            docs_dir.mkdir(parents=True, exist_ok=True)
            result.docs_dir_created = True
    except OSError as e:
        result.error = f"Failed to initialize {path}: {e}"
        return result

    logger.info("Created %s", path)
    return result
