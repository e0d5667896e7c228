"""
Artifact writer — flush generated files to disk below the project root.
"""

from __future__ import annotations

import logging
from pathlib import Path

from aictx.core.models.document import GeneratedFile

logger = logging.getLogger(__name__)


def write_generated_files(project_root: Path, files: list[GeneratedFile]) -> list[Path]:
    """Write each file, creating parent directories as needed.

    Args:
        project_root: Directory the relative ``GeneratedFile.path`` values hang off.
        files: Files to write, in order.

    Returns:
        Absolute paths written.

    Raises:
        OSError: On any write failure (the remaining files are not written).
    """
    written: list[Path] = []
    for generated in files:
        target = project_root / generated.path
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_text(generated.content, encoding="utf-8")
        logger.debug("Wrote %s (%d bytes)", generated.path, len(generated.content))
        written.append(target)
    return written
