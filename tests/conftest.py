"""
Shared test fixtures and configuration.
"""

import logging
import textwrap
from pathlib import Path
from typing import Callable

import pytest


@pytest.fixture
def docs_dir(tmp_path: Path) -> Path:
    """A docs tree with a top-level file and a nested one."""
    docs = tmp_path / "ai-context"
    (docs / "b").mkdir(parents=True)
    (docs / "a.md").write_text("X")
    (docs / "b" / "c.md").write_text("Y")
    return docs


@pytest.fixture
def write_config(tmp_path: Path) -> Callable[[str], Path]:
    """Write ai-context.yaml into tmp_path from a (dedented) YAML string."""

    def _write(content: str) -> Path:
        path = tmp_path / "ai-context.yaml"
        path.write_text(textwrap.dedent(content))
        return path

    return _write


@pytest.fixture
def restore_logging():
    """Put the root logger back the way it was after a test reconfigures it."""
    root = logging.getLogger()
    handlers = root.handlers[:]
    level = root.level
    yield root
    for handler in root.handlers:
        if handler not in handlers:
            handler.close()
    root.handlers[:] = handlers
    root.setLevel(level)
