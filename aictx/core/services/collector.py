"""
Content collector — gather Markdown files from the docs directory.

Collection is best-effort: a missing directory yields no documents and
an unreadable file is skipped.  Callers that need the directory to
exist use ``require_docs_dir`` first.
"""

from __future__ import annotations

import logging
from pathlib import Path

from aictx.core.models.document import SourceDocument

logger = logging.getLogger(__name__)

MARKDOWN_SUFFIX = ".md"


class DocsDirectoryMissing(Exception):
    """Raised when the configured docs directory does not exist."""

    def __init__(self, path: Path, setting: str = "base_docs_dir"):
        self.path = path
        super().__init__(
            f"Documentation directory does not exist: {path}. "
            f"Create it or change '{setting}' in the configuration."
        )


def resolve_under_root(project_root: Path, value: str) -> Path:
    """Resolve a configured path (docs dir or import file) against the project root."""
    path = Path(value).expanduser()
    if not path.is_absolute():
        path = project_root / path
    return path


def require_docs_dir(path: Path) -> Path:
    """Return ``path`` if it is a directory, else raise DocsDirectoryMissing."""
    if not path.is_dir():
        raise DocsDirectoryMissing(path)
    return path


def collect_documents(base_dir: Path) -> list[SourceDocument]:
    """Collect every ``.md`` file below ``base_dir``, sorted by relative path.

    Args:
        base_dir: Root of the documentation tree.

    Returns:
        SourceDocuments with ``/``-separated relative paths. Empty if the
        directory does not exist.
    """
    if not base_dir.is_dir():
        logger.debug("Docs directory %s does not exist, nothing to collect", base_dir)
        return []

    documents: list[SourceDocument] = []
    for path in base_dir.rglob("*"):
        if path.suffix != MARKDOWN_SUFFIX or not path.is_file():
            continue

        relative = path.relative_to(base_dir).as_posix()
        try:
            content = path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            logger.warning("Skipping %s: %s", relative, e)
            continue

        documents.append(SourceDocument(relative_path=relative, content=content))

    documents.sort(key=lambda doc: doc.relative_path)
    logger.debug("Collected %d document(s) from %s", len(documents), base_dir)
    return documents
