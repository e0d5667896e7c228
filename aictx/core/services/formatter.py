"""
Content formatter — turn collected documents into merged or split content.

Agent-specific paths, extensions and wrappers are applied by the agent
profiles; this module only handles the shared text layout.
"""

from __future__ import annotations

from aictx.core.models.document import SourceDocument

_SECTION_SEPARATOR = "\n\n"


def merge_documents(
    documents: list[SourceDocument],
    *,
    include_filenames: bool = False,
) -> str:
    """Concatenate documents into one string.

    Each body is stripped. With ``include_filenames`` every document is
    introduced by ``# <relative_path>``. Sections are separated by one
    blank line and the result is stripped.
    """
    sections: list[str] = []
    for doc in documents:
        body = doc.content.strip()
        if include_filenames:
            heading = f"# {doc.relative_path}"
            sections.append(f"{heading}{_SECTION_SEPARATOR}{body}" if body else heading)
        elif body:
            sections.append(body)

    return _SECTION_SEPARATOR.join(sections).strip()


def split_documents(documents: list[SourceDocument]) -> list[tuple[str, str]]:
    """Return ``(relative_path, content)`` pairs in collected order."""
    return [(doc.relative_path, doc.content) for doc in documents]


def split_output_name(relative_path: str, *, separator: str = "_", suffix: str = ".md") -> str:
    """Derive a flat output filename from a source path.

    >>> split_output_name("guides/setup.md", suffix=".mdc")
    'guides_setup.mdc'
    >>> split_output_name("guides/setup.md", separator="-")
    'guides-setup.md'
    """
    stem = relative_path[: -len(".md")] if relative_path.endswith(".md") else relative_path
    flat = stem.replace("/", separator).replace("\\", separator)
    return f"{flat}{suffix}"
