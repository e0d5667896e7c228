"""
Document models — what goes into and comes out of a generation run.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict


class SourceDocument(BaseModel):
    """A Markdown file collected from the docs directory.

    Attributes:
        relative_path: Path below the docs directory, ``/``-separated.
        content:       Raw file content.
    """

    model_config = ConfigDict(frozen=True)

    relative_path: str
    content: str


class GeneratedFile(BaseModel):
    """A file produced for one agent.

    Attributes:
        path:    POSIX path relative to the project root.
        content: Full file content.
        reason:  Why this file was generated.
    """

    path: str
    content: str
    reason: str = ""
