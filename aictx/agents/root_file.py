"""
Root-file agents — a single merged Markdown file at the project root.

    claude → CLAUDE.md   (plus ``@path`` import lines)
    codex  → AGENTS.md
    gemini → GEMINI.md

These agents only support merged output.
"""

from __future__ import annotations

from pathlib import Path

from aictx.agents.base import AgentProfile, RenderOptions
from aictx.core.models.config import AgentOptions, AgentToggle, ImportFile, OutputMode
from aictx.core.models.document import GeneratedFile, SourceDocument
from aictx.core.services.cleanup import Sweeper
from aictx.core.services.formatter import merge_documents


class RootFileProfile(AgentProfile):
    """Merged-only agent writing one file at the project root."""

    modes = (OutputMode.MERGED,)

    def __init__(self, name: str, filename: str, label: str = ""):
        self._name = name
        self.filename = filename
        self.label = label or name

    @property
    def name(self) -> str:
        return self._name

    def output_paths(self) -> list[str]:
        return [self.filename]

    def render(self, documents: list[SourceDocument], options: RenderOptions) -> list[GeneratedFile]:
        content = merge_documents(documents, include_filenames=options.include_filenames)
        return [
            GeneratedFile(
                path=self.filename,
                content=content,
                reason=f"Merged {len(documents)} document(s) for {self.label}",
            )
        ]

    def cleanup(
        self,
        root: Path,
        sweeper: Sweeper,
        documents: list[SourceDocument] | None = None,
    ) -> None:
        sweeper.remove_file(root / self.filename)


class ClaudeProfile(RootFileProfile):
    """CLAUDE.md with optional ``import_files``.

    Each import is appended as::

        # <note>
        @<path>

    A docs file that is also listed as an import is not inlined.
    """

    def __init__(self) -> None:
        super().__init__("claude", "CLAUDE.md", label="Claude Code")

    def render(self, documents: list[SourceDocument], options: RenderOptions) -> list[GeneratedFile]:
        imports = list(options.import_files)
        root = options.project_root

        if imports:
            imported = {_resolve(item.path, root) for item in imports}
            documents = [
                doc
                for doc in documents
                if _resolve(str(options.docs_dir / doc.relative_path), root) not in imported
            ]

        body = merge_documents(documents, include_filenames=options.include_filenames)
        import_block = "\n\n".join(_format_import(item, root) for item in imports)
        content = "\n\n".join(part for part in (body, import_block) if part)

        return [
            GeneratedFile(
                path=self.filename,
                content=content,
                reason=f"Merged {len(documents)} document(s) and {len(imports)} import(s) for {self.label}",
            )
        ]

    def validate_setting(self, setting: AgentToggle | AgentOptions) -> list[str]:
        errors = []
        if isinstance(setting, AgentOptions):
            for item in setting.import_files:
                if not item.path.strip():
                    errors.append("claude: import_files entry with an empty path")
        return errors


def _resolve(path: str, root: Path) -> Path:
    candidate = Path(path).expanduser()
    if not candidate.is_absolute():
        candidate = root / candidate
    return candidate.resolve()


def _format_import(item: ImportFile, root: Path) -> str:
    resolved = _resolve(item.path, root)
    try:
        shown = resolved.relative_to(root.resolve()).as_posix()
    except ValueError:
        shown = resolved.as_posix()

    lines = [f"# {item.note}"] if item.note else []
    lines.append(f"@{shown}")
    return "\n".join(lines)
