"""
Split-directory agents — one file per source document in a directory,
optionally with a single merged file as the alternative mode.

Subclasses set the paths and override ``wrap_merged`` / ``wrap_split``
to add front matter.
"""

from __future__ import annotations

from pathlib import Path

from aictx.agents.base import AgentProfile, RenderOptions
from aictx.core.models.config import AgentOptions, AgentToggle, OutputMode
from aictx.core.models.document import GeneratedFile, SourceDocument
from aictx.core.services.cleanup import Sweeper
from aictx.core.services.formatter import merge_documents, split_documents, split_output_name


class SplitDirProfile(AgentProfile):
    """Agent whose split output lives in ``split_dir``.

    Attributes:
        merged_path:  Merged-mode file, or None for split-only agents.
        split_dir:    Directory holding split files.
        split_suffix: Suffix of every managed split file.
        separator:    Replacement for ``/`` in flattened source paths.
        containers:   Parent directories removed once they are empty.
    """

    merged_path: str | None = None
    split_dir: str = ""
    split_suffix: str = ".md"
    separator: str = "_"
    containers: tuple[str, ...] = ()

    def output_paths(self) -> list[str]:
        paths = []
        if self.merged_path and self.supports(OutputMode.MERGED):
            paths.append(self.merged_path)
        if self.supports(OutputMode.SPLIT):
            paths.append(f"{self.split_dir}/*{self.split_suffix}")
        return paths

    def is_managed(self, path: Path) -> bool:
        return path.name.endswith(self.split_suffix)

    def output_name(self, relative_path: str) -> str:
        """Flat split filename for a source path."""
        return split_output_name(relative_path, separator=self.separator, suffix=self.split_suffix)

    # ── Rendering ───────────────────────────────────────────────

    def render(self, documents: list[SourceDocument], options: RenderOptions) -> list[GeneratedFile]:
        mode = self.resolve_mode(options.mode)
        if mode == OutputMode.MERGED:
            return self._render_merged(documents, options)
        return self._render_split(documents, options)

    def _render_merged(self, documents: list[SourceDocument], options: RenderOptions) -> list[GeneratedFile]:
        if self.merged_path is None:
            raise ValueError(f"{self.name} has no merged output")
        body = merge_documents(documents, include_filenames=options.include_filenames)
        return [
            GeneratedFile(
                path=self.merged_path,
                content=self.wrap_merged(body),
                reason=f"Merged {len(documents)} document(s) for {self.label}",
            )
        ]

    def _render_split(self, documents: list[SourceDocument], options: RenderOptions) -> list[GeneratedFile]:
        files = []
        sources: dict[str, str] = {}
        for relative_path, content in split_documents(documents):
            name = self.output_name(relative_path)
            if name in sources:
                raise ValueError(
                    f"{relative_path} and {sources[name]} both map to {self.split_dir}/{name}"
                )
            sources[name] = relative_path
            files.append(
                GeneratedFile(
                    path=f"{self.split_dir}/{name}",
                    content=self.wrap_split(relative_path, content, options),
                    reason=f"Split from {relative_path}",
                )
            )
        return files

    def wrap_merged(self, content: str) -> str:
        return content

    def wrap_split(self, relative_path: str, content: str, options: RenderOptions) -> str:
        return content

    # ── Filesystem ──────────────────────────────────────────────

    def prepare(self, root: Path, mode: OutputMode, sweeper: Sweeper) -> None:
        split_dir = root / self.split_dir
        if self.resolve_mode(mode) == OutputMode.SPLIT:
            if self.merged_path:
                sweeper.remove_file(root / self.merged_path)
            sweeper.remove_managed(split_dir, self.is_managed)
        else:
            sweeper.remove_managed(split_dir, self.is_managed)
            sweeper.prune(split_dir, *(root / c for c in self.containers))

    def cleanup(
        self,
        root: Path,
        sweeper: Sweeper,
        documents: list[SourceDocument] | None = None,
    ) -> None:
        split_dir = root / self.split_dir
        if self.merged_path:
            sweeper.remove_file(root / self.merged_path)
        sweeper.remove_managed(split_dir, self.is_managed)
        sweeper.prune(split_dir, *(root / c for c in self.containers))

    def validate_setting(self, setting: AgentToggle | AgentOptions) -> list[str]:
        if not isinstance(setting, AgentOptions):
            return []
        errors = []
        for index, rule in enumerate(setting.rules, start=1):
            if not rule.file_patterns:
                errors.append(f"{self.name}: split_config rule #{index} has no file_patterns")
        return errors
