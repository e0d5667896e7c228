"""
Agent profile base — the contract between the generator and each agent.

Every supported coding assistant is one ``AgentProfile`` subclass.  The
generator only talks to profiles through this interface, never through
agent-specific branches.

To add an agent:
    1. Subclass AgentProfile
    2. Implement name, render, output_paths, cleanup
       (and prepare when the agent supports both modes)
    3. Register it in ``registry.default_registry``
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from fnmatch import fnmatchcase
from pathlib import Path
from typing import Any

import yaml

from aictx.core.models.config import (
    AgentOptions,
    AgentToggle,
    AppConfig,
    ImportFile,
    OutputMode,
    SplitRule,
)
from aictx.core.models.document import GeneratedFile, SourceDocument
from aictx.core.services.cleanup import Sweeper
from aictx.core.services.collector import resolve_under_root


@dataclass(frozen=True)
class RenderOptions:
    """Everything a profile needs to render one agent's files."""

    mode: OutputMode = OutputMode.MERGED
    include_filenames: bool = False
    rules: tuple[SplitRule, ...] = ()
    import_files: tuple[ImportFile, ...] = ()
    project_root: Path = Path(".")
    docs_dir: Path = Path(".")

    @classmethod
    def from_config(
        cls,
        config: AppConfig,
        agent_id: str,
        project_root: Path,
        mode: OutputMode | None = None,
    ) -> RenderOptions:
        options = config.agent_options(agent_id)
        return cls(
            mode=mode or config.effective_output_mode(agent_id),
            include_filenames=config.effective_include_filenames(agent_id),
            rules=tuple(options.rules) if options else (),
            import_files=tuple(options.import_files) if options else (),
            project_root=project_root,
            docs_dir=resolve_under_root(project_root, config.effective_base_docs_dir(agent_id)),
        )


class AgentProfile(ABC):
    """Abstract base class for agent output profiles.

    ``render`` is pure: documents in, GeneratedFiles out.  Filesystem
    changes happen only in ``prepare`` and ``cleanup``, both of which
    go through a Sweeper.
    """

    label: str = ""
    modes: tuple[OutputMode, ...] = (OutputMode.MERGED, OutputMode.SPLIT)

    @property
    @abstractmethod
    def name(self) -> str:
        """The agent identifier used in config (e.g. 'claude', 'cursor')."""

    def supports(self, mode: OutputMode) -> bool:
        return mode in self.modes

    def resolve_mode(self, requested: OutputMode) -> OutputMode:
        """The requested mode if supported, otherwise the profile's own mode."""
        return requested if self.supports(requested) else self.modes[0]

    @abstractmethod
    def render(self, documents: list[SourceDocument], options: RenderOptions) -> list[GeneratedFile]:
        """Produce the files for this agent. No I/O."""

    @abstractmethod
    def output_paths(self) -> list[str]:
        """Managed output locations, for listings."""

    def prepare(self, root: Path, mode: OutputMode, sweeper: Sweeper) -> None:
        """Remove artifacts left by the other output mode before writing."""

    @abstractmethod
    def cleanup(
        self,
        root: Path,
        sweeper: Sweeper,
        documents: list[SourceDocument] | None = None,
    ) -> None:
        """Remove every artifact this agent may have generated.

        ``documents`` are the agent's current sources. Profiles whose output
        directory also holds hand-written files only remove names derived
        from them.
        """

    def validate_setting(self, setting: AgentToggle | AgentOptions) -> list[str]:
        """Agent-specific configuration errors. Empty when valid."""
        return []

    def info(self) -> dict[str, Any]:
        return {
            "name": self.name,
            "label": self.label,
            "modes": [m.value for m in self.modes],
            "outputs": self.output_paths(),
        }

    def __repr__(self) -> str:
        return f"<{self.__class__.__name__} name={self.name!r}>"


# ── Shared helpers ──────────────────────────────────────────────


def front_matter(fields: dict[str, Any]) -> str:
    """Render a YAML front matter block, keys in insertion order."""
    body = yaml.dump(fields, default_flow_style=False, sort_keys=False, allow_unicode=True)
    return f"---\n{body}---\n"


def with_front_matter(fields: dict[str, Any], content: str) -> str:
    return f"{front_matter(fields)}\n{content}"


def match_rule(relative_path: str, rules: tuple[SplitRule, ...] | list[SplitRule]) -> SplitRule | None:
    """First rule with a file pattern matching the path or its basename."""
    basename = relative_path.rsplit("/", 1)[-1]
    for rule in rules:
        for pattern in rule.file_patterns:
            if fnmatchcase(relative_path, pattern) or fnmatchcase(basename, pattern):
                return rule
    return None
