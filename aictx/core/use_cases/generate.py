"""
Generate use case — write context files for every enabled agent.

Loads config, collects documents once per docs directory, renders and
writes each agent's files, then cleans up after disabled agents.
A failure in one agent is recorded on its result and does not stop
the others.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path

from aictx.agents.base import AgentProfile, RenderOptions
from aictx.agents.registry import AgentRegistry, default_registry
from aictx.core.config.loader import ConfigError, load_config, project_root, resolve_config_path
from aictx.core.models.config import AppConfig, OutputMode
from aictx.core.models.document import SourceDocument
from aictx.core.services.cleanup import CleanupReport, Sweeper, cleanup_disabled_agents
from aictx.core.services.collector import (
    DocsDirectoryMissing,
    collect_documents,
    require_docs_dir,
    resolve_under_root,
)
from aictx.core.services.writer import write_generated_files

logger = logging.getLogger(__name__)


@dataclass
class AgentResult:
    """Outcome of generating one agent's files."""

    name: str
    mode: OutputMode | None = None
    files: list[str] = field(default_factory=list)
    removed: list[str] = field(default_factory=list)
    error: str | None = None

    @property
    def ok(self) -> bool:
        return self.error is None

    def to_dict(self) -> dict:
        return {
            "name": self.name,
            "mode": self.mode.value if self.mode else None,
            "files": self.files,
            "removed": self.removed,
            "ok": self.ok,
            "error": self.error,
        }


@dataclass
class GenerateResult:
    """Result of a generate run."""

    config_path: Path | None = None
    project_root: Path | None = None
    agents: list[AgentResult] = field(default_factory=list)
    cleanup: CleanupReport | None = None
    warnings: list[str] = field(default_factory=list)
    error: str | None = None

    @property
    def failed(self) -> list[AgentResult]:
        return [a for a in self.agents if not a.ok]

    @property
    def ok(self) -> bool:
        return self.error is None and not self.failed

    def to_dict(self) -> dict:
        result: dict = {"ok": self.ok}
        if self.error:
            result["error"] = self.error
            return result

        result["config_path"] = str(self.config_path)
        result["project_root"] = str(self.project_root)
        result["agents"] = [a.to_dict() for a in self.agents]
        result["cleanup"] = self.cleanup.to_dict() if self.cleanup else None
        result["warnings"] = self.warnings
        return result


class DocumentCache:
    """Collected documents keyed by resolved docs directory.

    Documents are immutable for the whole run, so agents sharing a docs
    directory share one collection.
    """

    def __init__(self) -> None:
        self._cache: dict[Path, list[SourceDocument]] = {}

    def get(self, docs_dir: Path) -> list[SourceDocument]:
        key = docs_dir.resolve()
        if key not in self._cache:
            self._cache[key] = collect_documents(docs_dir)
        return self._cache[key]


def generate_agent(
    profile: AgentProfile,
    config: AppConfig,
    root: Path,
    documents: DocumentCache,
) -> AgentResult:
    """Render, prepare and write one agent's files.

    ``OSError`` and ``ValueError`` are captured on the result.
    """
    result = AgentResult(name=profile.name)
    try:
        mode = profile.resolve_mode(config.effective_output_mode(profile.name))
        result.mode = mode
        options = RenderOptions.from_config(config, profile.name, root, mode=mode)

        files = profile.render(documents.get(options.docs_dir), options)

        sweeper = Sweeper(root, strict=True)
        profile.prepare(root, mode, sweeper)
        result.removed = sweeper.removed

        write_generated_files(root, files)
        result.files = [f.path for f in files]
    except (OSError, ValueError) as e:
        logger.error("Generation failed for %s: %s", profile.name, e)
        result.error = str(e)
        return result

    logger.info("Generated %d file(s) for %s (%s)", len(result.files), profile.name, mode.value)
    return result


def run_generate(
    config_path: Path | None = None,
    agent: str | None = None,
    registry: AgentRegistry | None = None,
) -> GenerateResult:
    """Generate context files.

    Args:
        config_path: Optional explicit path to ai-context.yaml.
        agent: Only generate this agent. Disabled-agent cleanup is skipped.
        registry: Agent profiles (default: built-in agents).

    Returns:
        GenerateResult. ``error`` is set for config or docs directory problems.
    """
    result = GenerateResult()
    registry = registry or default_registry()

    try:
        config_path = resolve_config_path(config_path)
        config = load_config(config_path)
    except ConfigError as e:
        result.error = str(e)
        return result

    root = project_root(config_path)
    result.config_path = config_path
    result.project_root = root

    try:
        require_docs_dir(resolve_under_root(root, config.base_docs_dir))
    except DocsDirectoryMissing as e:
        result.error = str(e)
        return result

    enabled = [name for name in config.enabled_agents() if name in registry]
    for name in config.enabled_agents():
        if name not in registry:
            result.warnings.append(f"Unknown agent '{name}' ignored")

    if agent is not None:
        if agent not in enabled:
            result.warnings.append(f"Agent '{agent}' is not enabled")
            return result
        enabled = [agent]
    elif not enabled:
        result.warnings.append("No enabled agents found")

    documents = DocumentCache()
    # registry order, not config order
    for profile in registry.profiles():
        if profile.name in enabled:
            result.agents.append(generate_agent(profile, config, root, documents))

    if agent is None:
        result.cleanup = cleanup_disabled_agents(config, root, registry)
        result.warnings.extend(str(w) for w in result.cleanup.warnings)

    return result
