"""
Cleanup — remove artifacts previously generated for an agent.

Two callers:
    - ``cleanup_disabled_agents`` removes everything owned by agents that
      are disabled in the config.  Best-effort: failures become warnings.
    - Agent profiles switching between merged and split output clear the
      other mode's artifacts before writing.  Strict: failures raise.

Only files matching an agent's naming convention are removed.  Kiro
steering files are matched by name against the current docs.  A
directory is removed once it is empty, and the cascade continues to a
parent container only while that parent is empty too.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import TYPE_CHECKING, Callable

from aictx.core.models.document import SourceDocument
from aictx.core.services.collector import collect_documents, resolve_under_root

if TYPE_CHECKING:
    from aictx.agents.registry import AgentRegistry
    from aictx.core.models.config import AppConfig

logger = logging.getLogger(__name__)


@dataclass
class PartialCleanupWarning:
    """A path that could not be removed. Non-fatal."""

    path: str
    error: str

    def __str__(self) -> str:
        return f"Failed to remove {self.path}: {self.error}"

    def to_dict(self) -> dict:
        return {"path": self.path, "error": self.error}


class Sweeper:
    """Removes files and directories below a project root and records what happened.

    Args:
        root: Project root. Recorded paths are relative to it.
        strict: Raise ``OSError`` instead of recording a warning.
    """

    def __init__(self, root: Path, *, strict: bool = False):
        self.root = root
        self.strict = strict
        self.removed: list[str] = []
        self.warnings: list[PartialCleanupWarning] = []

    def _rel(self, path: Path) -> str:
        try:
            return path.relative_to(self.root).as_posix()
        except ValueError:
            return str(path)

    def _fail(self, path: Path, error: OSError) -> None:
        if self.strict:
            raise error
        warning = PartialCleanupWarning(path=self._rel(path), error=str(error))
        logger.warning("%s", warning)
        self.warnings.append(warning)

    def remove_file(self, path: Path) -> bool:
        """Remove a regular file if present. Directories are left alone."""
        if not path.is_file():
            return False
        try:
            path.unlink()
        except OSError as e:
            self._fail(path, e)
            return False
        self.removed.append(self._rel(path))
        logger.debug("Removed %s", path)
        return True

    def remove_managed(self, directory: Path, is_managed: Callable[[Path], bool]) -> int:
        """Remove files directly inside ``directory`` accepted by ``is_managed``."""
        if not directory.is_dir():
            return 0
        try:
            entries = sorted(directory.iterdir())
        except OSError as e:
            self._fail(directory, e)
            return 0

        count = 0
        for entry in entries:
            if entry.is_file() and is_managed(entry) and self.remove_file(entry):
                count += 1
        return count

    def prune(self, directory: Path, *parents: Path) -> None:
        """Remove ``directory`` if empty, then each of ``parents`` while empty."""
        for candidate in (directory, *parents):
            if not candidate.is_dir():
                continue
            try:
                if any(candidate.iterdir()):
                    return
                candidate.rmdir()
            except OSError as e:
                self._fail(candidate, e)
                return
            self.removed.append(f"{self._rel(candidate)}/")
            logger.debug("Removed empty directory %s", candidate)




@dataclass
class CleanupReport:
    """Result of cleaning up disabled agents."""

    removed: dict[str, list[str]] = field(default_factory=dict)
    warnings: list[PartialCleanupWarning] = field(default_factory=list)

    @property
    def total_removed(self) -> int:
        return sum(len(paths) for paths in self.removed.values())

    def to_dict(self) -> dict:
        return {
            "removed": self.removed,
            "warnings": [w.to_dict() for w in self.warnings],
        }


def cleanup_disabled_agents(
    config: AppConfig,
    project_root: Path,
    registry: AgentRegistry | None = None,
) -> CleanupReport:
    """Remove artifacts of every known agent that is not enabled.

    Args:
        config: Loaded configuration.
        project_root: Directory the agent outputs live under.
        registry: Profiles to consider (default: all built-in agents).

    Returns:
        CleanupReport with removed paths per agent and any warnings.
    """
    if registry is None:
        from aictx.agents.registry import default_registry

        registry = default_registry()

    report = CleanupReport()
    documents: dict[Path, list[SourceDocument]] = {}
    for profile in registry.profiles():
        if config.is_agent_enabled(profile.name):
            continue

        docs_dir = resolve_under_root(project_root, config.effective_base_docs_dir(profile.name))
        if docs_dir not in documents:
            documents[docs_dir] = collect_documents(docs_dir)

        sweeper = Sweeper(project_root)
        profile.cleanup(project_root, sweeper, documents[docs_dir])

        if sweeper.removed:
            report.removed[profile.name] = sweeper.removed
            logger.info("Cleaned up %d path(s) for disabled agent %s", len(sweeper.removed), profile.name)
        report.warnings.extend(sweeper.warnings)

    return report
