"""
Kiro — steering files under ``.kiro/steering`` (split mode only).

Source paths are flattened with ``-`` (``guides/setup.md`` →
``guides-setup.md``).  A matching ``split_config`` rule adds an
``inclusion`` front matter block.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

from aictx.agents.base import RenderOptions, match_rule, with_front_matter
from aictx.agents.split_dir import SplitDirProfile
from aictx.core.models.config import AgentOptions, AgentToggle, OutputMode, SplitRule
from aictx.core.models.document import SourceDocument
from aictx.core.services.cleanup import Sweeper


class KiroProfile(SplitDirProfile):
    label = "Kiro"
    modes = (OutputMode.SPLIT,)
    split_dir = ".kiro/steering"
    split_suffix = ".md"
    separator = "-"
    containers = (".kiro",)

    @property
    def name(self) -> str:
        return "kiro"

    def wrap_split(self, relative_path: str, content: str, options: RenderOptions) -> str:
        rule = match_rule(relative_path, options.rules)
        if rule is None or rule.inclusion is None:
            return content
        return with_front_matter(inclusion_fields(rule), content)

    def prepare(self, root: Path, mode: OutputMode, sweeper: Sweeper) -> None:
        # No other mode; steering files are overwritten in place.
        return None

    def cleanup(
        self,
        root: Path,
        sweeper: Sweeper,
        documents: list[SourceDocument] | None = None,
    ) -> None:
        # .kiro/steering also holds hand-written steering files; only names
        # derived from the current docs are removed.
        steering = root / self.split_dir
        for doc in documents or []:
            sweeper.remove_file(steering / self.output_name(doc.relative_path))
        sweeper.prune(steering, *(root / c for c in self.containers))

    def validate_setting(self, setting: AgentToggle | AgentOptions) -> list[str]:
        errors = super().validate_setting(setting)
        if isinstance(setting, AgentOptions):
            for index, rule in enumerate(setting.rules, start=1):
                if rule.inclusion == "fileMatch" and not rule.match_pattern:
                    errors.append(
                        f"kiro: split_config rule #{index} uses inclusion 'fileMatch' "
                        "without match_pattern"
                    )
        return errors


def inclusion_fields(rule: SplitRule) -> dict[str, Any]:
    """Front matter for a kiro inclusion rule."""
    if rule.inclusion == "fileMatch":
        if not rule.match_pattern:
            raise ValueError("fileMatch inclusion requires match_pattern")
        return {"inclusion": "fileMatch", "fileMatchPattern": rule.match_pattern}
    return {"inclusion": rule.inclusion}
