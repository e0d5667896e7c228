"""
GitHub Copilot — ``.github/copilot-instructions.md`` (merged) or
``.github/instructions/*.instructions.md`` (split).

A split file matched by a rule with ``apply_to`` gets an ``applyTo``
front matter block.
"""

from __future__ import annotations

from aictx.agents.base import RenderOptions, match_rule, with_front_matter
from aictx.agents.split_dir import SplitDirProfile


class GitHubProfile(SplitDirProfile):
    label = "GitHub Copilot"
    merged_path = ".github/copilot-instructions.md"
    split_dir = ".github/instructions"
    split_suffix = ".instructions.md"
    containers = (".github",)

    @property
    def name(self) -> str:
        return "github"

    def wrap_split(self, relative_path: str, content: str, options: RenderOptions) -> str:
        rule = match_rule(relative_path, options.rules)
        if rule is None or not rule.apply_to:
            return content
        return with_front_matter({"applyTo": ",".join(rule.apply_to)}, content)
