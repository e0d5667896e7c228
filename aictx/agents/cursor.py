"""
Cursor — ``.mdc`` rule files under ``.cursor/rules`` with YAML front matter.

Merged mode writes ``context.mdc`` with a fixed header.  In split mode the
first matching ``split_config`` rule supplies ``description``, ``globs``
and ``alwaysApply`` for that file.
"""

from __future__ import annotations

from typing import Any

from aictx.agents.base import RenderOptions, match_rule, with_front_matter
from aictx.agents.split_dir import SplitDirProfile

DEFAULT_DESCRIPTION = "AI context rules"


class CursorProfile(SplitDirProfile):
    label = "Cursor"
    merged_path = ".cursor/rules/context.mdc"
    split_dir = ".cursor/rules"
    split_suffix = ".mdc"
    containers = (".cursor",)

    @property
    def name(self) -> str:
        return "cursor"

    def wrap_merged(self, content: str) -> str:
        return with_front_matter(_default_fields(), content)

    def wrap_split(self, relative_path: str, content: str, options: RenderOptions) -> str:
        rule = match_rule(relative_path, options.rules)
        if rule is None:
            return with_front_matter(_default_fields(), content)

        fields: dict[str, Any] = {"description": rule.description or ""}
        if rule.globs:
            fields["globs"] = ",".join(rule.globs)
        fields["alwaysApply"] = bool(rule.always_apply)
        return with_front_matter(fields, content)


def _default_fields() -> dict[str, Any]:
    return {"description": DEFAULT_DESCRIPTION, "alwaysApply": True}
