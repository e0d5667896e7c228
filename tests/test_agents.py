"""
Tests for agent profiles and the registry.
"""

from pathlib import Path

import pytest
import yaml

from aictx.agents.base import RenderOptions, front_matter, match_rule
from aictx.agents.cline import ClineProfile
from aictx.agents.cursor import CursorProfile
from aictx.agents.github import GitHubProfile
from aictx.agents.kiro import KiroProfile, inclusion_fields
from aictx.agents.registry import BUILTIN_AGENTS, AgentRegistry, default_registry
from aictx.agents.root_file import ClaudeProfile, RootFileProfile
from aictx.core.models.config import (
    AgentOptions,
    AgentToggle,
    AppConfig,
    ImportFile,
    OutputMode,
    SplitConfig,
    SplitRule,
)
from aictx.core.models.document import SourceDocument

_REGISTRY = default_registry()
MERGED_AGENTS = [n for n in BUILTIN_AGENTS if _REGISTRY.get(n).supports(OutputMode.MERGED)]
SPLIT_AGENTS = [n for n in BUILTIN_AGENTS if _REGISTRY.get(n).supports(OutputMode.SPLIT)]

DOCS = [
    SourceDocument(relative_path="a.md", content="X"),
    SourceDocument(relative_path="b/c.md", content="Y"),
]


def _split_front_matter(content: str) -> tuple[dict, str]:
    """Parse a leading ``---`` block. Returns ({}, content) when absent."""
    if not content.startswith("---\n"):
        return {}, content
    _, block, body = content.split("---\n", 2)
    return yaml.safe_load(block), body


def _paths(files) -> list[str]:
    return [f.path for f in files]


# ── Registry ────────────────────────────────────────────────────────


class TestRegistry:
    def test_builtin_order(self):
        assert default_registry().names() == list(BUILTIN_AGENTS)

    def test_lookup(self):
        registry = default_registry()
        assert isinstance(registry.get("cursor"), CursorProfile)
        assert registry.get("nonexistent") is None
        assert "kiro" in registry
        assert "vim" not in registry

    def test_register_and_unregister(self):
        registry = AgentRegistry()
        registry.register(RootFileProfile("extra", "EXTRA.md"))
        assert registry.names() == ["extra"]
        registry.unregister("extra")
        assert registry.names() == []

    def test_info(self):
        info = default_registry().get("github").info()
        assert info["name"] == "github"
        assert info["label"] == "GitHub Copilot"
        assert info["modes"] == ["merged", "split"]
        assert info["outputs"] == [
            ".github/copilot-instructions.md",
            ".github/instructions/*.instructions.md",
        ]

    def test_kiro_is_split_only(self):
        kiro = KiroProfile()
        assert kiro.supports(OutputMode.SPLIT)
        assert not kiro.supports(OutputMode.MERGED)
        assert kiro.resolve_mode(OutputMode.MERGED) == OutputMode.SPLIT
        assert kiro.output_paths() == [".kiro/steering/*.md"]


# ── Empty input ─────────────────────────────────────────────────────


class TestEmptyDocs:
    @pytest.mark.parametrize("name", MERGED_AGENTS)
    def test_merged_gives_one_empty_artifact(self, name: str):
        profile = default_registry().get(name)
        files = profile.render([], RenderOptions(mode=OutputMode.MERGED))
        assert len(files) == 1
        _, body = _split_front_matter(files[0].content)
        assert body.strip() == ""

    @pytest.mark.parametrize("name", SPLIT_AGENTS)
    def test_split_gives_nothing(self, name: str):
        profile = default_registry().get(name)
        assert profile.render([], RenderOptions(mode=OutputMode.SPLIT)) == []


# ── Root-file agents ────────────────────────────────────────────────


class TestRootFile:
    @pytest.mark.parametrize(
        ("name", "filename"),
        [("claude", "CLAUDE.md"), ("codex", "AGENTS.md"), ("gemini", "GEMINI.md")],
    )
    def test_merged_path(self, name: str, filename: str):
        files = default_registry().get(name).render(DOCS, RenderOptions())
        assert _paths(files) == [filename]
        assert files[0].content == "X\n\nY"

    def test_split_request_falls_back_to_merged(self):
        files = ClaudeProfile().render(DOCS, RenderOptions(mode=OutputMode.SPLIT))
        assert _paths(files) == ["CLAUDE.md"]

    def test_include_filenames(self):
        files = RootFileProfile("codex", "AGENTS.md").render(DOCS, RenderOptions(include_filenames=True))
        assert files[0].content == "# a.md\n\nX\n\n# b/c.md\n\nY"


class TestClaudeImports:
    def test_imports_appended(self, tmp_path: Path):
        options = RenderOptions(
            import_files=(
                ImportFile(path="notes/extra.md", note="Extra notes"),
                ImportFile(path="shared/rules.md"),
            ),
            project_root=tmp_path,
            docs_dir=tmp_path / "ai-context",
        )
        content = ClaudeProfile().render(DOCS, options)[0].content
        assert content == "X\n\nY\n\n# Extra notes\n@notes/extra.md\n\n@shared/rules.md"

    def test_imported_doc_not_inlined(self, tmp_path: Path):
        options = RenderOptions(
            import_files=(ImportFile(path="ai-context/a.md", note="A"),),
            project_root=tmp_path,
            docs_dir=tmp_path / "ai-context",
        )
        content = ClaudeProfile().render(DOCS, options)[0].content
        assert content == "Y\n\n# A\n@ai-context/a.md"

    def test_outside_root_is_absolute(self, tmp_path: Path):
        root = tmp_path / "project"
        outside = tmp_path / "shared.md"
        options = RenderOptions(
            import_files=(ImportFile(path=str(outside)),),
            project_root=root,
            docs_dir=root / "ai-context",
        )
        content = ClaudeProfile().render([], options)[0].content
        assert content == f"@{outside.resolve().as_posix()}"

    def test_empty_import_path_is_invalid(self):
        setting = AgentOptions(import_files=[ImportFile(path=" ")])
        assert ClaudeProfile().validate_setting(setting) == ["claude: import_files entry with an empty path"]


# ── Cline ───────────────────────────────────────────────────────────


class TestCline:
    def test_merged(self):
        files = ClineProfile().render(DOCS, RenderOptions())
        assert _paths(files) == [".clinerules"]
        assert files[0].content == "X\n\nY"

    def test_split(self):
        files = ClineProfile().render(DOCS, RenderOptions(mode=OutputMode.SPLIT))
        assert _paths(files) == [".clinerules/a.md", ".clinerules/b_c.md"]
        assert [f.content for f in files] == ["X", "Y"]


# ── Cursor ──────────────────────────────────────────────────────────


class TestCursor:
    def test_merged_front_matter(self):
        files = CursorProfile().render(DOCS, RenderOptions())
        assert _paths(files) == [".cursor/rules/context.mdc"]
        assert files[0].content == (
            "---\ndescription: AI context rules\nalwaysApply: true\n---\n\nX\n\nY"
        )

    def test_split_default_front_matter(self):
        files = CursorProfile().render(DOCS, RenderOptions(mode=OutputMode.SPLIT))
        assert _paths(files) == [".cursor/rules/a.mdc", ".cursor/rules/b_c.mdc"]
        fields, body = _split_front_matter(files[1].content)
        assert fields == {"description": "AI context rules", "alwaysApply": True}
        assert body == "\nY"

    def test_split_rule_overrides(self):
        rule = SplitRule(
            file_patterns=["b/*.md"],
            description="Backend rules",
            globs=["src/api/**", "src/db/**"],
            always_apply=False,
        )
        options = RenderOptions(mode=OutputMode.SPLIT, rules=(rule,))
        files = CursorProfile().render(DOCS, options)

        fields, _ = _split_front_matter(files[1].content)
        assert fields == {
            "description": "Backend rules",
            "globs": "src/api/**,src/db/**",
            "alwaysApply": False,
        }
        # a.md does not match and keeps the default header
        assert _split_front_matter(files[0].content)[0]["alwaysApply"] is True

    def test_rule_without_patterns_is_invalid(self):
        setting = AgentOptions(split_config=SplitConfig(rules=[SplitRule(description="x")]))
        assert CursorProfile().validate_setting(setting) == ["cursor: split_config rule #1 has no file_patterns"]

    def test_toggle_is_always_valid(self):
        assert CursorProfile().validate_setting(AgentToggle()) == []


# ── GitHub ──────────────────────────────────────────────────────────


class TestGitHub:
    def test_merged(self):
        files = GitHubProfile().render(DOCS, RenderOptions())
        assert _paths(files) == [".github/copilot-instructions.md"]
        assert files[0].content == "X\n\nY"

    def test_split_paths(self):
        files = GitHubProfile().render(DOCS, RenderOptions(mode=OutputMode.SPLIT))
        assert _paths(files) == [
            ".github/instructions/a.instructions.md",
            ".github/instructions/b_c.instructions.md",
        ]
        assert files[0].content == "X"

    def test_apply_to(self):
        rule = SplitRule(file_patterns=["a.md"], apply_to="**/*.py")
        files = GitHubProfile().render(DOCS, RenderOptions(mode=OutputMode.SPLIT, rules=(rule,)))
        fields, body = _split_front_matter(files[0].content)
        assert fields == {"applyTo": "**/*.py"}
        assert body == "\nX"
        assert files[1].content == "Y"

    def test_apply_to_text(self):
        rule = SplitRule(file_patterns=["a.md"], apply_to="**/*.py")
        files = GitHubProfile().render(DOCS, RenderOptions(mode=OutputMode.SPLIT, rules=(rule,)))
        assert files[0].content == "---\napplyTo: '**/*.py'\n---\n\nX"


# ── Kiro ────────────────────────────────────────────────────────────


class TestKiro:
    def test_paths_use_dash(self):
        files = KiroProfile().render(DOCS, RenderOptions(mode=OutputMode.MERGED))
        assert _paths(files) == [".kiro/steering/a.md", ".kiro/steering/b-c.md"]
        assert [f.content for f in files] == ["X", "Y"]

    def test_inclusion_always(self):
        rule = SplitRule(file_patterns=["a.md"], inclusion="always")
        files = KiroProfile().render(DOCS, RenderOptions(mode=OutputMode.SPLIT, rules=(rule,)))
        assert _split_front_matter(files[0].content)[0] == {"inclusion": "always"}

    def test_inclusion_file_match(self):
        rule = SplitRule(file_patterns=["c.md"], inclusion="fileMatch", match_pattern="src/**/*.ts")
        files = KiroProfile().render(DOCS, RenderOptions(mode=OutputMode.SPLIT, rules=(rule,)))
        assert _split_front_matter(files[1].content)[0] == {
            "inclusion": "fileMatch",
            "fileMatchPattern": "src/**/*.ts",
        }

    def test_file_match_without_pattern_raises(self):
        with pytest.raises(ValueError, match="match_pattern"):
            inclusion_fields(SplitRule(file_patterns=["*.md"], inclusion="fileMatch"))

    def test_file_match_without_pattern_is_invalid(self):
        setting = AgentOptions(
            split_config=SplitConfig(rules=[SplitRule(file_patterns=["*.md"], inclusion="fileMatch")])
        )
        errors = KiroProfile().validate_setting(setting)
        assert len(errors) == 1
        assert "without match_pattern" in errors[0]

    def test_no_merged_output(self):
        with pytest.raises(ValueError, match="kiro has no merged output"):
            KiroProfile()._render_merged(DOCS, RenderOptions())


# ── Split name collisions ───────────────────────────────────────────


class TestSplitNameCollision:
    COLLIDING = [
        SourceDocument(relative_path="a/b.md", content="nested"),
        SourceDocument(relative_path="a_b.md", content="flat"),
    ]

    def test_cursor_raises(self):
        with pytest.raises(ValueError, match="both map to .cursor/rules/a_b.mdc"):
            CursorProfile().render(self.COLLIDING, RenderOptions(mode=OutputMode.SPLIT))

    def test_kiro_raises(self):
        docs = [
            SourceDocument(relative_path="x/y.md", content="nested"),
            SourceDocument(relative_path="x-y.md", content="flat"),
        ]
        with pytest.raises(ValueError, match="both map to .kiro/steering/x-y.md"):
            KiroProfile().render(docs, RenderOptions(mode=OutputMode.SPLIT))

    def test_merged_mode_unaffected(self):
        files = CursorProfile().render(self.COLLIDING, RenderOptions())
        assert files[0].content.endswith("nested\n\nflat")


# ── Helpers ─────────────────────────────────────────────────────────


class TestHelpers:
    def test_front_matter_keeps_order(self):
        assert front_matter({"z": 1, "a": "b"}) == "---\nz: 1\na: b\n---\n"

    def test_match_rule_full_path_and_basename(self):
        first = SplitRule(file_patterns=["guides/*.md"])
        second = SplitRule(file_patterns=["setup.md"])
        assert match_rule("guides/intro.md", [first, second]) is first
        assert match_rule("other/setup.md", [first, second]) is second
        assert match_rule("other/none.md", [first, second]) is None

    def test_render_options_from_config(self, tmp_path: Path):
        config = AppConfig(
            version="1",
            base_docs_dir="docs",
            include_filenames=True,
            agents={
                "cursor": AgentOptions(
                    output_mode=OutputMode.SPLIT,
                    base_docs_dir="cursor-docs",
                    split_config=SplitConfig(rules=[SplitRule(file_patterns=["*.md"])]),
                )
            },
        )
        options = RenderOptions.from_config(config, "cursor", tmp_path)
        assert options.mode == OutputMode.SPLIT
        assert options.include_filenames is True
        assert len(options.rules) == 1
        assert options.docs_dir == tmp_path / "cursor-docs"
