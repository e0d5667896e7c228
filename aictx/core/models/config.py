"""
Config model — the contents of ai-context.yaml.

Loaded once per command, this decides which agents are generated,
in which output mode, and from which docs directory.

Per-agent entries accept two shapes in YAML:

    agents:
      codex: true              # toggle
      cursor:                  # options
        output_mode: split

Both are parsed into a tagged union (``AgentToggle`` | ``AgentOptions``)
that exposes the same override accessors, so callers never inspect
the raw YAML shape.
"""

from __future__ import annotations

from enum import StrEnum
from typing import Annotated, Any, Literal, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator


class OutputMode(StrEnum):
    """How source documents are laid out for an agent."""

    MERGED = "merged"
    SPLIT = "split"


# Agents whose output is always a single merged file, whatever the config says.
MERGED_ONLY_AGENTS = frozenset({"claude"})


class ImportFile(BaseModel):
    """A file referenced from CLAUDE.md with an ``@path`` import line."""

    path: str
    note: str | None = None


class SplitRule(BaseModel):
    """Per-file metadata applied in split mode when a pattern matches.

    Only the fields relevant to the agent are read: cursor uses
    ``description``/``globs``/``alwaysApply``, github uses ``apply_to``,
    kiro uses ``inclusion``/``match_pattern``.
    """

    model_config = ConfigDict(populate_by_name=True)

    file_patterns: list[str] = Field(default_factory=list)
    description: str | None = None
    globs: list[str] | None = None
    always_apply: bool | None = Field(default=None, alias="alwaysApply")
    apply_to: list[str] | None = None
    inclusion: Literal["always", "fileMatch", "manual"] | None = None
    match_pattern: str | None = None

    @field_validator("globs", "apply_to", mode="before")
    @classmethod
    def _single_pattern_to_list(cls, value: Any) -> Any:
        if isinstance(value, str):
            return [value]
        return value


class SplitConfig(BaseModel):
    rules: list[SplitRule] = Field(default_factory=list)


class AgentToggle(BaseModel):
    """Boolean shorthand: ``agent: true`` / ``agent: false``."""

    kind: Literal["toggle"] = "toggle"
    enabled: bool = True

    def is_enabled(self) -> bool:
        return self.enabled

    def output_mode_override(self) -> OutputMode | None:
        return None

    def include_filenames_override(self) -> bool | None:
        return None

    def base_docs_dir_override(self) -> str | None:
        return None


class AgentOptions(BaseModel):
    """Expanded per-agent record with optional overrides."""

    kind: Literal["options"] = "options"
    enabled: bool = True
    output_mode: OutputMode | None = None
    include_filenames: bool | None = None
    base_docs_dir: str | None = None
    import_files: list[ImportFile] = Field(default_factory=list)
    split_config: SplitConfig | None = None

    def is_enabled(self) -> bool:
        return self.enabled

    def output_mode_override(self) -> OutputMode | None:
        return self.output_mode

    def include_filenames_override(self) -> bool | None:
        return self.include_filenames

    def base_docs_dir_override(self) -> str | None:
        return self.base_docs_dir or None

    @property
    def rules(self) -> list[SplitRule]:
        return self.split_config.rules if self.split_config else []


AgentSetting = Annotated[Union[AgentToggle, AgentOptions], Field(discriminator="kind")]


def _tag_agent_setting(value: Any) -> Any:
    """Attach the union tag to a raw YAML agent entry."""
    if isinstance(value, bool):
        return {"kind": "toggle", "enabled": value}
    if value is None:
        return {"kind": "options"}
    if isinstance(value, dict) and "kind" not in value:
        return {**value, "kind": "options"}
    return value


class AppConfig(BaseModel):
    """Root configuration, loaded from ai-context.yaml."""

    version: str
    output_mode: OutputMode = OutputMode.MERGED
    include_filenames: bool = False
    base_docs_dir: str
    agents: dict[str, AgentSetting] = Field(default_factory=dict)

    @field_validator("version", mode="before")
    @classmethod
    def _version_to_str(cls, value: Any) -> Any:
        # ``version: 1.0`` in YAML is a float
        if isinstance(value, (int, float)) and not isinstance(value, bool):
            return str(value)
        return value

    @field_validator("output_mode", mode="before")
    @classmethod
    def _default_output_mode(cls, value: Any) -> Any:
        if value is None:
            return OutputMode.MERGED
        return value

    @field_validator("agents", mode="before")
    @classmethod
    def _tag_agents(cls, value: Any) -> Any:
        if value is None:
            return {}
        if isinstance(value, dict):
            return {str(k): _tag_agent_setting(v) for k, v in value.items()}
        return value

    # ── Lookups ─────────────────────────────────────────────────

    def agent_setting(self, agent_id: str) -> AgentToggle | AgentOptions | None:
        return self.agents.get(agent_id)

    def agent_options(self, agent_id: str) -> AgentOptions | None:
        """Return the expanded record for an agent, or None for toggles."""
        setting = self.agents.get(agent_id)
        return setting if isinstance(setting, AgentOptions) else None

    def is_agent_enabled(self, agent_id: str) -> bool:
        setting = self.agents.get(agent_id)
        return setting.is_enabled() if setting is not None else False

    def enabled_agents(self) -> list[str]:
        """Enabled agent ids, in configuration order."""
        return [name for name, setting in self.agents.items() if setting.is_enabled()]

    # ── Effective values ────────────────────────────────────────

    def effective_output_mode(self, agent_id: str) -> OutputMode:
        """Resolve the output mode for one agent.

        Order: merged-only agents → agent override → global ``output_mode``.
        Unknown agent ids fall through to the global value.
        """
        if agent_id in MERGED_ONLY_AGENTS:
            return OutputMode.MERGED
        setting = self.agents.get(agent_id)
        override = setting.output_mode_override() if setting is not None else None
        return override or self.output_mode

    def effective_include_filenames(self, agent_id: str) -> bool:
        setting = self.agents.get(agent_id)
        override = setting.include_filenames_override() if setting is not None else None
        return self.include_filenames if override is None else override

    def effective_base_docs_dir(self, agent_id: str) -> str:
        setting = self.agents.get(agent_id)
        override = setting.base_docs_dir_override() if setting is not None else None
        return override or self.base_docs_dir

    # ── Serialisation ───────────────────────────────────────────

    def to_yaml_data(self) -> dict[str, Any]:
        """Plain-data form suitable for ``yaml.dump``."""
        agents: dict[str, Any] = {}
        for name, setting in self.agents.items():
            if isinstance(setting, AgentToggle):
                agents[name] = setting.enabled
            else:
                agents[name] = setting.model_dump(
                    mode="json",
                    by_alias=True,
                    exclude={"kind"},
                    exclude_none=True,
                    exclude_defaults=True,
                )
        return {
            "version": self.version,
            "output_mode": self.output_mode.value,
            "include_filenames": self.include_filenames,
            "base_docs_dir": self.base_docs_dir,
            "agents": agents,
        }


DEFAULT_AGENT_STATES: dict[str, bool] = {
    "claude": True,
    "codex": False,
    "gemini": False,
    "cline": False,
    "cursor": True,
    "github": False,
    "kiro": False,
}


def default_config() -> AppConfig:
    """The configuration written by ``aictx init``."""
    return AppConfig(
        version="1.0",
        output_mode=OutputMode.MERGED,
        include_filenames=False,
        base_docs_dir="./ai-context",
        agents={name: AgentToggle(enabled=on) for name, on in DEFAULT_AGENT_STATES.items()},
    )
