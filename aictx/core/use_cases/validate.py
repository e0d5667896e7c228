"""
Validate use case — check ai-context.yaml and the paths it references.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

from aictx.agents.registry import AgentRegistry, default_registry
from aictx.core.config.loader import ConfigError, load_config, project_root, resolve_config_path
from aictx.core.models.config import AgentOptions, AppConfig
from aictx.core.services.collector import collect_documents, resolve_under_root


@dataclass
class ValidationReport:
    """Result of configuration validation."""

    valid: bool = False
    config: AppConfig | None = None
    config_path: Path | None = None
    docs_dir: Path | None = None
    document_count: int = 0
    errors: list[str] = field(default_factory=list)
    warnings: list[str] = field(default_factory=list)

    def to_dict(self) -> dict:
        return {
            "valid": self.valid,
            "config_path": str(self.config_path) if self.config_path else None,
            "errors": self.errors,
            "warnings": self.warnings,
            "version": self.config.version if self.config else None,
            "output_mode": self.config.output_mode.value if self.config else None,
            "docs_dir": str(self.docs_dir) if self.docs_dir else None,
            "document_count": self.document_count,
            "enabled_agents": self.config.enabled_agents() if self.config else [],
        }


def check_config(
    config_path: Path | None = None,
    registry: AgentRegistry | None = None,
) -> ValidationReport:
    """Validate configuration and report issues.

    Errors: unreadable/invalid config, missing docs directory, invalid
    agent settings.  Everything else is a warning.

    Args:
        config_path: Optional explicit path to ai-context.yaml.
        registry: Agent profiles (default: built-in agents).

    Returns:
        ValidationReport with validation status and any issues.
    """
    result = ValidationReport()
    registry = registry or default_registry()

    try:
        config_path = resolve_config_path(config_path)
        result.config_path = config_path
        config = load_config(config_path)
        result.config = config
    except ConfigError as e:
        result.errors.append(str(e))
        return result

    root = project_root(config_path)

    # Docs directory
    docs_dir = resolve_under_root(root, config.base_docs_dir)
    result.docs_dir = docs_dir
    if docs_dir.is_dir():
        result.document_count = len(collect_documents(docs_dir))
        if result.document_count == 0:
            result.warnings.append(f"No Markdown files found in {config.base_docs_dir}")
    else:
        result.errors.append(f"Documentation directory does not exist: {config.base_docs_dir}")

    # Agents
    if not config.enabled_agents():
        result.warnings.append("No agents are enabled. Nothing will be generated.")

    for name, setting in config.agents.items():
        profile = registry.get(name)
        if profile is None:
            result.warnings.append(
                f"Unknown agent '{name}' will be ignored (known: {', '.join(registry.names())})"
            )
            continue

        result.errors.extend(profile.validate_setting(setting))

        if not setting.is_enabled():
            continue

        requested = config.effective_output_mode(name)
        if not profile.supports(requested):
            result.warnings.append(
                f"Agent '{name}' does not support {requested.value} mode; "
                f"{profile.resolve_mode(requested).value} will be used"
            )

        if isinstance(setting, AgentOptions):
            _check_agent_paths(name, setting, root, result)

    result.valid = not result.errors
    return result


def _check_agent_paths(name: str, setting: AgentOptions, root: Path, result: ValidationReport) -> None:
    if setting.base_docs_dir and not resolve_under_root(root, setting.base_docs_dir).is_dir():
        result.warnings.append(
            f"Agent '{name}' docs directory does not exist: {setting.base_docs_dir}"
        )

    for item in setting.import_files:
        if item.path.strip() and not resolve_under_root(root, item.path).is_file():
            result.warnings.append(f"Agent '{name}' import file not found: {item.path}")
