"""
Agent registry — lookup table of output profiles.

The generator, cleanup and CLI resolve agents only through the
registry; there is no per-agent branching anywhere else.
"""

from __future__ import annotations

import logging

from aictx.agents.base import AgentProfile

logger = logging.getLogger(__name__)


class AgentRegistry:
    """Ordered registry of agent profiles, keyed by agent id."""

    def __init__(self, profiles: list[AgentProfile] | None = None):
        self._profiles: dict[str, AgentProfile] = {}
        for profile in profiles or []:
            self.register(profile)

    def register(self, profile: AgentProfile) -> None:
        name = profile.name
        if name in self._profiles:
            logger.warning("Overwriting existing agent profile: %s", name)
        self._profiles[name] = profile
        logger.debug("Registered agent profile: %s", name)

    def unregister(self, name: str) -> None:
        self._profiles.pop(name, None)

    def get(self, name: str) -> AgentProfile | None:
        return self._profiles.get(name)

    def __contains__(self, name: object) -> bool:
        return name in self._profiles

    def names(self) -> list[str]:
        return list(self._profiles)

    def profiles(self) -> list[AgentProfile]:
        return list(self._profiles.values())


def default_registry() -> AgentRegistry:
    """All built-in agents, in listing order."""
    from aictx.agents.cline import ClineProfile
    from aictx.agents.cursor import CursorProfile
    from aictx.agents.github import GitHubProfile
    from aictx.agents.kiro import KiroProfile
    from aictx.agents.root_file import ClaudeProfile, RootFileProfile

    return AgentRegistry(
        [
            ClaudeProfile(),
            RootFileProfile("codex", "AGENTS.md", label="OpenAI Codex"),
            RootFileProfile("gemini", "GEMINI.md", label="Gemini CLI"),
            ClineProfile(),
            CursorProfile(),
            GitHubProfile(),
            KiroProfile(),
        ]
    )


# Static id list for CLI choices; kept in sync with default_registry().
BUILTIN_AGENTS: tuple[str, ...] = ("claude", "codex", "gemini", "cline", "cursor", "github", "kiro")
