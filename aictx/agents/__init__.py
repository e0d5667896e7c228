"""Agent profiles — one output strategy per supported coding assistant.

Public re-exports for convenient access.
"""

from aictx.agents.base import AgentProfile, RenderOptions
from aictx.agents.registry import BUILTIN_AGENTS, AgentRegistry, default_registry

__all__ = [
    "BUILTIN_AGENTS",
    "AgentProfile",
    "AgentRegistry",
    "RenderOptions",
    "default_registry",
]
