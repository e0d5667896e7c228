"""
Domain models — Pydantic types for aictx.

All models are re-exported here for convenient access:

    from aictx.core.models import AppConfig, OutputMode, SourceDocument, GeneratedFile
"""

from aictx.core.models.config import (
    AgentOptions,
    AgentToggle,
    AppConfig,
    ImportFile,
    OutputMode,
    SplitConfig,
    SplitRule,
    default_config,
)
from aictx.core.models.document import GeneratedFile, SourceDocument

__all__ = [
    # config.py
    "AgentOptions",
    "AgentToggle",
    "AppConfig",
    # document.py
    "GeneratedFile",
    "ImportFile",
    "OutputMode",
    "SourceDocument",
    "SplitConfig",
    "SplitRule",
    "default_config",
]
