"""
Cline — ``.clinerules`` as a file (merged) or a directory (split).

The same path switches between file and directory, so switching modes
must remove the other form first (see ``SplitDirProfile.prepare``).
"""

from __future__ import annotations

from aictx.agents.split_dir import SplitDirProfile


class ClineProfile(SplitDirProfile):
    label = "Cline"
    merged_path = ".clinerules"
    split_dir = ".clinerules"
    split_suffix = ".md"

    @property
    def name(self) -> str:
        return "cline"
