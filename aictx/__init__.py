"""aictx — generate AI coding-agent context files from a Markdown docs directory."""

__version__ = "0.4.1"
