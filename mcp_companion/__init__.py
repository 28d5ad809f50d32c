"""
mcp-companion - project memory scaffolding for AI-assisted editors
"""

from __future__ import annotations

from importlib.metadata import PackageNotFoundError, version


def _get_version() -> str:
    """Read the installed distribution version."""
    try:
        return version("mcp-companion")
    except PackageNotFoundError:
        return "0.0.0-unknown"


__version__ = _get_version()
__logo__ = "🧠"
