"""Project scaffolding: memory file and rules document."""

from mcp_companion.scaffold.initializer import InitResult, detect_project_name, initialize

__all__ = ["InitResult", "detect_project_name", "initialize"]
