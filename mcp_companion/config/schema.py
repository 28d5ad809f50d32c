"""Configuration schema using Pydantic."""

from pathlib import Path

from pydantic import BaseModel
from pydantic_settings import BaseSettings, SettingsConfigDict


class LayoutConfig(BaseModel):
    """Where the memory and rules files live, relative to the project root."""
    data_dir: str = ".mcp"
    memory_file: str = "ai_memory.json"
    rules_dir: str = ".cursor/rules"
    rules_file: str = "companion.mdc"


class CompanionConfig(BaseSettings):
    """Root configuration for mcp-companion."""
    model_config = SettingsConfigDict(
        env_prefix="MCP_COMPANION_",
        env_nested_delimiter="__",
    )

    layout: LayoutConfig = LayoutConfig()
    default_version: str = "1.0.0"
    log_level: str = "WARNING"

    def data_dir(self, root: Path) -> Path:
        return Path(root) / self.layout.data_dir

    def rules_dir(self, root: Path) -> Path:
        return Path(root) / self.layout.rules_dir

    def memory_path(self, root: Path) -> Path:
        """Path of the JSON memory store under a project root."""
        return self.data_dir(root) / self.layout.memory_file

    def rules_path(self, root: Path) -> Path:
        """Path of the rules markdown under a project root."""
        return self.rules_dir(root) / self.layout.rules_file


def load_config() -> CompanionConfig:
    """Build the config from defaults and MCP_COMPANION_* environment variables."""
    return CompanionConfig()
