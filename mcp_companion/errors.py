"""Shared error types for mcp-companion.

Store problems are raised as explicit errors and rendered at the CLI
boundary; nothing below the CLI prints.
"""

from pathlib import Path


class CompanionError(Exception):
    """Base error for mcp-companion."""


class MissingStoreError(CompanionError):
    """Memory file does not exist yet."""

    def __init__(self, path: Path):
        self.path = path
        super().__init__(
            f"Memory file not found at {path}. Run 'mcp-companion setup' first."
        )


class CorruptStoreError(CompanionError):
    """Memory file exists but is not a valid JSON object."""

    def __init__(self, path: Path, detail: str):
        self.path = path
        self.detail = detail
        super().__init__(f"Memory file {path} could not be parsed: {detail}")


class StoreReadError(CompanionError):
    """Memory file exists but could not be read."""

    def __init__(self, path: Path, reason: str):
        self.path = path
        self.reason = reason
        super().__init__(f"Could not read {path}: {reason}")


class StoreWriteError(CompanionError):
    """Creating a directory or writing a file failed."""

    def __init__(self, path: Path, reason: str):
        self.path = path
        self.reason = reason
        super().__init__(f"Could not write {path}: {reason}")


class UnknownSectionError(CompanionError):
    """Requested section is not a top-level key of the store."""

    def __init__(self, section: str, available: list[str]):
        self.section = section
        self.available = available
        super().__init__(f"Section '{section}' not found in memory")


class UnsupportedModeError(CompanionError):
    """Requested add mode has no implementation."""

    def __init__(self, mode: str):
        self.mode = mode
        super().__init__(f"{mode} mode is not yet implemented")
