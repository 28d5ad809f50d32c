"""
Project memory for mcp-companion.

A single JSON document (``.mcp/ai_memory.json``) holds the project overview,
registries of features, decisions and sessions, and an append-only list of
detailed memories.
"""

from mcp_companion.memory.store import (
    AddResult,
    MemoryFileStore,
    SectionView,
    StoreSummary,
    UpdateResult,
)
from mcp_companion.memory.types import (
    DecisionRecord,
    EntryInput,
    EntryType,
    FeatureRecord,
    MemoryEntry,
    SessionRecord,
    default_store,
)

__all__ = [
    "AddResult",
    "DecisionRecord",
    "EntryInput",
    "EntryType",
    "FeatureRecord",
    "MemoryEntry",
    "MemoryFileStore",
    "SectionView",
    "SessionRecord",
    "StoreSummary",
    "UpdateResult",
    "default_store",
]
