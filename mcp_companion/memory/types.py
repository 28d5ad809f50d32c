"""Record types stored in the memory file (Pydantic models)."""

from enum import Enum
from typing import Any

from pydantic import BaseModel, Field


class EntryType(str, Enum):
    """Kind of a detailed memory entry."""
    FEATURE = "feature"
    DECISION = "decision"
    SESSION = "session"
    ARCHITECTURE = "architecture"
    PATTERN = "pattern"
    SOLUTION = "solution"
    BUGFIX = "bugfix"
    OPTIMIZATION = "optimization"


class EntryContext(BaseModel):
    """Free-text context attached to a memory entry."""

    description: str
    files: list[str] = Field(default_factory=list)


class MemoryEntry(BaseModel):
    """One item of ``detailed_memories``."""

    timestamp: str
    type: EntryType
    description: str
    context: EntryContext
    impact: str
    tags: list[str] = Field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        return self.model_dump(mode="json")


class FeatureRecord(BaseModel):
    """One item of ``feature_registry``."""

    name: str
    status: str = "completed"
    description: str = ""
    key_files: list[str] = Field(default_factory=list)
    implementation_details: str = ""
    usage_example: str = ""
    added_in_version: str = "1.0.0"


class DecisionRecord(BaseModel):
    """One item of ``decision_log``."""

    date: str  # YYYY-MM-DD
    decision: str
    rationale: str = ""
    alternatives_considered: list[str] = Field(default_factory=list)
    impact: str = ""


class SessionRecord(BaseModel):
    """One item of ``session_history``."""

    date: str
    summary: str
    key_changes: list[str] = Field(default_factory=list)


class EntryInput(BaseModel):
    """Validated answers collected for a new memory entry."""

    type: EntryType
    description: str = Field(min_length=1)
    context: str = Field(min_length=1)
    impact: str = Field(min_length=1)
    tags: list[str] = Field(default_factory=list)


def default_store(name: str, version: str, now: str) -> dict[str, Any]:
    """Build a fresh memory document with every section populated."""
    return {
        "project_overview": {
            "name": name,
            "description": "",
            "purpose": "",
            "current_version": version,
            "key_technologies": [],
            "last_updated": now,
        },
        "architecture": {
            "components": [],
            "data_flow": "",
            "key_patterns": [],
        },
        "code_conventions": {
            "naming": {
                "files": "",
                "functions": "",
                "classes": "",
                "variables": "",
            },
            "structure": {
                "directories": "",
                "modules": "",
            },
            "documentation": {
                "comments": "",
                "docstrings": "",
            },
        },
        "user_interaction_guidelines": {
            "communication_style": "",
            "preferences": [],
            "review_expectations": "",
        },
        "feature_registry": [],
        "decision_log": [],
        "current_development_focus": {
            "priority_features": [],
            "known_issues": [],
            "upcoming_changes": [],
        },
        "session_history": [],
        "detailed_memories": [],
        "ai_guidance": {
            "retrieval_strategy": {
                "start_with": "project_overview",
                "then_check": ["current_development_focus", "feature_registry"],
                "search_detailed_memories_by": ["type", "tags"],
            },
            "update_policy": "Append to detailed_memories after every significant change.",
        },
    }
