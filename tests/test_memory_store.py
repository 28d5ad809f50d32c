"""Tests for MemoryFileStore: load/save, view, update, add_entry."""

import json
from datetime import datetime
from pathlib import Path

import pytest

from mcp_companion.errors import (
    CorruptStoreError,
    MissingStoreError,
    StoreReadError,
    UnknownSectionError,
)
from mcp_companion.memory import EntryInput, EntryType, MemoryFileStore, SectionView, StoreSummary


def _entry(entry_type: EntryType, **overrides) -> EntryInput:
    fields = {
        "type": entry_type,
        "description": "Login form",
        "context": "Adds email, password fields",
        "impact": "Users can sign in",
        "tags": ["auth"],
    }
    fields.update(overrides)
    return EntryInput(**fields)


# ============================================================================
# Load / save
# ============================================================================


def test_load_missing_store_raises_and_creates_nothing(project):
    store = MemoryFileStore(project)

    with pytest.raises(MissingStoreError):
        store.load()

    assert list(project.iterdir()) == []


def test_load_corrupt_store(memory_path, initialized_project):
    memory_path.write_text("{ broken", encoding="utf-8")

    with pytest.raises(CorruptStoreError) as exc:
        MemoryFileStore(initialized_project).load()
    assert exc.value.detail


def test_load_rejects_non_object(memory_path, initialized_project):
    memory_path.write_text("[1, 2]", encoding="utf-8")

    with pytest.raises(CorruptStoreError):
        MemoryFileStore(initialized_project).load()


def test_round_trip_preserves_document(initialized_project):
    store = MemoryFileStore(initialized_project)
    original = store.load()
    original["custom_section"] = {"kept": True}

    assert store.save(original)
    assert store.load() == original


def test_save_failure_returns_false(project):
    """No .mcp directory means the write fails; save reports instead of raising."""
    store = MemoryFileStore(project)
    assert store.save({"a": 1}) is False


# ============================================================================
# View
# ============================================================================


def test_view_summary(initialized_project):
    view = MemoryFileStore(initialized_project).view()

    assert isinstance(view, StoreSummary)
    assert view.project_name == "demo-app"
    assert view.current_version == "1.0.0"
    assert "detailed_memories" in view.sections
    assert view.counts == {
        "feature_registry": 0,
        "decision_log": 0,
        "session_history": 0,
        "detailed_memories": 0,
    }


def test_view_summary_tolerates_missing_keys(memory_path, initialized_project):
    memory_path.write_text(json.dumps({"decision_log": [{}, {}]}), encoding="utf-8")

    view = MemoryFileStore(initialized_project).view()

    assert view.project_name is None
    assert view.counts["decision_log"] == 2
    assert view.counts["feature_registry"] == 0


def test_view_section(initialized_project):
    view = MemoryFileStore(initialized_project).view("current_development_focus")

    assert isinstance(view, SectionView)
    assert view.value["upcoming_changes"] == []


def test_view_unknown_section_lists_keys(initialized_project):
    with pytest.raises(UnknownSectionError) as exc:
        MemoryFileStore(initialized_project).view("nonexistent_key")

    assert exc.value.section == "nonexistent_key"
    assert "project_overview" in exc.value.available


def test_view_does_not_write(memory_path, initialized_project):
    before = memory_path.read_text(encoding="utf-8")
    MemoryFileStore(initialized_project).view()
    assert memory_path.read_text(encoding="utf-8") == before


# ============================================================================
# Update
# ============================================================================


def test_update_version_refreshes_timestamp(initialized_project, monkeypatch):
    store = MemoryFileStore(initialized_project)
    original = store.load()["project_overview"]["last_updated"]
    monkeypatch.setattr("mcp_companion.memory.store.timestamp", lambda: "2999-01-01T00:00:00")

    result = store.update(version="2.0.0")

    assert result.saved
    overview = store.load()["project_overview"]
    assert overview["current_version"] == "2.0.0"
    assert datetime.fromisoformat(overview["last_updated"]) > datetime.fromisoformat(original)


def test_update_version_creates_overview(memory_path, initialized_project):
    memory_path.write_text("{}", encoding="utf-8")
    store = MemoryFileStore(initialized_project)

    store.update(version="0.2.0")

    assert store.load()["project_overview"]["current_version"] == "0.2.0"


def test_update_focus_has_set_semantics(initialized_project):
    store = MemoryFileStore(initialized_project)

    first = store.update(focus="Add export command")
    second = store.update(focus="Add export command")

    assert first.changed and first.saved
    assert not second.changed
    assert store.load()["current_development_focus"]["upcoming_changes"] == ["Add export command"]


def test_update_focus_creates_focus_lists(memory_path, initialized_project):
    memory_path.write_text("{}", encoding="utf-8")
    store = MemoryFileStore(initialized_project)

    store.update(focus="Ship v2")

    assert store.load()["current_development_focus"] == {
        "priority_features": [],
        "known_issues": [],
        "upcoming_changes": ["Ship v2"],
    }


def test_update_nothing_does_not_write(memory_path, initialized_project):
    before = memory_path.read_text(encoding="utf-8")

    result = MemoryFileStore(initialized_project).update()

    assert not result.changed and not result.saved
    assert memory_path.read_text(encoding="utf-8") == before


def test_update_missing_store(project):
    with pytest.raises(MissingStoreError):
        MemoryFileStore(project).update(version="2.0.0")
    assert not (project / ".mcp").exists()


# ============================================================================
# Append entries
# ============================================================================


def _registry_lengths(data: dict) -> tuple[int, int, int]:
    return (
        len(data["feature_registry"]),
        len(data["decision_log"]),
        len(data["session_history"]),
    )


@pytest.mark.parametrize(
    ("entry_type", "expected"),
    [
        (EntryType.FEATURE, (1, 0, 0)),
        (EntryType.DECISION, (0, 1, 0)),
        (EntryType.SESSION, (0, 0, 1)),
        (EntryType.ARCHITECTURE, (0, 0, 0)),
        (EntryType.PATTERN, (0, 0, 0)),
        (EntryType.SOLUTION, (0, 0, 0)),
        (EntryType.BUGFIX, (0, 0, 0)),
        (EntryType.OPTIMIZATION, (0, 0, 0)),
    ],
)
def test_secondary_records_per_type(initialized_project, entry_type, expected):
    store = MemoryFileStore(initialized_project)

    store.add_entry(_entry(entry_type))

    data = store.load()
    assert _registry_lengths(data) == expected
    assert len(data["detailed_memories"]) == 1


def test_entry_shape(initialized_project):
    store = MemoryFileStore(initialized_project)

    result = store.add_entry(_entry(EntryType.BUGFIX, tags=["auth", "ui"]))

    entry = store.load()["detailed_memories"][0]
    assert result.saved
    assert result.secondary is None
    assert entry["type"] == "bugfix"
    assert entry["description"] == "Login form"
    assert entry["context"] == {"description": "Adds email, password fields", "files": []}
    assert entry["impact"] == "Users can sign in"
    assert entry["tags"] == ["auth", "ui"]
    datetime.fromisoformat(entry["timestamp"])


def test_feature_record_uses_current_version(initialized_project):
    store = MemoryFileStore(initialized_project)
    store.update(version="1.4.0")

    store.add_entry(_entry(EntryType.FEATURE))

    record = store.load()["feature_registry"][0]
    assert record == {
        "name": "Login form",
        "status": "completed",
        "description": "Adds email, password fields",
        "key_files": [],
        "implementation_details": "",
        "usage_example": "",
        "added_in_version": "1.4.0",
    }


def test_feature_record_defaults_version(memory_path, initialized_project):
    memory_path.write_text("{}", encoding="utf-8")
    store = MemoryFileStore(initialized_project)

    store.add_entry(_entry(EntryType.FEATURE))

    assert store.load()["feature_registry"][0]["added_in_version"] == "1.0.0"


def test_decision_record(initialized_project, monkeypatch):
    monkeypatch.setattr("mcp_companion.memory.store.today_date", lambda: "2026-10-18")
    store = MemoryFileStore(initialized_project)

    store.add_entry(_entry(EntryType.DECISION, description="Use JSON storage"))

    assert store.load()["decision_log"][0] == {
        "date": "2026-10-18",
        "decision": "Use JSON storage",
        "rationale": "Adds email, password fields",
        "alternatives_considered": [],
        "impact": "Users can sign in",
    }


def test_session_record_splits_context(initialized_project):
    store = MemoryFileStore(initialized_project)

    store.add_entry(_entry(EntryType.SESSION, context=" wrote tests , fixed CLI,, "))

    record = store.load()["session_history"][0]
    assert record["summary"] == "Login form"
    assert record["key_changes"] == ["wrote tests", "fixed CLI"]


def test_entries_are_append_only(initialized_project):
    store = MemoryFileStore(initialized_project)
    store.add_entry(_entry(EntryType.PATTERN, description="first"))
    before = store.load()["detailed_memories"]

    for i in range(3):
        store.add_entry(_entry(EntryType.SOLUTION, description=f"n{i}"))

    after = store.load()["detailed_memories"]
    assert len(after) == len(before) + 3
    assert after[: len(before)] == before


def test_add_entry_creates_missing_lists(memory_path, initialized_project):
    memory_path.write_text(json.dumps({"project_overview": {"name": "x"}}), encoding="utf-8")
    store = MemoryFileStore(initialized_project)

    store.add_entry(_entry(EntryType.SESSION))

    data = store.load()
    assert len(data["detailed_memories"]) == 1
    assert len(data["session_history"]) == 1
    assert "feature_registry" not in data


# ============================================================================
# Undecodable / unexpected content
# ============================================================================


def test_load_non_utf8_store_is_corrupt(memory_path, initialized_project):
    memory_path.write_bytes(b"\xff\xfe{}")

    with pytest.raises(CorruptStoreError):
        MemoryFileStore(initialized_project).load()


def test_load_unreadable_store(initialized_project, monkeypatch):
    def deny(self, *args, **kwargs):
        raise PermissionError(13, "Permission denied")

    monkeypatch.setattr(Path, "read_text", deny)

    with pytest.raises(StoreReadError) as exc:
        MemoryFileStore(initialized_project).load()
    assert exc.value.reason == "Permission denied"


def test_feature_record_with_numeric_version(memory_path, initialized_project):
    memory_path.write_text(json.dumps({"project_overview": {"current_version": 2}}), encoding="utf-8")
    store = MemoryFileStore(initialized_project)

    result = store.add_entry(_entry(EntryType.FEATURE))

    assert result.saved
    assert store.load()["feature_registry"][0]["added_in_version"] == "2"


def test_operations_use_preloaded_document(memory_path, initialized_project):
    """A document passed in is used as-is; the file is not read again."""
    store = MemoryFileStore(initialized_project)
    data = store.load()
    memory_path.write_text("{ broken", encoding="utf-8")

    assert store.view(store=data).project_name == "demo-app"
    result = store.update(focus="Ship v2", store=data)

    assert result.saved
    assert store.load()["current_development_focus"]["upcoming_changes"] == ["Ship v2"]
