"""
JSON memory store: load, save, view, update and append over ai_memory.json.

Every operation does a full load, an in-memory mutation and a full save.
There is no locking; two processes writing the same file race and the
last save wins.
"""

import json
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from loguru import logger

from mcp_companion.config.schema import CompanionConfig
from mcp_companion.errors import (
    CorruptStoreError,
    MissingStoreError,
    StoreReadError,
    UnknownSectionError,
)
from mcp_companion.memory.types import (
    DecisionRecord,
    EntryContext,
    EntryInput,
    EntryType,
    FeatureRecord,
    MemoryEntry,
    SessionRecord,
)
from mcp_companion.utils.helpers import split_csv, timestamp, today_date

COUNTED_SECTIONS = ("feature_registry", "decision_log", "session_history", "detailed_memories")

_FOCUS_LISTS = ("priority_features", "known_issues", "upcoming_changes")


@dataclass
class StoreSummary:
    """Overview returned by a view without a section."""

    sections: list[str]
    project_name: str | None
    current_version: str | None
    counts: dict[str, int]


@dataclass
class SectionView:
    """A single top-level section and its value."""

    name: str
    value: Any


@dataclass
class UpdateResult:
    """Outcome of an update call."""

    changes: list[str] = field(default_factory=list)
    saved: bool = False

    @property
    def changed(self) -> bool:
        return bool(self.changes)


@dataclass
class AddResult:
    """Outcome of appending a memory entry."""

    entry: dict[str, Any]
    secondary: str | None  # section that also received a record, if any
    saved: bool


def _get_dict(store: dict, key: str) -> dict:
    value = store.get(key)
    if not isinstance(value, dict):
        value = {}
        store[key] = value
    return value


def _get_list(container: dict, key: str) -> list:
    value = container.get(key)
    if not isinstance(value, list):
        value = []
        container[key] = value
    return value


class MemoryFileStore:
    """
    Read/modify/write access to a project's ai_memory.json.

    The document is kept as a plain dict so sections this class never
    interprets (code_conventions, ai_guidance, unknown keys) round-trip
    untouched. Any section may be missing; it is created on first write.
    """

    def __init__(self, root: Path, config: CompanionConfig | None = None):
        self.root = Path(root)
        self.config = config or CompanionConfig()
        self.memory_file = self.config.memory_path(self.root)

    # ── Load / save ───────────────────────────────────────────────────

    def exists(self) -> bool:
        return self.memory_file.is_file()

    def load(self) -> dict[str, Any]:
        """Read and parse the memory file.

        Raises:
            MissingStoreError: the file has not been created yet.
            CorruptStoreError: the file is not a UTF-8 JSON object.
            StoreReadError: the file exists but cannot be read.
        """
        if not self.exists():
            raise MissingStoreError(self.memory_file)

        try:
            data = json.loads(self.memory_file.read_text(encoding="utf-8"))
        except (json.JSONDecodeError, UnicodeDecodeError) as e:
            raise CorruptStoreError(self.memory_file, str(e)) from e
        except OSError as e:
            raise StoreReadError(self.memory_file, e.strerror or str(e)) from e

        if not isinstance(data, dict):
            raise CorruptStoreError(
                self.memory_file, f"expected a JSON object, got {type(data).__name__}"
            )
        return data

    def save(self, store: dict[str, Any]) -> bool:
        """Overwrite the memory file with 2-space indented JSON. Returns success."""
        try:
            self.memory_file.write_text(
                json.dumps(store, indent=2, ensure_ascii=False) + "\n", encoding="utf-8"
            )
        except OSError as e:
            logger.error(f"Failed to save memory file {self.memory_file}: {e}")
            return False
        logger.debug(f"Saved memory file {self.memory_file}")
        return True

    # ── View ──────────────────────────────────────────────────────────

    def view(
        self, section: str | None = None, store: dict[str, Any] | None = None
    ) -> StoreSummary | SectionView:
        """Return one section, or a summary of the whole store. Never writes.

        ``store`` is an already loaded document; the file is read when omitted.
        """
        if store is None:
            store = self.load()

        if section is not None:
            if section not in store:
                raise UnknownSectionError(section, list(store.keys()))
            return SectionView(name=section, value=store[section])

        overview = store.get("project_overview")
        if not isinstance(overview, dict):
            overview = {}

        counts = {}
        for key in COUNTED_SECTIONS:
            value = store.get(key)
            counts[key] = len(value) if isinstance(value, list) else 0

        return StoreSummary(
            sections=list(store.keys()),
            project_name=overview.get("name"),
            current_version=overview.get("current_version"),
            counts=counts,
        )

    # ── Update ────────────────────────────────────────────────────────

    def update(
        self,
        version: str | None = None,
        focus: str | None = None,
        store: dict[str, Any] | None = None,
    ) -> UpdateResult:
        """Set the project version and/or add an upcoming change."""
        if store is None:
            store = self.load()
        result = UpdateResult()

        if version:
            overview = _get_dict(store, "project_overview")
            overview["current_version"] = version
            overview["last_updated"] = timestamp()
            result.changes.append(f"version set to {version}")

        if focus:
            dev_focus = _get_dict(store, "current_development_focus")
            for key in _FOCUS_LISTS:
                _get_list(dev_focus, key)
            upcoming = dev_focus["upcoming_changes"]
            if focus not in upcoming:
                upcoming.append(focus)
                result.changes.append(f"added focus: {focus}")
            else:
                logger.debug(f"Focus already present, skipping: {focus}")

        if result.changed:
            result.saved = self.save(store)
        return result

    # ── Append ────────────────────────────────────────────────────────

    def add_entry(
        self, entry_input: EntryInput, store: dict[str, Any] | None = None
    ) -> AddResult:
        """Append a detailed memory plus its feature/decision/session record."""
        if store is None:
            store = self.load()

        entry = MemoryEntry(
            timestamp=timestamp(),
            type=entry_input.type,
            description=entry_input.description,
            context=EntryContext(description=entry_input.context),
            impact=entry_input.impact,
            tags=entry_input.tags,
        )
        _get_list(store, "detailed_memories").append(entry.to_dict())

        secondary = self._append_secondary(store, entry_input)

        saved = self.save(store)
        if saved:
            logger.info(f"Added {entry_input.type.value} memory: {entry_input.description}")
        return AddResult(entry=entry.to_dict(), secondary=secondary, saved=saved)

    def _append_secondary(self, store: dict, entry_input: EntryInput) -> str | None:
        """Mirror feature/decision/session entries into their registries."""
        if entry_input.type == EntryType.FEATURE:
            overview = store.get("project_overview")
            version = overview.get("current_version") if isinstance(overview, dict) else None
            record = FeatureRecord(
                name=entry_input.description,
                status="completed",
                description=entry_input.context,
                added_in_version=str(version) if version else self.config.default_version,
            )
            section = "feature_registry"
        elif entry_input.type == EntryType.DECISION:
            record = DecisionRecord(
                date=today_date(),
                decision=entry_input.description,
                rationale=entry_input.context,
                impact=entry_input.impact,
            )
            section = "decision_log"
        elif entry_input.type == EntryType.SESSION:
            record = SessionRecord(
                date=today_date(),
                summary=entry_input.description,
                key_changes=split_csv(entry_input.context),
            )
            section = "session_history"
        else:
            return None

        _get_list(store, section).append(record.model_dump())
        return section
