"""Create the .mcp memory file and the .cursor rules file in a project."""

import json
import tomllib
from dataclasses import dataclass, field
from pathlib import Path

from loguru import logger

from mcp_companion.config.schema import CompanionConfig
from mcp_companion.errors import StoreWriteError
from mcp_companion.memory.types import default_store
from mcp_companion.scaffold.templates import RULES_TEMPLATE
from mcp_companion.utils.helpers import ensure_dir, timestamp


@dataclass
class InitResult:
    """Outcome of initialize()."""

    ok: bool
    memory_file: Path
    rules_file: Path
    memory_created: bool = False
    error: StoreWriteError | None = None
    written: list[Path] = field(default_factory=list)


def detect_project_name(root: Path) -> str:
    """Project name from pyproject.toml or package.json, else the directory name."""
    pyproject = root / "pyproject.toml"
    if pyproject.is_file():
        try:
            project = tomllib.loads(pyproject.read_text(encoding="utf-8")).get("project")
            name = project.get("name") if isinstance(project, dict) else None
            if isinstance(name, str) and name:
                return name
        except (OSError, UnicodeDecodeError, tomllib.TOMLDecodeError) as e:
            logger.warning(f"Ignoring unreadable {pyproject}: {e}")

    package_json = root / "package.json"
    if package_json.is_file():
        try:
            data = json.loads(package_json.read_text(encoding="utf-8"))
            name = data.get("name") if isinstance(data, dict) else None
            if isinstance(name, str) and name:
                return name
        except (OSError, UnicodeDecodeError, json.JSONDecodeError) as e:
            logger.warning(f"Ignoring unreadable {package_json}: {e}")

    return root.resolve().name


def initialize(root: Path, config: CompanionConfig | None = None) -> InitResult:
    """
    Ensure the memory store and rules file exist under ``root``.

    The memory file is only written when missing, so re-running never
    resets stored data. The rules file is rewritten every time.

    Filesystem failures are returned in the result, not raised.
    """
    config = config or CompanionConfig()
    root = Path(root)
    memory_file = config.memory_path(root)
    rules_file = config.rules_path(root)
    result = InitResult(ok=False, memory_file=memory_file, rules_file=rules_file)

    current = root
    try:
        current = config.data_dir(root)
        ensure_dir(current)
        current = config.rules_dir(root)
        ensure_dir(current)

        if not memory_file.exists():
            current = memory_file
            store = default_store(
                name=detect_project_name(root),
                version=config.default_version,
                now=timestamp(),
            )
            memory_file.write_text(json.dumps(store, indent=2, ensure_ascii=False) + "\n", encoding="utf-8")
            result.memory_created = True
            result.written.append(memory_file)
            logger.info(f"Created memory file {memory_file}")
        else:
            logger.debug(f"Memory file exists, leaving it untouched: {memory_file}")

        current = rules_file
        rules_file.write_text(RULES_TEMPLATE, encoding="utf-8")
        result.written.append(rules_file)
    except OSError as e:
        result.error = StoreWriteError(current, e.strerror or str(e))
        logger.error(f"Setup failed: {result.error}")
        return result

    result.ok = True
    return result
