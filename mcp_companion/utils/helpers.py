"""Small filesystem and time helpers."""

from datetime import datetime
from pathlib import Path


def ensure_dir(path: Path) -> Path:
    """Create a directory (and parents) if missing; return it."""
    path.mkdir(parents=True, exist_ok=True)
    return path


def timestamp() -> str:
    """Current local time in ISO format."""
    return datetime.now().isoformat()


def today_date() -> str:
    """Today's date as YYYY-MM-DD."""
    return datetime.now().strftime("%Y-%m-%d")


def split_csv(text: str) -> list[str]:
    """Split a comma-separated string, trimming items and dropping empties."""
    return [part.strip() for part in text.split(",") if part.strip()]
