"""Utility functions for mcp-companion."""

from mcp_companion.utils.helpers import ensure_dir, split_csv, timestamp, today_date

__all__ = [
    "ensure_dir",
    "split_csv",
    "timestamp",
    "today_date",
]
