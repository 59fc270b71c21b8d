"""Timestamp helpers for log directory naming."""

from datetime import datetime


def now() -> str:
    """Current local time as a sortable directory suffix (e.g. 20251114_123456)."""
    return datetime.now().strftime("%Y%m%d_%H%M%S")
