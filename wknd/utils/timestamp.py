"""Timestamp formatting utilities."""

from datetime import datetime


def now() -> str:
    """
    Current local time as a compact timestamp for directory names.

    Returns:
        Timestamp formatted as YYYYMMDD_HHMMSS

    Example:
        now()
        # "20251114_123456"
    """
    return datetime.now().strftime("%Y%m%d_%H%M%S")

