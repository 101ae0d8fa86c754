"""
Shared utilities for WKND.

Common functionality used across contexts:
- Text helpers
- Settings loading
- Logger setup
- Timestamps
"""

from wknd.utils.settings import load_settings
from wknd.utils.text_processing import is_blank
from wknd.utils.timestamp import now

__all__ = ["is_blank", "load_settings", "now"]
