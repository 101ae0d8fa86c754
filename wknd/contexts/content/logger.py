"""
Content context logger.

Provides logging interface for content context with automatic [content] prefix.
All content modules should import from this module, not from utils.logger directly.
"""

from pathlib import Path

from loguru import logger

CONTEXT_PREFIX = "[content]"


def _log_info(message: str) -> None:
    """Log info message with [content] prefix."""
    logger.info(f"{CONTEXT_PREFIX} {message}")


def _log_warning(message: str) -> None:
    """Log warning message with [content] prefix."""
    logger.warning(f"{CONTEXT_PREFIX} {message}")


def _log_debug(message: str) -> None:
    """Log debug message with [content] prefix."""
    logger.debug(f"{CONTEXT_PREFIX} {message}")


def log_content_loaded(content_file: Path, root_path: str, num_children: int) -> None:
    """Log a content file loaded into a resource tree."""
    _log_info(f"Loaded {root_path} from {content_file.name}")
    _log_debug(f"  Source: {content_file}")
    _log_debug(f"  Children: {num_children}")


def log_property_coercion_failed(path: str, name: str, value_type: str, expected: str) -> None:
    """Log a property that could not be read as the requested type."""
    _log_warning(f"{path}: property '{name}' is a {value_type}, expected {expected}; using default")
