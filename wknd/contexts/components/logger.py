"""
Components context logger.

Provides logging interface for components context with automatic [component] prefix.
All component modules should import from this module, not from utils.logger directly.
"""

from pathlib import Path

from loguru import logger

from wknd.utils.logger import setup_logger as _setup_logger

CONTEXT_PREFIX = "[component]"


def setup_components_logger(log_dir: Path, content_file: Path = None) -> Path:
    """
    Setup logger for components context.

    Args:
        log_dir: Directory for this session
        content_file: Content file being processed (logged in provenance)

    Returns:
        Path to log file
    """
    return _setup_logger(
        context_name="component",
        log_dir=log_dir,
        content_file=content_file,
    )


def _log_warning(message: str) -> None:
    """Log warning message with [component] prefix."""
    logger.warning(f"{CONTEXT_PREFIX} {message}")


def _log_debug(message: str) -> None:
    """Log debug message with [component] prefix."""
    logger.debug(f"{CONTEXT_PREFIX} {message}")


def log_model_created(resource_path: str, resource_type: str, model) -> None:
    """Log a model adapted from a resource."""
    _log_debug(f"Adapted {resource_path} ({resource_type}) to {type(model).__name__}")


def log_image_unavailable(resource_path: str, error: Exception) -> None:
    """Log an image that could not be resolved; the model continues without it."""
    _log_warning(f"{resource_path}: image could not be resolved, treating as absent")
    _log_debug(f"  Reason: {error}")


def log_empty_reason(component_name: str, reason: str) -> None:
    """Log why a component is considered empty."""
    _log_debug(f"{component_name} is empty: {reason}")
