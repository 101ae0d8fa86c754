"""
Rendering context logger.

Provides logging interface for rendering context with automatic [render] prefix.
All rendering modules should import from this module, not from utils.logger directly.
"""

from pathlib import Path

from loguru import logger

from wknd.utils.logger import setup_logger as _setup_logger

CONTEXT_PREFIX = "[render]"


def setup_rendering_logger(log_dir: Path, content_file: Path, wcm_mode: str) -> Path:
    """
    Setup logger for rendering context.

    Args:
        log_dir: Directory for this rendering session
        content_file: Content file being rendered
        wcm_mode: Authoring mode of the render

    Returns:
        Path to log file

    Example:
        from wknd.contexts.rendering.logger import setup_rendering_logger

        log_file = setup_rendering_logger(log_dir, Path("byline.yaml"), "edit")
    """
    return _setup_logger(
        context_name="render",
        log_dir=log_dir,
        content_file=content_file,
        wcm_mode=wcm_mode,
    )


def _log_info(message: str) -> None:
    """Log info message with [render] prefix."""
    logger.info(f"{CONTEXT_PREFIX} {message}")


def _log_success(message: str) -> None:
    """Log success message with [render] prefix."""
    logger.success(f"{CONTEXT_PREFIX} {message}")


def log_render_result(component_name: str, resource_path: str, output: str, placeholder: bool) -> None:
    """Log the outcome of rendering one component."""
    if placeholder:
        _log_info(f"{component_name}: empty, rendered authoring placeholder ({resource_path})")
    elif not output:
        _log_info(f"{component_name}: empty, nothing rendered ({resource_path})")
    else:
        _log_success(f"{component_name}: rendered {len(output)} characters ({resource_path})")
