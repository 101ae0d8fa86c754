"""
Logger setup for WKND sessions.

Each CLI session logs to its own directory: a DEBUG log file plus INFO console
output, opened by a provenance header naming the content file and WCM mode.
Context-specific wrappers are defined in contexts/{context}/logger.py.
"""

import sys
from pathlib import Path
from typing import List, Optional

from loguru import logger

import wknd

FILE_FORMAT = "{time:YYYY-MM-DD HH:mm:ss} | {level: <7} | {message}"
CONSOLE_FORMAT = "{time:YYYY-MM-DD HH:mm:ss} | <level>{level: <7}</level> | <level>{message}</level>"

# Handler ids added by setup_logger; other sinks are never touched
_session_handler_ids: List[int] = []
_default_handler_removed = False


def reset_logger() -> None:
    """Remove the handlers of the current session, closing its log file."""
    while _session_handler_ids:
        logger.remove(_session_handler_ids.pop())


def setup_logger(
    context_name: str,
    log_dir: Path,
    content_file: Optional[Path] = None,
    wcm_mode: Optional[str] = None,
) -> Path:
    """
    Start a logging session for a context.

    Calling it again replaces the previous session's handlers, so repeated
    setups in one process never duplicate output.

    Args:
        context_name: Context identifier, used as the log file name ("render", "component")
        log_dir: Directory for this session
        content_file: Content file the session processes
        wcm_mode: Authoring mode of a rendering session

    Returns:
        Path to log file

    Example:
        log_file = setup_logger(
            "render",
            Path("outs/logs/render_20251114_123456"),
            content_file=Path("about.yaml"),
            wcm_mode="edit",
        )
    """
    global _default_handler_removed

    log_dir.mkdir(exist_ok=True, parents=True)
    log_file = log_dir / f"{context_name}.log"

    reset_logger()
    if not _default_handler_removed:
        # loguru's stderr handler would duplicate console output
        try:
            logger.remove(0)
        except ValueError:
            pass
        _default_handler_removed = True

    _session_handler_ids.append(logger.add(log_file, format=FILE_FORMAT, level="DEBUG"))
    _session_handler_ids.append(
        logger.add(sys.stdout, format=CONSOLE_FORMAT, level="INFO", colorize=True)
    )

    log_provenance(context_name, content_file, wcm_mode)

    return log_file


def log_provenance(
    context_name: str, content_file: Optional[Path] = None, wcm_mode: Optional[str] = None
) -> None:
    """
    Log the session header: command, environment and what is being processed.

    Args:
        context_name: Context of the session
        content_file: Content file the session processes
        wcm_mode: Authoring mode of a rendering session
    """
    logger.info("=" * 80)
    logger.info(f"Command: {' '.join(sys.argv)}")
    logger.info(f"Working directory: {Path.cwd()}")
    logger.info(f"Python: {sys.version.split()[0]} | wknd {wknd.__version__}")
    logger.info(f"Context: {context_name}")
    if content_file is not None:
        logger.info(f"Content file: {Path(content_file).resolve()}")
    if wcm_mode is not None:
        logger.info(f"WCM mode: {wcm_mode}")
    logger.info("=" * 80)
