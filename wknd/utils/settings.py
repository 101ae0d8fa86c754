"""
Settings loading for WKND components.

Packaged defaults live in wknd/settings.yaml. A user settings file named by the
WKND_SETTINGS_PATH environment variable is merged on top (later values win).

Examples:
    >>> settings = load_settings()
    >>> settings["rendering"]["occupation_separator"]
    ', '
"""

import os
from pathlib import Path
from typing import Any, Dict

from dotenv import load_dotenv
from omegaconf import OmegaConf

load_dotenv()
DEFAULT_SETTINGS_PATH = Path(__file__).resolve().parent.parent / "settings.yaml"


def load_settings(config_path: Path = None) -> Dict[str, Any]:
    """
    Load packaged default settings merged with an optional override file.

    Args:
        config_path: Optional override file (defaults to WKND_SETTINGS_PATH env variable)

    Returns:
        Plain nested dict of settings

    Raises:
        FileNotFoundError: If an explicitly named override file does not exist
    """
    if config_path is None and os.getenv("WKND_SETTINGS_PATH"):
        config_path = Path(os.getenv("WKND_SETTINGS_PATH"))

    settings = OmegaConf.load(DEFAULT_SETTINGS_PATH)

    if config_path is not None:
        config_path = Path(config_path)
        if not config_path.exists():
            raise FileNotFoundError(f"Settings file not found: {config_path}")
        settings = OmegaConf.merge(settings, OmegaConf.load(config_path))

    return OmegaConf.to_container(settings, resolve=True)
