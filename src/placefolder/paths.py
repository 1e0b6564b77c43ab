"""Config location resolution.

Resolves the registry file and related defaults. Uses environment
variables when available, falls back to conventional defaults.

Environment variables:
    PF_CONFIG_PATH — registry file (default: ~/.pf.conf.json)
    PF_EDITOR — editor for ``pf open`` (default: code)
    PF_LOG — logging level name (default: WARNING)
"""

from __future__ import annotations

import logging
import os
from pathlib import Path

from placefolder.errors import ConfigLocationError

REGISTRY_FILENAME = ".pf.conf.json"
DEFAULT_EDITOR = "code"
DEFAULT_LOG_LEVEL = "WARNING"


def home_dir() -> Path:
    """Return the user's home directory.

    Raises:
        ConfigLocationError: If the home directory cannot be determined.
    """
    try:
        return Path.home()
    except (RuntimeError, KeyError) as e:
        raise ConfigLocationError(f"Cannot find home directory: {e}") from e


def registry_path() -> Path:
    """Return the path to the registry file."""
    env = os.environ.get("PF_CONFIG_PATH")
    if env:
        return Path(env).expanduser()
    return home_dir() / REGISTRY_FILENAME


def default_editor() -> str:
    """Return the editor command used by ``pf open``."""
    return os.environ.get("PF_EDITOR") or DEFAULT_EDITOR


def log_level() -> str:
    """Return the configured logging level name, ignoring unknown names."""
    name = (os.environ.get("PF_LOG") or DEFAULT_LOG_LEVEL).upper()
    if not isinstance(logging.getLevelName(name), int):
        return DEFAULT_LOG_LEVEL
    return name
