"""Launch an editor on a project path."""

import logging
import subprocess

from placefolder.errors import EditorLaunchError

logger = logging.getLogger(__name__)


def open_in_editor(editor: str, path: str) -> subprocess.CompletedProcess:
    """Run ``editor path`` and wait for it to return.

    Raises:
        EditorLaunchError: If the editor executable cannot be started.
    """
    logger.debug("Launching %s %s", editor, path)
    try:
        return subprocess.run([editor, path])
    except OSError as e:
        raise EditorLaunchError(f"Failed to launch '{editor}'. Is it installed?") from e
