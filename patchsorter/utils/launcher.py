"""
launcher.py - Open files with the OS default handler
"""
import logging
import os
import subprocess
import sys

logger = logging.getLogger(__name__)


def open_path(path: str) -> None:
    """Hand ``path`` to the desktop's default application. Raises OSError."""
    if not os.path.exists(path):
        raise FileNotFoundError(path)
    if sys.platform == "win32":
        os.startfile(path)
    elif sys.platform == "darwin":
        subprocess.Popen(["open", path])
    else:
        subprocess.Popen(["xdg-open", path])
    logger.debug("Opened %s", path)
