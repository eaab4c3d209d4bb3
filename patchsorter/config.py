"""
config.py - Path resolution and application constants
Paper Patch Sorter v1.0
"""

import os
import sys

# ---------------------------------------------------------------------------
# Path resolution (PyInstaller aware)
# ---------------------------------------------------------------------------


def get_base_path() -> str:
    """
    Return the directory the sorter works in.
    - PATCHSORTER_BASE_DIR set : that directory
    - frozen exe               : the directory holding the exe
    - script                   : the current working directory
    """
    override = os.environ.get("PATCHSORTER_BASE_DIR")
    if override:
        return override
    if getattr(sys, "frozen", False):
        return os.path.dirname(sys.executable)
    return os.getcwd()


BASE_PATH = get_base_path()

# Upstream checkout that provides the patch files
PAPER_REPO_URL = os.environ.get(
    "PATCHSORTER_REPO_URL", "https://github.com/PaperMC/Paper"
)
CLONE_DIR = os.path.join(BASE_PATH, "paper")
PATCHES_DIR = os.path.join(CLONE_DIR, "patches", "server")
PATCH_EXTENSION = ".patch"

# Tag file: written to a sibling temp file, then replaced atomically
CATEGORIES_FILE = os.path.join(BASE_PATH, "paper-categories.csv")
CATEGORIES_TEMP_SUFFIX = ".swp"
CSV_HEADER = "patch,categories..."

# ---------------------------------------------------------------------------
# App constants
# ---------------------------------------------------------------------------

APP_TITLE = "Paper Patch Sorter"
WINDOW_WIDTH = 640
WINDOW_HEIGHT = 480

# ---------------------------------------------------------------------------
# Colour palette
# ---------------------------------------------------------------------------

COLOR_BG = "#F0F2F5"
COLOR_CARD = "#FFFFFF"
COLOR_BORDER = "#D0D7DE"
COLOR_TEXT_MUTED = "#656D76"
COLOR_TEXT_MAIN = "#1F2328"
COLOR_PRIMARY = "#0969DA"
COLOR_DANGER = "#CF222E"

# Alternating list rows
COLOR_ROW_EVEN = "#FFFFFF"
COLOR_ROW_ODD = "#D3D3D3"
COLOR_ROW_SELECTED = "#DDF4FF"

BORDER_RADIUS_CARD = 10
