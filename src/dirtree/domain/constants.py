from __future__ import annotations

"""
Domain Constants and Static Data Structures.

Centralizes discovery and color modes, environment variable names,
defaults and the glyphs used to draw the tree.
"""

from typing import Dict, FrozenSet, List

# -----------------------------------------------------------------------------
# MODES
# -----------------------------------------------------------------------------

class FileMode:
    """Identifiers for the file discovery strategies."""
    GIT = "git"
    FILE = "file"
    AUTO = "auto"

    ALL: List[str] = [GIT, FILE, AUTO]


class ColorMode:
    """Identifiers for the color activation policies."""
    AUTO = "auto"
    ALWAYS = "always"
    NEVER = "never"

    ALL: List[str] = [AUTO, ALWAYS, NEVER]

# -----------------------------------------------------------------------------
# DEFAULTS AND ENVIRONMENT
# -----------------------------------------------------------------------------

DEFAULT_PATH = "."
DEFAULT_DEPTH = 2
ROOT_MARKER = "."

ENV_FILE_MODE = "FILE_MODE"
ENV_COLOR_MODE = "COLOR_MODE"
ENV_LS_COLORS = "LS_COLORS"

# -----------------------------------------------------------------------------
# RENDERING GLYPHS
# -----------------------------------------------------------------------------

BRANCH = "├── "
LAST_BRANCH = "└── "
OMITTED_MARKER = "..."

# Indentation inherited by the children of an entry printed with a connector
CONTINUATION: Dict[str, str] = {
    "": "",
    BRANCH: "│   ",
    LAST_BRANCH: "    ",
}

# -----------------------------------------------------------------------------
# COLOR RULES
# -----------------------------------------------------------------------------

COLOR_TEMPLATE = "\033[%sm"
DEFAULT_DIRECTORY_CODE = "01;34"
DEFAULT_RESET_CODE = "0"

# dircolors(5) keys that are understood but carry no meaning for a tree listing
IGNORED_COLOR_KEYS: FrozenSet[str] = frozenset({
    "no", "fi", "mh", "pi", "so", "do", "bd", "cd", "or", "mi",
    "su", "sg", "ca", "tw", "ow", "st", "lc", "rc", "ec", "cl",
})
