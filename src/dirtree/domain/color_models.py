from __future__ import annotations

"""
Color Rule Data Models.

Holds the already-wrapped terminal escape sequences resolved from an
LS_COLORS-style string.
"""

from dataclasses import dataclass
from typing import Dict, Optional

from dirtree.domain.constants import (
    COLOR_TEMPLATE,
    DEFAULT_DIRECTORY_CODE,
    DEFAULT_RESET_CODE,
)


def wrap_code(code: str) -> str:
    """Turn a raw SGR code such as '01;34' into an escape sequence."""
    return COLOR_TEMPLATE % code


@dataclass(frozen=True)
class ColorRuleSet:
    """
    Category and extension formatting table.

    An empty string for a category means no formatting for it. A missing
    extension table (None) disables coloring entirely, while an empty
    table keeps category coloring active.

    Attributes:
        directory: Escape for directories ('di').
        executable: Escape for executable regular files ('ex').
        link: Escape for symbolic links ('ln').
        reset: Escape appended after every formatted name ('rs').
        extensions: Extension (text after '*') to escape mapping.
    """
    directory: str = ""
    executable: str = ""
    link: str = ""
    reset: str = ""
    extensions: Optional[Dict[str, str]] = None

    @property
    def enabled(self) -> bool:
        return self.extensions is not None

    @classmethod
    def disabled(cls) -> "ColorRuleSet":
        return cls()

    @classmethod
    def default(cls) -> "ColorRuleSet":
        """Directory-only palette used when no valid LS_COLORS is available."""
        return cls(
            directory=wrap_code(DEFAULT_DIRECTORY_CODE),
            reset=wrap_code(DEFAULT_RESET_CODE),
            extensions={},
        )
