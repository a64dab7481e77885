from __future__ import annotations

"""
dirtree: depth-limited, git-aware directory trees with LS_COLORS support.
"""

__version__ = "0.1.0"
