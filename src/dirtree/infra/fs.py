from __future__ import annotations

"""
FileSystem Infrastructure Layer.

Thin wrappers over 'os' used by the tree builder: lstat lookups translated
into domain metadata and path helpers for relative segment handling.
"""

import os
from typing import List, Optional

from dirtree.domain.errors import PathResolutionError
from dirtree.domain.tree_models import EntryMetadata

# -----------------------------------------------------------------------------
# STAT API
# -----------------------------------------------------------------------------

def stat_entry(path: str, name: Optional[str] = None) -> EntryMetadata:
    """
    Resolve metadata for a path without following symbolic links.

    Args:
        path: Filesystem path to inspect.
        name: Display name to record. Defaults to the path's base name.

    Returns:
        EntryMetadata: Snapshot of the entry.

    Raises:
        PathResolutionError: If the path cannot be stat'd.
    """
    try:
        st = os.lstat(path)
    except OSError as e:
        raise PathResolutionError(path, e) from e
    return EntryMetadata.from_stat(name if name is not None else root_name(path), st)

# -----------------------------------------------------------------------------
# PATH HELPERS
# -----------------------------------------------------------------------------

def root_name(path: str) -> str:
    """
    Base name used for the root node ('.' stays '.', '/a/b/' becomes 'b').
    """
    normalized = os.path.normpath(path)
    return os.path.basename(normalized) or normalized


def split_relative(relative: str) -> List[str]:
    """
    Split a root-relative path into segments.

    Accepts both '/' (git output) and the native separator. An empty or
    '.' path yields no segments.
    """
    if os.sep != "/":
        relative = relative.replace(os.sep, "/")
    return [p for p in relative.split("/") if p and p != "."]
