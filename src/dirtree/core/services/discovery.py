from __future__ import annotations

"""
File Discovery Service.

Feeds the tree builder from one of two sources: a depth-bounded walk of
the filesystem, or the file listing of a git working copy. Also infers
which source to use when the caller asks for automatic detection.
"""

import logging
import os

from dirtree.core.analysis.tree_builder import StatLookup, TreeBuilder
from dirtree.domain.constants import FileMode
from dirtree.domain.errors import ConfigurationError, TraversalError
from dirtree.domain.tree_models import TreeNode
from dirtree.infra.fs import split_relative, stat_entry
from dirtree.infra.vcs import VersionControlLister

logger = logging.getLogger(__name__)


# ==============================================================================
# MODE SELECTION
# ==============================================================================

def infer_file_mode(root: str, lister: VersionControlLister) -> str:
    """
    Pick 'git' when the root is inside a working copy, else 'file'.

    Failure to run the probe is not an error; it selects 'file'.
    """
    if lister.is_repository(root):
        logger.debug(f"{root} is a working copy, using git mode")
        return FileMode.GIT
    return FileMode.FILE


def resolve_file_mode(file_mode: str, root: str, lister: VersionControlLister) -> str:
    """
    Turn the requested mode into an effective one.

    Raises:
        ConfigurationError: On an unknown mode.
    """
    if file_mode == FileMode.AUTO:
        return infer_file_mode(root, lister)
    if file_mode in (FileMode.GIT, FileMode.FILE):
        return file_mode
    raise ConfigurationError("file_mode", file_mode, FileMode.ALL)


# ==============================================================================
# TREE SOURCES
# ==============================================================================

def build_git_tree(
        root: str,
        max_depth: int,
        lister: VersionControlLister,
        stat: StatLookup = stat_entry,
) -> TreeNode:
    """
    Build a tree from the tracked and untracked (non-ignored) files of a
    working copy.

    Raises:
        PathResolutionError: If the root or any listed path cannot be stat'd.
        ExternalToolError: If the listing command fails.
    """
    builder = TreeBuilder(root, max_depth, stat=stat)

    # A file or symlink root renders as its own name, git is never asked
    if not builder.root.is_dir:
        return builder.root

    paths = lister.list_files(root)
    logger.debug(f"git reported {len(paths)} paths under {root}")
    return builder.add_paths(paths)


def build_file_tree(root: str, max_depth: int, stat: StatLookup = stat_entry) -> TreeNode:
    """
    Build a tree from a single top-down walk of the filesystem.

    Directories sitting exactly on the depth boundary are listed so their
    node can be flagged as omitted, but never descended into.

    Raises:
        PathResolutionError: If the root or an entry cannot be stat'd.
        TraversalError: If any directory cannot be listed.
    """
    builder = TreeBuilder(root, max_depth, stat=stat)

    # A file or symlink root has nothing to walk
    if not builder.root.is_dir:
        return builder.root

    for dirpath, dirs, files in os.walk(root, onerror=_raise_traversal_error):
        rel_dir = split_relative(os.path.relpath(dirpath, root))
        names = sorted(dirs + files)

        # Entries below this directory would exceed max_depth + 1 segments
        if len(rel_dir) >= max_depth:
            dirs[:] = []

        for name in names:
            metadata = stat(os.path.join(dirpath, name), name)
            builder.add_entry(rel_dir + [name], metadata)

    return builder.root


def _raise_traversal_error(error: OSError) -> None:
    """os.walk error hook: abort the whole walk."""
    raise TraversalError(error.filename or str(error), error) from error
