from __future__ import annotations

"""
Directory Tree Builder.

Incrementally materializes a TreeNode hierarchy from root-relative path
segments. Every node carries a depth budget; once a node's budget is spent,
further descendants only flag it as 'omitted' instead of creating nodes.
"""

import logging
import os
from typing import Callable, List, Optional, Sequence

from dirtree.domain.tree_models import EntryMetadata, TreeNode
from dirtree.infra.fs import root_name, split_relative, stat_entry

logger = logging.getLogger(__name__)

# (path, display name) -> metadata
StatLookup = Callable[[str, Optional[str]], EntryMetadata]

# -----------------------------------------------------------------------------
# CORE INSERTION ALGORITHM
# -----------------------------------------------------------------------------

def insert_entry(
        node: TreeNode,
        segments: Sequence[str],
        metadata: EntryMetadata,
        parent_path: str,
        stat: StatLookup = stat_entry,
) -> None:
    """
    Insert an entry below a node.

    Args:
        node: Node to insert into.
        segments: Path of the entry relative to the node.
        metadata: Resolved metadata of the terminal entry.
        parent_path: Filesystem path of the node, used to stat intermediates.
        stat: Metadata lookup for intermediate directories.
    """
    if node.remaining_depth <= 0:
        node.omitted = True
        return

    if not segments:
        return

    if len(segments) == 1:
        existing = node.children.get(metadata.name)
        if existing is not None:
            # Descendants inserted earlier through this slot are kept
            existing.metadata = metadata
            return
        node.children[metadata.name] = TreeNode(
            name=metadata.name,
            metadata=metadata,
            remaining_depth=node.remaining_depth - 1,
        )
        return

    head = segments[0]
    child_path = os.path.join(parent_path, head)

    existing = node.children.get(head)
    if existing is not None:
        insert_entry(existing, segments[1:], metadata, child_path, stat)
        return

    child = TreeNode(
        name=head,
        metadata=stat(child_path, head),
        remaining_depth=node.remaining_depth - 1,
    )
    insert_entry(child, segments[1:], metadata, child_path, stat)
    node.children[head] = child

# -----------------------------------------------------------------------------
# BUILDER FACADE
# -----------------------------------------------------------------------------

class TreeBuilder:
    """
    Owns the root node of a tree under construction.

    Args:
        root_path: Filesystem path of the traversal root.
        max_depth: Number of directory levels materialized below the root.
        stat: Metadata lookup, injectable for tests.
    """

    def __init__(self, root_path: str, max_depth: int, stat: StatLookup = stat_entry) -> None:
        self.root_path = root_path
        self.max_depth = max_depth
        self._stat = stat

        name = root_name(root_path)
        self.root = TreeNode(
            name=name,
            metadata=stat(root_path, name),
            remaining_depth=max_depth,
        )

    def add_entry(self, segments: Sequence[str], metadata: EntryMetadata) -> None:
        """Insert an entry whose metadata is already known."""
        insert_entry(self.root, segments, metadata, self.root_path, self._stat)

    def add_path(self, relative: str) -> None:
        """
        Stat and insert a root-relative path.

        Raises:
            PathResolutionError: If the path cannot be stat'd.
        """
        segments = split_relative(relative)
        if not segments:
            return
        metadata = self._stat(os.path.join(self.root_path, *segments), segments[-1])
        self.add_entry(segments, metadata)

    def add_paths(self, paths: List[str]) -> TreeNode:
        for relative in paths:
            self.add_path(relative)
        return self.root
