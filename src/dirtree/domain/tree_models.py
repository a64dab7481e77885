from __future__ import annotations

"""
Directory Tree Structure Data Models.

Provides the entry metadata snapshot, the recursive node used to build
depth-limited hierarchies, and the result object returned by the pipeline.
"""

import os
import stat
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Tuple

# -----------------------------------------------------------------------------
# ENTRY METADATA
# -----------------------------------------------------------------------------

class EntryKind(str, Enum):
    """Filesystem entry classification relevant for formatting."""
    DIRECTORY = "directory"
    REGULAR = "regular"
    SYMLINK = "symlink"
    OTHER = "other"


@dataclass(frozen=True)
class EntryMetadata:
    """
    Snapshot of an lstat result. No file content is ever read.

    Attributes:
        name: Final path segment of the entry.
        kind: Entry classification (symbolic links are not followed).
        mode: Permission bits of the entry.
    """
    name: str
    kind: EntryKind
    mode: int = 0

    @classmethod
    def from_stat(cls, name: str, st: os.stat_result) -> "EntryMetadata":
        """Build metadata from an os.lstat() result."""
        fmt = st.st_mode
        if stat.S_ISLNK(fmt):
            kind = EntryKind.SYMLINK
        elif stat.S_ISDIR(fmt):
            kind = EntryKind.DIRECTORY
        elif stat.S_ISREG(fmt):
            kind = EntryKind.REGULAR
        else:
            kind = EntryKind.OTHER
        return cls(name=name, kind=kind, mode=stat.S_IMODE(fmt))

    @property
    def is_dir(self) -> bool:
        return self.kind is EntryKind.DIRECTORY

    @property
    def is_symlink(self) -> bool:
        return self.kind is EntryKind.SYMLINK

    @property
    def is_executable(self) -> bool:
        return self.kind is EntryKind.REGULAR and bool(self.mode & 0o111)

    @property
    def extension(self) -> str:
        """Text from the last dot of the name, inclusive (dotfiles included)."""
        idx = self.name.rfind(".")
        return self.name[idx:] if idx >= 0 else ""

# -----------------------------------------------------------------------------
# STRUCTURAL COMPONENTS
# -----------------------------------------------------------------------------

@dataclass
class TreeNode:
    """
    One materialized entry of the tree.

    Attributes:
        name: Final path segment (the root keeps its base name, '.' for cwd).
        metadata: Entry metadata used for formatting.
        remaining_depth: How many further levels may be materialized below.
        omitted: True when real children exist but the budget ran out here.
        children: Child nodes keyed by name. Unordered; use sorted_children().
    """
    name: str
    metadata: EntryMetadata
    remaining_depth: int
    omitted: bool = False
    children: Dict[str, "TreeNode"] = field(default_factory=dict)

    @property
    def is_dir(self) -> bool:
        return self.metadata.is_dir

    def sorted_children(self) -> List["TreeNode"]:
        """Children in name order, the only order rendering relies on."""
        return [self.children[k] for k in sorted(self.children)]

    def count_entries(self) -> Tuple[int, int]:
        """
        Count materialized descendants.

        Returns:
            Tuple[int, int]: (directories, files) below this node.
        """
        directories = 0
        files = 0
        for child in self.children.values():
            if child.is_dir:
                directories += 1
                sub_dirs, sub_files = child.count_entries()
                directories += sub_dirs
                files += sub_files
            else:
                files += 1
        return directories, files

    def to_dict(self) -> Dict[str, Any]:
        """Serialize the subtree into JSON-compatible primitives."""
        data: Dict[str, Any] = {
            "name": self.name,
            "type": self.metadata.kind.value,
        }
        if self.is_dir:
            if self.omitted:
                data["omitted"] = True
            else:
                data["children"] = [c.to_dict() for c in self.sorted_children()]
        return data

# -----------------------------------------------------------------------------
# PIPELINE RESULT
# -----------------------------------------------------------------------------

@dataclass(frozen=True)
class TreeResult:
    """
    Outcome of a complete tree run.

    Attributes:
        root: Root node of the materialized tree.
        lines: Rendered output lines (no trailing newlines).
        file_mode: Effective discovery mode after 'auto' resolution.
        directories: Number of materialized directories below the root.
        files: Number of materialized non-directory entries below the root.
    """
    root: TreeNode
    lines: List[str] = field(default_factory=list)
    file_mode: str = ""
    directories: int = 0
    files: int = 0

    @property
    def report(self) -> str:
        return f"{self.directories} directories, {self.files} files"
