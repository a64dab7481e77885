from __future__ import annotations

"""
Unit tests for the Tree Builder.

Verifies the depth-budget insertion algorithm with an injected stat lookup,
so no real filesystem is involved:
1. Budget bookkeeping and 'omitted' signaling.
2. Lazy creation of intermediate directories.
3. Order independence of insertion.
"""

import itertools
import os
from typing import List, Optional

import pytest

from dirtree.core.analysis.tree_builder import TreeBuilder, insert_entry
from dirtree.domain.errors import PathResolutionError
from dirtree.domain.tree_models import EntryKind, EntryMetadata, TreeNode


class FakeStat:
    """Stat lookup: names containing a dot are files, everything else a directory."""

    def __init__(self, missing: Optional[List[str]] = None) -> None:
        self.calls: List[str] = []
        self.missing = set(missing or [])

    def __call__(self, path: str, name: Optional[str] = None) -> EntryMetadata:
        self.calls.append(path)
        if path in self.missing:
            raise PathResolutionError(path)
        name = name if name is not None else os.path.basename(path) or path
        kind = EntryKind.REGULAR if "." in name and name != "." else EntryKind.DIRECTORY
        return EntryMetadata(name=name, kind=kind, mode=0o644)


def _build(paths: List[str], depth: int) -> TreeNode:
    builder = TreeBuilder(".", depth, stat=FakeStat())
    return builder.add_paths(paths)


def _shape(node: TreeNode):
    """Order-free structural fingerprint of a tree."""
    return (
        node.name,
        node.remaining_depth,
        node.omitted,
        tuple(_shape(c) for c in node.sorted_children()),
    )


def _max_depth(node: TreeNode, level: int = 0) -> int:
    return max([level] + [_max_depth(c, level + 1) for c in node.children.values()])

# -----------------------------------------------------------------------------
# INSERTION ALGORITHM
# -----------------------------------------------------------------------------

def test_root_node_uses_base_name_and_budget() -> None:
    builder = TreeBuilder(".", 3, stat=FakeStat())
    assert builder.root.name == "."
    assert builder.root.remaining_depth == 3
    assert builder.root.children == {}


def test_terminal_entry_gets_decremented_budget() -> None:
    root = _build(["a.txt"], depth=2)
    child = root.children["a.txt"]
    assert child.remaining_depth == 1
    assert child.metadata.kind is EntryKind.REGULAR


def test_intermediate_directories_are_created_lazily() -> None:
    stat = FakeStat()
    builder = TreeBuilder(".", 3, stat=stat)

    builder.add_path("src/pkg/util.go")

    src = builder.root.children["src"]
    pkg = src.children["pkg"]
    assert src.remaining_depth == 2
    assert pkg.remaining_depth == 1
    assert pkg.children["util.go"].remaining_depth == 0
    assert os.path.join(".", "src") in stat.calls
    assert os.path.join(".", "src", "pkg") in stat.calls


def test_existing_intermediate_is_reused() -> None:
    root = _build(["src/a.go", "src/b.go"], depth=2)
    assert sorted(root.children["src"].children) == ["a.go", "b.go"]


def test_exhausted_budget_marks_omitted_instead_of_creating() -> None:
    """A node with zero budget never acquires children."""
    root = _build(["src/pkg/util.go"], depth=1)

    src = root.children["src"]
    assert src.remaining_depth == 0
    assert src.omitted is True
    assert src.children == {}


def test_zero_depth_root_is_omitted() -> None:
    root = _build(["a.txt", "b/c.txt"], depth=0)
    assert root.omitted is True
    assert root.children == {}


def test_empty_segments_are_a_noop() -> None:
    node = TreeNode(name=".", metadata=FakeStat()(".", "."), remaining_depth=2)
    insert_entry(node, [], FakeStat()("x.txt", "x.txt"), ".")
    assert node.children == {}
    assert node.omitted is False


def test_reinserting_a_directory_keeps_its_children() -> None:
    """Re-inserting the same terminal overwrites metadata only."""
    root = _build(["src/a.go", "src"], depth=2)
    assert list(root.children["src"].children) == ["a.go"]


def test_add_path_accepts_native_separators() -> None:
    root = _build([os.path.join("src", "main.go")], depth=2)
    assert "main.go" in root.children["src"].children


def test_stat_failure_names_the_path() -> None:
    missing = os.path.join(".", "gone.txt")
    builder = TreeBuilder(".", 2, stat=FakeStat(missing=[missing]))

    with pytest.raises(PathResolutionError) as exc:
        builder.add_path("gone.txt")

    assert "gone.txt" in str(exc.value)

# -----------------------------------------------------------------------------
# PROPERTIES
# -----------------------------------------------------------------------------

PATHS = [
    "README.md",
    "src/main.go",
    "src/pkg/util.go",
    "src/pkg/deep/leaf.txt",
    "docs/guide.md",
]


@pytest.mark.parametrize("depth", [0, 1, 2, 3, 4])
def test_no_node_deeper_than_budget(depth: int) -> None:
    root = _build(PATHS, depth)
    assert _max_depth(root) <= depth


@pytest.mark.parametrize("depth,omitted", [
    (0, {"."}),
    (1, {"src", "docs"}),
    (2, {"pkg"}),
    (3, {"deep"}),
    (4, set()),
])
def test_exactly_boundary_directories_are_omitted(depth: int, omitted: set) -> None:
    root = _build(PATHS, depth)

    found = set()
    stack = [root]
    while stack:
        node = stack.pop()
        if node.omitted:
            found.add(node.name)
            assert node.children == {}
        stack.extend(node.children.values())

    assert found == omitted


@pytest.mark.parametrize("depth", [1, 2, 3])
def test_insertion_order_does_not_change_shape(depth: int) -> None:
    expected = _shape(_build(PATHS, depth))
    for perm in itertools.permutations(PATHS):
        assert _shape(_build(list(perm), depth)) == expected
