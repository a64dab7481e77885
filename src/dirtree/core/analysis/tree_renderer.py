from __future__ import annotations

"""
Tree Renderer.

Converts a TreeNode hierarchy into box-drawing text lines. Entry names are
passed through the color formatter; indentation is derived per call from
the connector the entry was printed with.
"""

from typing import List, Optional

from dirtree.core.services.colors import format_name
from dirtree.domain.color_models import ColorRuleSet
from dirtree.domain.constants import (
    BRANCH,
    CONTINUATION,
    LAST_BRANCH,
    OMITTED_MARKER,
    ROOT_MARKER,
)
from dirtree.domain.tree_models import TreeNode

# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def render_tree(
        node: TreeNode,
        rules: Optional[ColorRuleSet] = None,
        lines: Optional[List[str]] = None,
) -> List[str]:
    """
    Render a tree into a list of strings, root first.

    Args:
        node: Root node of the tree.
        rules: Color rules. None renders without formatting.
        lines: Optional accumulator to append to.

    Returns:
        List[str]: The accumulator with one entry per output line.
    """
    if lines is None:
        lines = []
    _render_node(node, rules or ColorRuleSet.disabled(), lines, indent="", connector="", is_root=True)
    return lines

# -----------------------------------------------------------------------------
# RECURSION
# -----------------------------------------------------------------------------

def _render_node(
        node: TreeNode,
        rules: ColorRuleSet,
        lines: List[str],
        indent: str,
        connector: str,
        is_root: bool = False,
) -> None:
    """
    Emit a node and, for directories, its subtree.

    Args:
        node: Node to print.
        rules: Color rules.
        lines: Accumulator list for output strings.
        indent: Indentation inherited from the ancestors.
        connector: Glyph placed before this node's name ('' for the root).
        is_root: Whether the node is the traversal root.
    """
    if not node.is_dir:
        lines.append(f"{indent}{connector}{format_name(node.name, node.metadata, rules)}")
        return

    if is_root and node.name == ROOT_MARKER:
        label = ROOT_MARKER
    else:
        label = format_name(node.name, node.metadata, rules) + "/"
    lines.append(f"{indent}{connector}{label}")

    child_indent = indent + CONTINUATION[connector]

    if node.omitted:
        lines.append(f"{child_indent}{LAST_BRANCH}{OMITTED_MARKER}")
        return

    children = node.sorted_children()
    total = len(children)
    for i, child in enumerate(children):
        child_connector = LAST_BRANCH if i == total - 1 else BRANCH
        _render_node(child, rules, lines, indent=child_indent, connector=child_connector)
