from __future__ import annotations

"""
Tree Pipeline Engine.

Sequences a complete run: discovery mode resolution, tree construction,
color resolution and rendering. Every capability touching the outside
world (git, terminal probe, environment) is injected by the caller.
"""

import logging
import os
from typing import Any, Callable, Dict, Optional

from dirtree.core.analysis.tree_renderer import render_tree
from dirtree.core.services.colors import resolve_colors
from dirtree.core.services.discovery import (
    build_file_tree,
    build_git_tree,
    resolve_file_mode,
)
from dirtree.domain.constants import ColorMode, FileMode
from dirtree.domain.tree_models import TreeResult
from dirtree.infra.vcs import GitLister, VersionControlLister

logger = logging.getLogger(__name__)

# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def run_tree(
        config: Dict[str, Any],
        *,
        lister: Optional[VersionControlLister] = None,
        is_terminal: Callable[[], bool] = lambda: False,
        env: Callable[[str], Optional[str]] = os.environ.get,
) -> TreeResult:
    """
    Execute the tree pipeline for a validated configuration.

    Args:
        config: Normalized configuration (see validate_config).
        lister: Version-control capability. Defaults to GitLister.
        is_terminal: Probe for the output stream.
        env: Environment lookup used for color rules.

    Returns:
        TreeResult: Built tree, rendered lines and entry counts.

    Raises:
        DirtreeError: On any fatal discovery, traversal or configuration error.
    """
    lister = lister or GitLister()
    root = config["path"]
    depth = config["depth"]

    # 1. Discovery mode
    file_mode = resolve_file_mode(config["file_mode"], root, lister)
    logger.debug(f"Building tree for {root} (mode={file_mode}, depth={depth})")

    # 2. Tree construction
    if file_mode == FileMode.GIT:
        tree = build_git_tree(root, depth, lister)
    else:
        tree = build_file_tree(root, depth)

    # 3. Rendering (JSON output is never colored)
    color_mode = ColorMode.NEVER if config.get("json_output") else config["color_mode"]
    rules = resolve_colors(color_mode, is_terminal, env)
    lines = render_tree(tree, rules)

    directories, files = tree.count_entries()
    logger.debug(f"Rendered {len(lines)} lines ({directories} directories, {files} files)")

    return TreeResult(
        root=tree,
        lines=lines,
        file_mode=file_mode,
        directories=directories,
        files=files,
    )
