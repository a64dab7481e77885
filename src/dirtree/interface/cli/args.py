from __future__ import annotations

"""
CLI Argument Definition and Mapping.

Defines the command-line schema and translates the parsed namespace into
configuration overrides. Flags default to None so that environment
overrides survive unless a flag is given explicitly.
"""

import argparse
from typing import Any, Dict

from dirtree.domain.constants import (
    DEFAULT_DEPTH,
    ENV_COLOR_MODE,
    ENV_FILE_MODE,
    ColorMode,
    FileMode,
)

# -----------------------------------------------------------------------------
# ARGUMENT DEFINITION
# -----------------------------------------------------------------------------

def build_parser() -> argparse.ArgumentParser:
    """
    Construct the argument parser for the dirtree CLI.

    Returns:
        argparse.ArgumentParser: Configured parser instance.
    """
    p = argparse.ArgumentParser(
        prog="dirtree",
        description="Print a depth-limited tree of a directory, git-aware and colored.",
    )

    # --- Traversal ---
    p.add_argument(
        "path",
        nargs="?",
        default=None,
        help="Path to use as the tree root (default: current directory).",
    )
    p.add_argument(
        "-D", "--depth",
        type=int,
        default=None,
        help=f"Max depth to recurse (default: {DEFAULT_DEPTH}).",
    )
    p.add_argument(
        "-F", "--file-mode",
        dest="file_mode",
        choices=FileMode.ALL,
        default=None,
        help=f"How to discover files (default: auto, env: {ENV_FILE_MODE}).",
    )

    # --- Presentation ---
    p.add_argument(
        "-C", "--color-mode",
        dest="color_mode",
        choices=ColorMode.ALL,
        default=None,
        help=f"When to use colors (default: auto, env: {ENV_COLOR_MODE}).",
    )
    p.add_argument(
        "--report",
        action="store_true",
        help="Append a 'N directories, M files' summary line.",
    )
    p.add_argument(
        "--json",
        dest="json_output",
        action="store_true",
        help="Print the tree as JSON instead of text.",
    )

    # --- Diagnostics ---
    p.add_argument(
        "--dump-config",
        action="store_true",
        help="Print the resolved configuration and exit.",
    )
    p.add_argument(
        "--debug",
        action="store_true",
        help="Elevate logging verbosity to DEBUG.",
    )
    p.add_argument(
        "--log-file",
        dest="log_file",
        default=None,
        help="Also write logs to this file (rotated).",
    )

    return p

# -----------------------------------------------------------------------------
# ARGUMENT MAPPING
# -----------------------------------------------------------------------------

def args_to_overrides(args: argparse.Namespace) -> Dict[str, Any]:
    """
    Translate the argparse Namespace into a configuration dictionary.

    Args:
        args: Parsed command-line arguments.

    Returns:
        Dict[str, Any]: Configuration overrides (None means not given).
    """
    overrides: Dict[str, Any] = {
        "path": args.path,
        "depth": args.depth,
        "file_mode": args.file_mode,
        "color_mode": args.color_mode,
    }

    if args.report:
        overrides["report"] = True
    if args.json_output:
        overrides["json_output"] = True

    return overrides
