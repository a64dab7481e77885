from __future__ import annotations

"""
Command Line Interface (CLI) Application Controller.

Orchestrates the CLI lifecycle: logging bootstrap, configuration layering
(defaults, environment, flags), validation, pipeline execution and output.
"""

import argparse
import json
import os
import sys
from typing import Callable, List, Optional, TextIO

from dirtree.core.pipeline.engine import run_tree
from dirtree.core.pipeline.stages.validator import validate_config
from dirtree.core.services.colors import stream_is_terminal
from dirtree.domain.config import apply_env_overrides, get_default_config, merge_config
from dirtree.domain.errors import DirtreeError
from dirtree.domain.tree_models import TreeResult
from dirtree.infra.logging import LoggingConfig, configure_logging, get_logger, shutdown_logging
from dirtree.infra.vcs import VersionControlLister
from dirtree.interface.cli import args as cli_args

logger = get_logger(__name__)

# -----------------------------------------------------------------------------
# ENTRYPOINT ORCHESTRATOR
# -----------------------------------------------------------------------------

def main(
        argv: Optional[List[str]] = None,
        *,
        stdout: Optional[TextIO] = None,
        env: Callable[[str], Optional[str]] = os.environ.get,
        lister: Optional[VersionControlLister] = None,
) -> int:
    """
    Execute the CLI workflow.

    Args:
        argv: Optional list of command line arguments. Defaults to sys.argv.
        stdout: Output stream. Defaults to sys.stdout.
        env: Environment lookup.
        lister: Version-control capability override.

    Returns:
        int: Process exit code (0 for success, non-zero for failure).
    """
    if sys.platform == "win32":
        if hasattr(sys.stdout, "reconfigure"):
            sys.stdout.reconfigure(encoding="utf-8")
        if hasattr(sys.stderr, "reconfigure"):
            sys.stderr.reconfigure(encoding="utf-8")

    out = stdout if stdout is not None else sys.stdout

    # 1. Argument parsing phase
    parser = cli_args.build_parser()
    args = parser.parse_args(argv)

    # 2. Logging bootstrap (stderr, never interleaved with the tree)
    log_level = "DEBUG" if args.debug else "WARNING"
    configure_logging(LoggingConfig(level=log_level, console=True, log_file=args.log_file), force=True)

    try:
        return _execute(args, out, env, lister)
    finally:
        shutdown_logging()


def _execute(
        args: argparse.Namespace,
        out: TextIO,
        env: Callable[[str], Optional[str]],
        lister: Optional[VersionControlLister],
) -> int:
    """Run everything after argument parsing and logging bootstrap."""
    # 3. Configuration layering: defaults < environment < flags
    raw_conf = apply_env_overrides(get_default_config(), env)
    raw_conf = merge_config(raw_conf, cli_args.args_to_overrides(args))

    try:
        conf, _ = validate_config(raw_conf, strict=True)
    except DirtreeError as e:
        logger.debug("Configuration rejected", exc_info=True)
        print(f"ERROR: {e}", file=sys.stderr)
        return 1

    if args.dump_config:
        print(json.dumps(conf, ensure_ascii=False, indent=2), file=out)
        return 0

    # 4. Pipeline execution phase
    try:
        result = run_tree(
            conf,
            lister=lister,
            is_terminal=lambda: stream_is_terminal(out),
            env=env,
        )
    except KeyboardInterrupt:
        print("Interrupted.", file=sys.stderr)
        return 130
    except DirtreeError as e:
        logger.debug("Tree generation failed", exc_info=True)
        print(f"ERROR: finding files: {e}", file=sys.stderr)
        return 1

    # 5. Output rendering phase
    if conf["json_output"]:
        _print_json(result, out)
    else:
        _print_tree(result, out, report=conf["report"])
    return 0

# -----------------------------------------------------------------------------
# VIEW RENDERING
# -----------------------------------------------------------------------------

def _print_tree(result: TreeResult, out: TextIO, report: bool) -> None:
    """Write one line per node, plus the optional summary."""
    out.write("\n".join(result.lines) + "\n")
    if report:
        out.write("\n" + result.report + "\n")
    out.flush()


def _print_json(result: TreeResult, out: TextIO) -> None:
    payload = {
        "file_mode": result.file_mode,
        "directories": result.directories,
        "files": result.files,
        "tree": result.root.to_dict(),
    }
    print(json.dumps(payload, ensure_ascii=False, indent=2), file=out)

# -----------------------------------------------------------------------------
# CLI ENTRYPOINT
# -----------------------------------------------------------------------------

if __name__ == "__main__":
    sys.exit(main())
