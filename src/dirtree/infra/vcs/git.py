from __future__ import annotations

"""
Git Client.

Runs the git executable in a blocking subprocess. Output is captured in full,
so process handles are released on every exit path.
"""

import logging
import subprocess
from typing import List

from dirtree.domain.errors import ExternalToolError
from dirtree.infra.vcs.base import VersionControlLister

logger = logging.getLogger(__name__)


class GitLister(VersionControlLister):
    """
    VersionControlLister backed by the 'git' command line tool.
    """

    def __init__(self, executable: str = "git") -> None:
        self.executable = executable

    def is_repository(self, root: str) -> bool:
        cmd = [self.executable, "-C", root, "status"]
        try:
            result = subprocess.run(cmd, capture_output=True)
        except OSError as e:
            logger.debug(f"failed to git status, falling back to file mode: {e}")
            return False
        if result.returncode != 0:
            logger.debug(
                f"git status exited with {result.returncode}, falling back to file mode"
            )
            return False
        return True

    def list_files(self, root: str) -> List[str]:
        cmd = [
            self.executable, "-C", root,
            "ls-files", "-z", "-o", "-c", "--exclude-standard",
        ]
        logger.debug(f"Listing files: {' '.join(cmd)}")
        try:
            result = subprocess.run(
                cmd,
                capture_output=True,
                text=True,
                encoding="utf-8",
                errors="surrogateescape",
            )
        except OSError as e:
            raise ExternalToolError(cmd, str(e)) from e

        if result.returncode != 0:
            detail = (result.stderr or "").strip() or f"exit status {result.returncode}"
            raise ExternalToolError(cmd, detail)

        return parse_listing(result.stdout)


def parse_listing(output: str) -> List[str]:
    """Split NUL-separated git output (ls-files -z), discarding empty entries."""
    return [entry for entry in output.split("\0") if entry]
