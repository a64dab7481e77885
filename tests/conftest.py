from __future__ import annotations

"""
Global Pytest Configuration and Fixtures.

This module sets up the testing environment, including:
1. Path manipulation to ensure the 'src' directory is importable.
2. Shared fixtures: a sample directory layout and a fake git lister.
"""

import os
import sys
from pathlib import Path
from typing import List, Optional, Type

import pytest

# -----------------------------------------------------------------------------
# Path Configuration
# -----------------------------------------------------------------------------
_SRC_PATH = os.path.abspath(os.path.join(os.path.dirname(__file__), "..", "src"))
if _SRC_PATH not in sys.path:
    sys.path.insert(0, _SRC_PATH)

from dirtree.domain.errors import ExternalToolError  # noqa: E402
from dirtree.infra.vcs import VersionControlLister  # noqa: E402


# -----------------------------------------------------------------------------
# Test Doubles
# -----------------------------------------------------------------------------
class FakeLister(VersionControlLister):
    """In-memory VersionControlLister returning a fixed listing."""

    def __init__(self, paths: Optional[List[str]] = None, repository: bool = True) -> None:
        self.paths = paths or []
        self.repository = repository
        self.listed: List[str] = []

    def is_repository(self, root: str) -> bool:
        return self.repository

    def list_files(self, root: str) -> List[str]:
        self.listed.append(root)
        if not self.repository:
            raise ExternalToolError(["git", "-C", root, "ls-files"], "not a git repository")
        return list(self.paths)


# -----------------------------------------------------------------------------
# Shared Fixtures
# -----------------------------------------------------------------------------
@pytest.fixture
def sample_tree(tmp_path: Path) -> Path:
    """
    Create a small project layout.

    Structure:
    /project
      README.md
      run.sh          (executable)
      /src
        main.go
        /pkg
          util.go
          /deep
            leaf.txt
      /docs
        guide.md
    """
    root = tmp_path / "project"
    root.mkdir()
    (root / "README.md").write_text("# Readme", encoding="utf-8")

    script = root / "run.sh"
    script.write_text("#!/bin/sh\n", encoding="utf-8")
    script.chmod(0o755)

    src = root / "src"
    src.mkdir()
    (src / "main.go").write_text("package main", encoding="utf-8")
    pkg = src / "pkg"
    pkg.mkdir()
    (pkg / "util.go").write_text("package pkg", encoding="utf-8")
    deep = pkg / "deep"
    deep.mkdir()
    (deep / "leaf.txt").write_text("leaf", encoding="utf-8")

    docs = root / "docs"
    docs.mkdir()
    (docs / "guide.md").write_text("guide", encoding="utf-8")

    return root


@pytest.fixture
def fake_lister() -> Type[FakeLister]:
    """Factory for in-memory listers: fake_lister(paths, repository=True)."""
    return FakeLister
