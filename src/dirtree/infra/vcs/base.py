from __future__ import annotations

"""
Base Definitions for Version-Control Listers.

Provides the abstract capability the discovery service depends on, so tree
construction can be exercised without a real version-control executable.
"""

from abc import ABC, abstractmethod
from typing import List


class VersionControlLister(ABC):
    """
    Abstract source of the files visible in a working copy.
    """

    @abstractmethod
    def is_repository(self, root: str) -> bool:
        """
        Run a lightweight status probe against the root.

        Args:
            root: Directory to probe.

        Returns:
            bool: True if the root belongs to a working copy.
        """
        pass

    @abstractmethod
    def list_files(self, root: str) -> List[str]:
        """
        List tracked and untracked-but-not-ignored files below the root.

        Args:
            root: Working copy directory.

        Returns:
            List[str]: Root-relative paths, '/'-separated, no empty entries.

        Raises:
            ExternalToolError: If the listing command cannot be completed.
        """
        pass
