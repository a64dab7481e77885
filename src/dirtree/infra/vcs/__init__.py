from __future__ import annotations

from .base import VersionControlLister
from .git import GitLister, parse_listing

__all__ = [
    "VersionControlLister",
    "GitLister",
    "parse_listing",
]
