from __future__ import annotations

"""
Domain Error Taxonomy.

Every fatal condition raised by the tree pipeline derives from DirtreeError,
so interface layers can map the whole family to a single exit code while
still reporting the offending path, command or clause.
"""

from typing import Any, Optional, Sequence


class DirtreeError(Exception):
    """Base class for all errors surfaced by dirtree."""


class PathResolutionError(DirtreeError):
    """A path could not be stat'd (missing, permission denied, ...)."""

    def __init__(self, path: str, cause: Optional[BaseException] = None) -> None:
        self.path = path
        self.cause = cause
        detail = f": {cause}" if cause else ""
        super().__init__(f"getting status for {path}{detail}")


class TraversalError(DirtreeError):
    """A directory could not be listed during a filesystem walk."""

    def __init__(self, path: str, cause: Optional[BaseException] = None) -> None:
        self.path = path
        self.cause = cause
        detail = f": {cause}" if cause else ""
        super().__init__(f"traversing files at {path}{detail}")


class ExternalToolError(DirtreeError):
    """The version-control executable failed or could not be started."""

    def __init__(self, command: Sequence[str], detail: str = "") -> None:
        self.command = list(command)
        self.detail = detail
        msg = f"running {' '.join(self.command)}"
        if detail:
            msg += f": {detail}"
        super().__init__(msg)


class ConfigurationError(DirtreeError):
    """A configuration field holds a value outside its allowed domain."""

    def __init__(self, field: str, value: Any, allowed: Optional[Sequence[str]] = None) -> None:
        self.field = field
        self.value = value
        msg = f"invalid {field}: {value!r}"
        if allowed:
            msg += f" (expected one of: {', '.join(allowed)})"
        super().__init__(msg)


class ColorRuleError(DirtreeError):
    """A clause of a color-rule string could not be parsed."""

    def __init__(self, clause: str, reason: str) -> None:
        self.clause = clause
        self.reason = reason
        super().__init__(f"{reason}: {clause!r}")
