from __future__ import annotations

"""
Color Resolution Service.

Parses LS_COLORS-style rule strings (see dir_colors(5)), decides whether
coloring is active for the current output stream, and formats entry names
with the resulting escape sequences.
"""

import logging
import os
import stat
from typing import Callable, Dict, Optional, TextIO

from dirtree.domain.color_models import ColorRuleSet, wrap_code
from dirtree.domain.constants import ENV_LS_COLORS, IGNORED_COLOR_KEYS, ColorMode
from dirtree.domain.errors import ColorRuleError, ConfigurationError
from dirtree.domain.tree_models import EntryMetadata

logger = logging.getLogger(__name__)

# -----------------------------------------------------------------------------
# PARSING
# -----------------------------------------------------------------------------

def parse_ls_colors(rule_string: str) -> ColorRuleSet:
    """
    Parse a colon-separated list of 'key=code' clauses.

    Args:
        rule_string: Raw LS_COLORS value.

    Returns:
        ColorRuleSet: Enabled rule set (possibly with no rules at all).

    Raises:
        ColorRuleError: On a clause without exactly one '=' or an unknown key.
    """
    categories: Dict[str, str] = {}
    extensions: Dict[str, str] = {}

    for clause in rule_string.split(":"):
        if not clause:
            continue

        parts = clause.split("=")
        if len(parts) != 2:
            raise ColorRuleError(clause, "invalid clause, expected key=code")
        key, code = parts

        if key in ("di", "ln", "ex", "rs"):
            categories[key] = wrap_code(code)
        elif key in IGNORED_COLOR_KEYS:
            continue
        elif key.startswith("*"):
            extensions[key[1:]] = wrap_code(code)
        else:
            raise ColorRuleError(clause, "unknown clause")

    return ColorRuleSet(
        directory=categories.get("di", ""),
        executable=categories.get("ex", ""),
        link=categories.get("ln", ""),
        reset=categories.get("rs", ""),
        extensions=extensions,
    )

# -----------------------------------------------------------------------------
# RESOLUTION
# -----------------------------------------------------------------------------

def resolve_colors(
        color_mode: str,
        is_terminal: Callable[[], bool],
        env: Callable[[str], Optional[str]],
) -> ColorRuleSet:
    """
    Decide the effective rule set for a color mode.

    Args:
        color_mode: One of 'auto', 'always', 'never'.
        is_terminal: Probe telling whether the output is an interactive terminal.
        env: Environment lookup (e.g. os.environ.get).

    Returns:
        ColorRuleSet: The rule set to render with.

    Raises:
        ConfigurationError: On an unknown color mode.
    """
    if color_mode == ColorMode.NEVER:
        return ColorRuleSet.disabled()
    if color_mode == ColorMode.ALWAYS:
        return _colors_from_env(env)
    if color_mode == ColorMode.AUTO:
        if not is_terminal():
            logger.debug("Output is not a terminal, colors disabled")
            return ColorRuleSet.disabled()
        return _colors_from_env(env)
    raise ConfigurationError("color_mode", color_mode, ColorMode.ALL)


def stream_is_terminal(stream: TextIO) -> bool:
    """
    Report whether a stream is attached to a character device.

    Pipes, regular files and streams without a usable descriptor all count
    as non-terminals.
    """
    try:
        mode = os.fstat(stream.fileno()).st_mode
    except (AttributeError, OSError, ValueError):
        return False
    if stat.S_ISFIFO(mode):
        return False
    return stat.S_ISCHR(mode)


def _colors_from_env(env: Callable[[str], Optional[str]]) -> ColorRuleSet:
    """Parse $LS_COLORS when set, falling back to the default palette."""
    raw = env(ENV_LS_COLORS)
    if raw:
        try:
            return parse_ls_colors(raw)
        except ColorRuleError as e:
            logger.warning(f"invalid ${ENV_LS_COLORS}: {e}")
    return ColorRuleSet.default()

# -----------------------------------------------------------------------------
# FORMATTING
# -----------------------------------------------------------------------------

def format_name(name: str, metadata: EntryMetadata, rules: ColorRuleSet) -> str:
    """
    Wrap a display name with the escape matching its metadata.

    Args:
        name: Text to display.
        metadata: Entry metadata driving the rule choice.
        rules: Active rule set.

    Returns:
        str: 'code + name + reset', or the bare name when no rule applies.
    """
    if rules.extensions is None:
        return name

    code = _extension_code(metadata.name, metadata.extension, rules.extensions)
    if code is None:
        if metadata.is_dir:
            code = rules.directory
        elif metadata.is_executable:
            code = rules.executable
        elif metadata.is_symlink:
            code = rules.link

    if not code:
        return name
    return code + name + rules.reset


def _extension_code(name: str, extension: str, extensions: Dict[str, str]) -> Optional[str]:
    """Exact dotted-extension match first, then dotless suffix rules like '*~'."""
    if extension and extension in extensions:
        return extensions[extension]
    for suffix, code in extensions.items():
        if suffix and not suffix.startswith(".") and name.endswith(suffix):
            return code
    return None
