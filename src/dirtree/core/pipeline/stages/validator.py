from __future__ import annotations

"""
Configuration Validation Service.

Acts as the gatekeeper for the pipeline: coerces raw values coming from
the CLI or the environment into the expected types and rejects values
outside their allowed domain before any filesystem work starts.
"""

import logging
from typing import Any, Dict, List, Tuple

from dirtree.domain.config import get_default_config
from dirtree.domain.constants import ColorMode, FileMode
from dirtree.domain.errors import ConfigurationError

logger = logging.getLogger(__name__)


# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def validate_config(
        config: Any,
        *,
        strict: bool = True,
) -> Tuple[Dict[str, Any], List[str]]:
    """
    Validate and normalize the provided configuration dictionary.

    Args:
        config: Raw configuration data (usually a dictionary).
        strict: If True, raise ConfigurationError on invalid values instead
                of falling back to defaults.

    Returns:
        Tuple[Dict[str, Any], List[str]]: The normalized configuration and a
                                          list of warnings.
    """
    warnings: List[str] = []
    defaults = get_default_config()

    # 1. Base Type Validation
    if not isinstance(config, dict):
        msg = f"Invalid config type: expected dict, received {type(config).__name__}."
        if strict:
            raise TypeError(msg)
        warnings.append(f"{msg} Using defaults.")
        logger.warning(msg)
        return defaults, warnings

    merged: Dict[str, Any] = dict(defaults)
    merged.update(config)

    # 2. Root path (passed through verbatim, names may carry spaces)
    path = merged.get("path")
    if not isinstance(path, str) or not path:
        merged["path"] = defaults["path"]

    # 3. Depth budget
    merged["depth"] = _validate_depth(merged.get("depth"), defaults["depth"], strict, warnings)

    # 4. Enumerations
    enum_fields = {
        "file_mode": FileMode.ALL,
        "color_mode": ColorMode.ALL,
    }
    for key, allowed in enum_fields.items():
        merged[key] = _validate_choice(key, merged.get(key), allowed, defaults[key], strict, warnings)

    # 5. Output flags
    for key in ("report", "json_output"):
        merged[key] = bool(merged.get(key))

    return merged, warnings

# -----------------------------------------------------------------------------
# PRIVATE HELPERS
# -----------------------------------------------------------------------------

def _validate_depth(value: Any, default: int, strict: bool, warnings: List[str]) -> int:
    """Coerce the depth into a non-negative integer."""
    try:
        if isinstance(value, bool):
            raise ValueError(value)
        depth = int(value)
    except (TypeError, ValueError):
        depth = -1

    if depth >= 0:
        return depth

    if strict:
        raise ConfigurationError("depth", value)
    warnings.append(f"Invalid depth {value!r}. Using default {default}.")
    return default


def _validate_choice(
        key: str,
        value: Any,
        allowed: List[str],
        default: str,
        strict: bool,
        warnings: List[str],
) -> str:
    """Normalize an enumerated string field."""
    normalized = str(value).strip().lower() if value is not None else default
    if normalized in allowed:
        return normalized

    if strict:
        raise ConfigurationError(key, value, allowed)
    warnings.append(f"Invalid {key} {value!r}. Using default '{default}'.")
    return default
