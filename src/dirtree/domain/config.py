from __future__ import annotations

"""
Configuration Domain Management.

Builds the runtime configuration dictionary from defaults and environment
variables. Command-line overrides are merged on top by the interface layer.
"""

import logging
from typing import Any, Callable, Dict, Optional

from dirtree.domain.constants import (
    DEFAULT_DEPTH,
    DEFAULT_PATH,
    ENV_COLOR_MODE,
    ENV_FILE_MODE,
    ColorMode,
    FileMode,
)

logger = logging.getLogger(__name__)

# Environment variable -> configuration key
ENV_OVERRIDES: Dict[str, str] = {
    ENV_FILE_MODE: "file_mode",
    ENV_COLOR_MODE: "color_mode",
}

# -----------------------------------------------------------------------------
# Configuration Models (Dict-based)
# -----------------------------------------------------------------------------
def get_default_config() -> Dict[str, Any]:
    """
    Generate the default runtime configuration.

    Returns:
        Dict[str, Any]: Default configuration values.
    """
    return {
        "path": DEFAULT_PATH,
        "depth": DEFAULT_DEPTH,
        "file_mode": FileMode.AUTO,
        "color_mode": ColorMode.AUTO,

        # Output
        "report": False,
        "json_output": False,
    }


def apply_env_overrides(
        config: Dict[str, Any],
        env: Callable[[str], Optional[str]],
) -> Dict[str, Any]:
    """
    Merge environment overrides into a copy of the configuration.

    Empty variables are treated as unset.

    Args:
        config: Base configuration.
        env: Environment lookup (e.g. os.environ.get).

    Returns:
        Dict[str, Any]: The merged configuration.
    """
    out = dict(config)
    for var, key in ENV_OVERRIDES.items():
        value = env(var)
        if value:
            logger.debug(f"Environment override {var}={value!r}")
            out[key] = value
    return out


def merge_config(base: Dict[str, Any], overrides: Dict[str, Any]) -> Dict[str, Any]:
    """
    Shallow merge of known, non-None override values into the base.

    Args:
        base: The primary configuration dictionary.
        overrides: New values to inject.

    Returns:
        Dict[str, Any]: The merged configuration state.
    """
    out = dict(base)
    for k in get_default_config():
        if k in overrides and overrides[k] is not None:
            out[k] = overrides[k]
    return out
