from __future__ import annotations

"""
Unit tests for the Configuration Validator.

Verifies type coercion, enum normalization and the strict/lenient split.
"""

import pytest

from dirtree.core.pipeline.stages.validator import validate_config
from dirtree.domain.errors import ConfigurationError


def test_validate_fills_defaults() -> None:
    conf, warnings = validate_config({})
    assert conf == {
        "path": ".",
        "depth": 2,
        "file_mode": "auto",
        "color_mode": "auto",
        "report": False,
        "json_output": False,
    }
    assert warnings == []


def test_validate_normalizes_values() -> None:
    conf, _ = validate_config({
        "path": "/tmp/x",
        "depth": "3",
        "file_mode": " GIT ",
        "color_mode": "Never",
        "report": 1,
    })
    assert conf["path"] == "/tmp/x"
    assert conf["depth"] == 3
    assert conf["file_mode"] == "git"
    assert conf["color_mode"] == "never"
    assert conf["report"] is True


def test_validate_keeps_path_whitespace() -> None:
    """Root paths are not stripped; names may start or end with spaces."""
    conf, _ = validate_config({"path": " proj "})
    assert conf["path"] == " proj "

    conf, _ = validate_config({"path": ""})
    assert conf["path"] == "."


def test_validate_accepts_zero_depth() -> None:
    conf, _ = validate_config({"depth": 0})
    assert conf["depth"] == 0


@pytest.mark.parametrize("field,value", [
    ("file_mode", "svn"),
    ("color_mode", "sometimes"),
    ("depth", -1),
    ("depth", "two"),
    ("depth", True),
])
def test_validate_strict_rejects_invalid(field: str, value) -> None:
    with pytest.raises(ConfigurationError) as exc:
        validate_config({field: value}, strict=True)
    assert exc.value.field == field


def test_validate_lenient_falls_back_with_warnings() -> None:
    conf, warnings = validate_config({"file_mode": "svn", "depth": -5}, strict=False)
    assert conf["file_mode"] == "auto"
    assert conf["depth"] == 2
    assert len(warnings) == 2


def test_validate_rejects_non_dict() -> None:
    with pytest.raises(TypeError):
        validate_config(["not", "a", "dict"])
    conf, warnings = validate_config("bad", strict=False)
    assert conf["depth"] == 2
    assert warnings
