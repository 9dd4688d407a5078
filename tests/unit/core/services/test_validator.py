from __future__ import annotations

"""
Unit tests for configuration validation.
"""

import pytest

from sitecrafter.core.services.validator import validate_config
from sitecrafter.domain.config import get_default_config


def test_defaults_pass_without_warnings():
    conf, warnings = validate_config(get_default_config())

    assert warnings == []
    assert conf == get_default_config()


def test_non_dict_falls_back_to_defaults():
    conf, warnings = validate_config(["not", "a", "dict"])

    assert conf == get_default_config()
    assert len(warnings) == 1


def test_non_dict_strict_raises():
    with pytest.raises(TypeError):
        validate_config(None, strict=True)


def test_coercions_are_reported():
    conf, warnings = validate_config({
        "print_tree": "no",
        "request_timeout": "15",
        "completion_policy": " ALL ",
        "log_level": "debug",
    })

    assert conf["print_tree"] is False
    assert conf["request_timeout"] == 15
    assert conf["completion_policy"] == "all"
    assert conf["log_level"] == "DEBUG"
    assert len(warnings) == 1


def test_invalid_values_fall_back():
    conf, warnings = validate_config({
        "completion_policy": "sometimes",
        "request_timeout": -3,
        "backend_url": 42,
    })

    defaults = get_default_config()
    assert conf["completion_policy"] == defaults["completion_policy"]
    assert conf["request_timeout"] == defaults["request_timeout"]
    assert conf["backend_url"] == defaults["backend_url"]
    assert len(warnings) == 3


def test_strict_mode_rejects_unknown_policy():
    with pytest.raises(ValueError):
        validate_config({"completion_policy": "sometimes"}, strict=True)
