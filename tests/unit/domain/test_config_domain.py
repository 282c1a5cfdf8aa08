from __future__ import annotations

"""
Unit tests for the run configuration defaults and validation.
"""

import os

import pytest

from blueprint.domain.config import get_default_config, validate_config
from blueprint.domain.constants import BUNDLED_TEMPLATES_DIR


def test_default_config_values():
    conf = get_default_config()
    assert conf["templates_dir"] == BUNDLED_TEMPLATES_DIR
    assert conf["output_dir"] == os.getcwd()
    assert conf["log_level"] == "INFO"
    assert conf["log_file"] is None


def test_validate_fills_missing_keys():
    conf, warnings = validate_config({"templates_dir": "/srv/tpl"})
    assert conf["templates_dir"] == "/srv/tpl"
    assert conf["log_level"] == "INFO"
    assert warnings == []


def test_validate_coerces_invalid_values():
    conf, warnings = validate_config({"output_dir": 42, "log_level": "loud", "log_file": "  "})
    assert conf["output_dir"] == os.getcwd()
    assert conf["log_level"] == "INFO"
    assert conf["log_file"] is None
    assert len(warnings) == 2


def test_validate_normalizes_level_case():
    conf, _ = validate_config({"log_level": "debug"})
    assert conf["log_level"] == "DEBUG"


def test_validate_ignores_unknown_keys():
    conf, _ = validate_config({"surprise": True})
    assert "surprise" not in conf


def test_validate_non_dict_returns_defaults():
    conf, warnings = validate_config(["not", "a", "dict"])
    assert conf == get_default_config()
    assert warnings


def test_validate_strict_raises():
    with pytest.raises(TypeError):
        validate_config({"templates_dir": 1}, strict=True)
    with pytest.raises(ValueError):
        validate_config({"log_level": "loud"}, strict=True)
