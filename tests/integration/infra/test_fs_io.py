from __future__ import annotations

"""
Integration tests for FileSystem Infrastructure.

Validates path normalization with environment variables, user shortcuts
and fallbacks.
"""

import os
from pathlib import Path
from unittest.mock import patch

from blueprint.infra.fs import normalize_path


def test_normalize_path_expansion() -> None:
    """TC-01: Verify expansion of environment variables and user shortcuts."""
    with patch.dict(os.environ, {"BP_TEST_VAR": "my_folder"}):
        path = normalize_path("$BP_TEST_VAR/sub", fallback=".")
        assert path.lower().endswith(os.path.join("my_folder", "sub").lower())

        with patch("os.path.expanduser", side_effect=lambda p: p.replace("~", "/home/user")):
            path = normalize_path("~/code", fallback=".")
            assert "code" in Path(path).parts


def test_normalize_path_fallback(tmp_path: Path) -> None:
    """TC-02: Empty or blank input resolves to the fallback."""
    assert normalize_path(None, str(tmp_path)) == str(tmp_path)
    assert normalize_path("   ", str(tmp_path)) == str(tmp_path)


def test_normalize_path_is_absolute() -> None:
    assert os.path.isabs(normalize_path("relative/dir", fallback="."))
