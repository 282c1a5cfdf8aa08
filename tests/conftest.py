from __future__ import annotations

"""
Global Pytest Configuration and Fixtures.

This module sets up the testing environment, including:
1. Path manipulation to ensure the 'src' directory is importable.
2. Isolation of the root logger between tests.
3. Shared outline fixtures.
"""

import os
import sys
from pathlib import Path
from typing import Iterator

import pytest

# -----------------------------------------------------------------------------
# Path Configuration
# -----------------------------------------------------------------------------
_SRC_PATH = os.path.abspath(os.path.join(os.path.dirname(__file__), "..", "src"))
if _SRC_PATH not in sys.path:
    sys.path.insert(0, _SRC_PATH)

from blueprint.infra.logging import reset_logging  # noqa: E402


# -----------------------------------------------------------------------------
# Shared Fixtures
# -----------------------------------------------------------------------------
@pytest.fixture(autouse=True)
def isolated_logging() -> Iterator[None]:
    """Ensure each test starts and ends with an unconfigured root logger."""
    reset_logging()
    yield
    reset_logging()


@pytest.fixture
def nested_outline() -> str:
    """
    Return an outline exercising siblings, nesting and blank lines.

    Tree:
    project
      src
        core
      docs
    notes
    """
    return "project\n    src\n        core\n\n    docs\nnotes\n"


@pytest.fixture
def templates_dir(tmp_path: Path, nested_outline: str) -> Path:
    """Create a templates directory holding 'project.txt' and 'empty.txt'."""
    tdir = tmp_path / "templates"
    tdir.mkdir()
    (tdir / "project.txt").write_text(nested_outline, encoding="utf-8")
    (tdir / "empty.txt").write_text("\n   \n", encoding="utf-8")
    return tdir
