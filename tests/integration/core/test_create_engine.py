from __future__ import annotations

"""
Integration tests for the Create Engine.

Runs complete template-to-filesystem flows against temporary directories
and checks the resulting CreateResult payloads.
"""

import errno
import os
from pathlib import Path
from typing import List, Tuple
from unittest.mock import patch

from blueprint.core.engine import run_create
from blueprint.core.outline import materializer
from blueprint.domain.outline_models import FolderCreationError, FolderReport, FolderStatus


def test_run_create_success(tmp_path: Path, templates_dir: Path) -> None:
    """TC-01: All folders are created and counted."""
    target = tmp_path / "out"
    result = run_create("project", templates_dir=str(templates_dir), target_dir=str(target))

    assert result.ok is True
    assert result.error == ""
    assert result.template_path == str(templates_dir / "project.txt")
    assert result.target_dir == str(target)
    assert result.summary["created"] == 5
    assert result.summary["existing"] == 0
    assert result.summary["nodes"] == 5

    for rel in ("project", "project/src", "project/src/core", "project/docs", "notes"):
        assert (target / rel).is_dir()


def test_run_create_is_idempotent(tmp_path: Path, templates_dir: Path) -> None:
    """TC-02: Re-running converts Created outcomes into Exists."""
    run_create("project", templates_dir=str(templates_dir), target_dir=str(tmp_path))
    second = run_create("project", templates_dir=str(templates_dir), target_dir=str(tmp_path))

    assert second.ok is True
    assert second.summary["created"] == 0
    assert second.summary["existing"] == 5
    assert all(r.status is FolderStatus.EXISTS for r in second.reports)


def test_run_create_template_not_found(tmp_path: Path, templates_dir: Path) -> None:
    """TC-03: Missing template yields an error result and no side effects."""
    target = tmp_path / "out"
    started: List[Tuple[str, str]] = []

    result = run_create(
        "missing",
        templates_dir=str(templates_dir),
        target_dir=str(target),
        on_start=lambda p, t: started.append((p, t)),
    )

    assert result.ok is False
    assert result.summary["error_kind"] == "template_not_found"
    assert result.template_path == str(templates_dir / "missing.txt")
    assert result.reports == []
    assert started == []
    assert not target.exists()


def test_run_create_empty_template(tmp_path: Path, templates_dir: Path) -> None:
    """TC-04: A blank outline succeeds without touching the filesystem."""
    target = tmp_path / "out"
    result = run_create("empty", templates_dir=str(templates_dir), target_dir=str(target))

    assert result.ok is True
    assert result.reports == []
    assert result.summary["total"] == 0
    assert not target.exists()


def test_run_create_streams_callbacks(tmp_path: Path, templates_dir: Path) -> None:
    """TC-05: on_start fires once before the first report."""
    events: List[str] = []

    def on_report(report: FolderReport) -> None:
        events.append(os.path.basename(report.path))

    result = run_create(
        "project",
        templates_dir=str(templates_dir),
        target_dir=str(tmp_path),
        on_report=on_report,
        on_start=lambda p, t: events.append("start"),
    )

    assert events == ["start", "project", "src", "core", "docs", "notes"]
    assert len(result.reports) == 5


def test_run_create_failure_keeps_partial_reports(tmp_path: Path, templates_dir: Path) -> None:
    """TC-06: A creation failure returns the outcomes produced so far."""
    failing = os.path.join(str(tmp_path), "project", "docs")
    real = materializer._create_folder

    def fake_create(path: str) -> FolderStatus:
        if path == failing:
            raise FolderCreationError(path, "Permission denied")
        return real(path)

    with patch("blueprint.core.outline.materializer._create_folder", side_effect=fake_create):
        result = run_create("project", templates_dir=str(templates_dir), target_dir=str(tmp_path))

    assert result.ok is False
    assert result.summary["error_kind"] == "creation_failed"
    assert result.summary["failed_path"] == failing
    assert result.summary["created"] == 3
    assert "Permission denied" in result.error
    assert not (tmp_path / "notes").exists()
    assert (tmp_path / "project" / "src" / "core").is_dir()


def test_run_create_undecodable_template(tmp_path: Path, templates_dir: Path) -> None:
    """TC-07: Invalid UTF-8 still parses; the bad byte becomes U+FFFD."""
    (templates_dir / "latin.txt").write_bytes(b"ok\n    caf\xe9\n")

    result = run_create("latin", templates_dir=str(templates_dir), target_dir=str(tmp_path))

    assert result.ok is True
    assert result.summary["created"] == 2
    assert (tmp_path / "ok" / "caf\ufffd").is_dir()


def test_run_create_unreadable_template(tmp_path: Path, templates_dir: Path) -> None:
    """TC-08: A template that cannot be opened yields an error result."""
    target = tmp_path / "out"
    denied = PermissionError(errno.EACCES, "Permission denied")

    with patch("blueprint.core.templates.open", side_effect=denied, create=True):
        result = run_create("project", templates_dir=str(templates_dir), target_dir=str(target))

    assert result.ok is False
    assert result.summary["error_kind"] == "template_unreadable"
    assert result.template_path == str(templates_dir / "project.txt")
    assert "Permission denied" in result.error
    assert result.reports == []
    assert not target.exists()


def test_run_create_invalid_folder_name(tmp_path: Path, templates_dir: Path) -> None:
    """TC-09: An unrepresentable name aborts with partial reports."""
    (templates_dir / "nul.txt").write_text("root\n    bad\x00name\n    after\n", encoding="utf-8")

    result = run_create("nul", templates_dir=str(templates_dir), target_dir=str(tmp_path))

    assert result.ok is False
    assert result.summary["error_kind"] == "creation_failed"
    assert result.summary["created"] == 1
    assert result.summary["failed_path"] == os.path.join(str(tmp_path), "root", "bad\x00name")
    assert not (tmp_path / "root" / "after").exists()
