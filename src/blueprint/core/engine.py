from __future__ import annotations

"""
Create Orchestration.

Coordinates a complete 'create' run:
1. Normalizes the templates and target directories.
2. Loads the template outline.
3. Parses the outline into a folder forest.
4. Materializes the forest, streaming each outcome to the caller.
5. Summarizes the run into a CreateResult.
"""

import logging
import os
from typing import Callable, List, Optional

from blueprint.core.outline.materializer import ReportCallback, materialize
from blueprint.core.outline.parser import count_nodes, parse_outline
from blueprint.core.templates import load_template
from blueprint.domain.constants import BUNDLED_TEMPLATES_DIR
from blueprint.domain.outline_models import (
    CreateResult,
    FolderCreationError,
    FolderReport,
    TemplateNotFoundError,
    TemplateReadError,
    create_error_result,
    create_success_result,
)
from blueprint.infra.fs import normalize_path

logger = logging.getLogger(__name__)


def run_create(
        template_name: str,
        *,
        templates_dir: Optional[str] = None,
        target_dir: Optional[str] = None,
        on_report: Optional[ReportCallback] = None,
        on_start: Optional[Callable[[str, str], None]] = None,
) -> CreateResult:
    """
    Materialize a named template under a target directory.

    Args:
        template_name: Template identifier (file name without extension).
        templates_dir: Directory holding templates. Defaults to the bundled set.
        target_dir: Root for the created tree. Defaults to the working directory.
        on_report: Optional callback invoked as each folder outcome is produced.
        on_start: Optional callback invoked with (template_path, target_dir) once
            the template is loaded, before any folder is touched.

    Returns:
        CreateResult: Status, per-path outcomes and counters. Outcomes produced
        before a creation failure are preserved in the error result.
    """
    templates_root = normalize_path(templates_dir, BUNDLED_TEMPLATES_DIR)
    target_root = normalize_path(target_dir, os.getcwd())

    logger.info(f"Create run started: template='{template_name}', target='{target_root}'")

    # -------------------------------------------------------------------------
    # 1) Template resolution
    # -------------------------------------------------------------------------
    try:
        template_path, text = load_template(template_name, templates_root)
    except TemplateNotFoundError as e:
        return create_error_result(
            str(e), template_name, e.path, target_root,
            summary_extra={"error_kind": "template_not_found"}
        )
    except TemplateReadError as e:
        return create_error_result(
            str(e), template_name, e.path, target_root,
            summary_extra={"error_kind": "template_unreadable"}
        )

    if on_start is not None:
        on_start(template_path, target_root)

    # -------------------------------------------------------------------------
    # 2) Parsing
    # -------------------------------------------------------------------------
    forest = parse_outline(text)
    node_count = count_nodes(forest)
    logger.info(f"Template '{template_name}' describes {node_count} folder(s).")

    # -------------------------------------------------------------------------
    # 3) Materialization
    # -------------------------------------------------------------------------
    reports: List[FolderReport] = []

    def _collect(report: FolderReport) -> None:
        reports.append(report)
        if on_report is not None:
            on_report(report)

    try:
        materialize(forest, target_root, on_report=_collect)
    except FolderCreationError as e:
        logger.error(f"Create run aborted after {len(reports)} folder(s): {e}")
        return create_error_result(
            str(e), template_name, template_path, target_root, reports,
            summary_extra={
                "error_kind": "creation_failed",
                "nodes": node_count,
                "failed_path": e.path,
            }
        )

    logger.info("Create run completed.")
    return create_success_result(
        template_name, template_path, target_root, reports,
        summary_extra={"nodes": node_count}
    )
