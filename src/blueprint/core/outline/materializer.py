from __future__ import annotations

"""
Tree Materializer.

Realizes a parsed folder forest as directories under a root path. The walk
is depth-first and pre-order: each folder is created (or found existing)
before its children, and a whole subtree completes before the next sibling
starts. Existing entries are reported, never recreated; any other creation
failure aborts the walk.
"""

import logging
import os
from typing import Callable, Iterator, List, Optional

from blueprint.domain.outline_models import (
    Forest,
    FolderCreationError,
    FolderReport,
    FolderStatus,
)

logger = logging.getLogger(__name__)

ReportCallback = Callable[[FolderReport], None]

# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def iter_materialize(forest: Forest, root_path: str, depth: int = 0) -> Iterator[FolderReport]:
    """
    Lazily create the folders of a forest, yielding one report per node.

    Args:
        forest: Nodes to realize at this level.
        root_path: Directory the nodes are joined onto.
        depth: Nesting level of the nodes in 'forest'.

    Yields:
        FolderReport: Outcome for each node, in pre-order.

    Raises:
        FolderCreationError: If a folder cannot be created for a reason
            other than an entry already existing at its path.
    """
    for node in forest:
        folder_path = os.path.join(root_path, node.name)
        status = _create_folder(folder_path)
        logger.debug(f"{status.value}: {folder_path}")

        yield FolderReport(path=folder_path, status=status, depth=depth)
        yield from iter_materialize(node.children, folder_path, depth + 1)


def materialize(
        forest: Forest,
        root_path: str,
        on_report: Optional[ReportCallback] = None,
) -> List[FolderReport]:
    """
    Create the folders of a forest under 'root_path'.

    Args:
        forest: Parsed folder forest.
        root_path: Target root directory.
        on_report: Optional callback invoked as each outcome is produced.

    Returns:
        List[FolderReport]: Ordered outcomes for every node.

    Raises:
        FolderCreationError: On the first unrecoverable creation failure.
    """
    logger.info(f"Materializing outline under: {root_path}")

    reports: List[FolderReport] = []
    for report in iter_materialize(forest, root_path):
        reports.append(report)
        if on_report is not None:
            on_report(report)

    created = sum(1 for r in reports if r.created)
    logger.info(f"Materialization finished: {created} created, {len(reports) - created} existing.")
    return reports

# -----------------------------------------------------------------------------
# PRIVATE HELPERS
# -----------------------------------------------------------------------------

def _create_folder(path: str) -> FolderStatus:
    """
    Attempt a recursive create and classify the outcome.

    Any entry already present at 'path', directory or not, counts as EXISTS.
    """
    try:
        os.makedirs(path, exist_ok=False)
        return FolderStatus.CREATED
    except FileExistsError:
        return FolderStatus.EXISTS
    except (OSError, ValueError) as e:
        # ValueError covers names the OS cannot represent, e.g. embedded NUL
        logger.error(f"Folder creation failed at {path!r}: {e}")
        raise FolderCreationError(path, getattr(e, "strerror", None) or str(e)) from e
