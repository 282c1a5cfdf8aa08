from __future__ import annotations

"""
Outline Domain Data Models.

Defines the structures exchanged between the outline parser, the tree
materializer and the interface layer: parsed line records, the recursive
folder tree, per-path outcome reports and the result of a complete run.
Domain exceptions are declared alongside the models they describe.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Optional

# -----------------------------------------------------------------------------
# STRUCTURAL COMPONENTS
# -----------------------------------------------------------------------------

@dataclass(frozen=True)
class LineRecord:
    """
    A single meaningful outline line.

    Attributes:
        depth: Nesting level derived from leading spaces.
        name: Folder name with surrounding whitespace removed.
    """
    depth: int
    name: str


@dataclass
class TreeNode:
    """
    A folder to be created, with its ordered sub-folders.

    Attributes:
        name: Path segment used verbatim when joining paths.
        children: Sub-folders in source order.
    """
    name: str
    children: List["TreeNode"] = field(default_factory=list)


Forest = List[TreeNode]

# -----------------------------------------------------------------------------
# MATERIALIZATION OUTCOMES
# -----------------------------------------------------------------------------

class FolderStatus(str, Enum):
    """Outcome of a single create-or-skip attempt."""
    CREATED = "created"
    EXISTS = "exists"


@dataclass(frozen=True)
class FolderReport:
    """
    Outcome of materializing one tree node.

    Attributes:
        path: Filesystem path of the folder.
        status: Whether the folder was created or already present.
        depth: Nesting level of the node within the forest (roots are 0).
    """
    path: str
    status: FolderStatus
    depth: int = 0

    @property
    def created(self) -> bool:
        return self.status is FolderStatus.CREATED

# -----------------------------------------------------------------------------
# RUN RESULT
# -----------------------------------------------------------------------------

@dataclass(frozen=True)
class CreateResult:
    """
    Unified result of a 'create' run.

    Attributes:
        ok: Flag indicating success or failure.
        error: Descriptive message in case of failure.
        template_name: Requested template identifier.
        template_path: Resolved template file path.
        target_dir: Root directory the tree was materialized into.
        reports: Ordered per-path outcomes produced before completion or failure.
        summary: Execution counters.
    """
    ok: bool
    error: str

    template_name: str
    template_path: str
    target_dir: str

    reports: List[FolderReport] = field(default_factory=list)
    summary: Dict[str, Any] = field(default_factory=dict)

# -----------------------------------------------------------------------------
# DOMAIN EXCEPTIONS
# -----------------------------------------------------------------------------

class BlueprintError(Exception):
    """Base class for recoverable domain failures."""


class TemplateNotFoundError(BlueprintError):
    """Raised when a template name does not resolve to a readable file."""

    def __init__(self, name: str, path: str):
        super().__init__(f"Template not found: {name} (looking for: {path})")
        self.name = name
        self.path = path


class TemplateReadError(BlueprintError):
    """Raised when a template file exists but cannot be read."""

    def __init__(self, name: str, path: str, reason: str):
        super().__init__(f"Cannot read template {name} at {path}: {reason}")
        self.name = name
        self.path = path
        self.reason = reason


class FolderCreationError(BlueprintError):
    """Raised when a folder cannot be created for a reason other than existence."""

    def __init__(self, path: str, reason: str):
        super().__init__(f"Failed to create '{path}': {reason}")
        self.path = path
        self.reason = reason

# -----------------------------------------------------------------------------
# FACTORY FUNCTIONS
# -----------------------------------------------------------------------------

def summarize_reports(reports: List[FolderReport]) -> Dict[str, int]:
    """Count created and pre-existing folders."""
    created = sum(1 for r in reports if r.created)
    return {
        "created": created,
        "existing": len(reports) - created,
        "total": len(reports),
    }


def create_error_result(
        error: str,
        template_name: str,
        template_path: str = "",
        target_dir: str = "",
        reports: Optional[List[FolderReport]] = None,
        summary_extra: Optional[Dict[str, Any]] = None
) -> CreateResult:
    """
    Create a failed run result instance.

    Args:
        error: Detailed error description.
        template_name: Requested template identifier.
        template_path: Resolved lookup path, if known.
        target_dir: Target root directory, if known.
        reports: Outcomes produced before the failure.
        summary_extra: Additional metadata for the summary payload.

    Returns:
        CreateResult: An immutable error result object.
    """
    done = list(reports or [])
    summary: Dict[str, Any] = dict(summarize_reports(done))
    summary.update(summary_extra or {})
    return CreateResult(
        ok=False,
        error=error,
        template_name=template_name,
        template_path=template_path,
        target_dir=target_dir,
        reports=done,
        summary=summary,
    )


def create_success_result(
        template_name: str,
        template_path: str,
        target_dir: str,
        reports: List[FolderReport],
        summary_extra: Optional[Dict[str, Any]] = None
) -> CreateResult:
    """
    Create a successful run result instance.

    Args:
        template_name: Requested template identifier.
        template_path: Resolved template file path.
        target_dir: Root directory the tree was materialized into.
        reports: Ordered per-path outcomes.
        summary_extra: Additional metadata for the summary payload.

    Returns:
        CreateResult: An immutable success result object.
    """
    summary: Dict[str, Any] = dict(summarize_reports(reports))
    summary.update(summary_extra or {})
    return CreateResult(
        ok=True,
        error="",
        template_name=template_name,
        template_path=template_path,
        target_dir=target_dir,
        reports=list(reports),
        summary=summary,
    )
