"""Workflows screen configuration - filter order and column definitions."""

from __future__ import annotations

from tuiporal.constants.enums import WorkflowFilter, WorkflowStatus

# =============================================================================
# Filter cycle (None means no status filter)
# =============================================================================

FILTER_CYCLE: list[WorkflowFilter | None] = [
    None,
    WorkflowFilter.RUNNING,
    WorkflowFilter.COMPLETED,
    WorkflowFilter.FAILED,
    WorkflowFilter.CANCELED,
    WorkflowFilter.ALL,
]

# =============================================================================
# Table Column Definitions: list[tuple[str, int]] = [(name, width), ...]
# =============================================================================

WORKFLOW_TABLE_COLUMNS: list[tuple[str, int]] = [
    ("Workflow ID", 36),
    ("Type", 24),
    ("Status", 16),
    ("Started", 20),
    ("Closed", 20),
]

STATUS_STYLES: dict[WorkflowStatus, str] = {
    WorkflowStatus.RUNNING: "bold blue",
    WorkflowStatus.COMPLETED: "green",
    WorkflowStatus.FAILED: "bold red",
    WorkflowStatus.CANCELED: "yellow",
    WorkflowStatus.TERMINATED: "red",
    WorkflowStatus.CONTINUED_AS_NEW: "cyan",
    WorkflowStatus.TIMED_OUT: "magenta",
    WorkflowStatus.UNSPECIFIED: "dim",
}
