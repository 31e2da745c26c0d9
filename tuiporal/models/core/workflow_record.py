"""Workflow execution record."""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, ConfigDict

from tuiporal.constants.enums import WorkflowStatus


class WorkflowRecord(BaseModel):
    """One workflow execution as listed by the visibility API."""

    model_config = ConfigDict(frozen=True)

    workflow_id: str
    run_id: str = ""
    workflow_type: str = "Unknown"
    status: WorkflowStatus = WorkflowStatus.UNSPECIFIED
    task_queue: str = ""
    start_time: datetime | None = None
    close_time: datetime | None = None
    history_length: int = 0

    @classmethod
    def placeholder(cls, workflow_id: str, run_id: str = "") -> WorkflowRecord:
        """Record used when metadata lookup fails but history is available."""
        return cls(workflow_id=workflow_id, run_id=run_id)

    @property
    def is_placeholder(self) -> bool:
        return self.workflow_type == "Unknown" and self.start_time is None

    @property
    def is_running(self) -> bool:
        return self.status is WorkflowStatus.RUNNING
