"""Workflow parser for the Temporal controller - converts visibility protos into records."""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Any

from tuiporal.constants.enums import WorkflowStatus
from tuiporal.models.core.workflow_record import WorkflowRecord


def timestamp_to_datetime(message: Any, field_name: str) -> datetime | None:
    """Read an optional ``google.protobuf.Timestamp`` field as an aware datetime."""
    if not message.HasField(field_name):
        return None
    return getattr(message, field_name).ToDatetime(tzinfo=timezone.utc)


class WorkflowParser:
    """Parses ``WorkflowExecutionInfo`` messages."""

    def parse_execution(self, info: Any) -> WorkflowRecord:
        """Parse a single execution into a WorkflowRecord.

        Args:
            info: ``temporal.api.workflow.v1.WorkflowExecutionInfo``

        Returns:
            WorkflowRecord object.
        """
        return WorkflowRecord(
            workflow_id=info.execution.workflow_id,
            run_id=info.execution.run_id,
            workflow_type=info.type.name or "Unknown",
            status=WorkflowStatus.from_proto(int(info.status)),
            task_queue=info.task_queue,
            start_time=timestamp_to_datetime(info, "start_time"),
            close_time=timestamp_to_datetime(info, "close_time"),
            history_length=int(info.history_length),
        )

    def parse_executions(self, executions: Any) -> tuple[WorkflowRecord, ...]:
        return tuple(self.parse_execution(info) for info in executions)
