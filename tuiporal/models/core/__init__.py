"""Records returned by the remote capability."""

from tuiporal.models.core.history_event import HistoryEvent
from tuiporal.models.core.namespace_record import NamespaceRecord
from tuiporal.models.core.page import Page
from tuiporal.models.core.workflow_record import WorkflowRecord

__all__ = [
    "HistoryEvent",
    "NamespaceRecord",
    "Page",
    "WorkflowRecord",
]
