"""All enum definitions for the TUI.

This module consolidates all enumerations used throughout the application.
"""

from __future__ import annotations

from enum import Enum

# =============================================================================
# Navigation Enums
# =============================================================================

class ScreenId(Enum):
    """Base screens of the dashboard. Exactly one is active at a time."""

    WORKFLOWS = "workflows"
    DETAIL = "detail"
    NAMESPACES = "namespaces"
    HELP = "help"


class ConnectionStatus(Enum):
    """Connection lifecycle values."""

    DISCONNECTED = "disconnected"
    CONNECTING = "connecting"
    CONNECTED = "connected"
    ERRORED = "errored"


# =============================================================================
# Workflow Enums
# =============================================================================

class WorkflowStatus(Enum):
    """Workflow execution status values from the Temporal API.

    Values are the display labels; ``from_proto`` maps the wire enum numbers.
    """

    UNSPECIFIED = "Unknown"
    RUNNING = "Running"
    COMPLETED = "Completed"
    FAILED = "Failed"
    CANCELED = "Canceled"
    TERMINATED = "Terminated"
    CONTINUED_AS_NEW = "Continued As New"
    TIMED_OUT = "Timed Out"

    @classmethod
    def from_proto(cls, value: int) -> WorkflowStatus:
        """Map a ``WorkflowExecutionStatus`` wire number to a status."""
        return _STATUS_BY_NUMBER.get(value, cls.UNSPECIFIED)


_STATUS_BY_NUMBER: dict[int, WorkflowStatus] = {
    0: WorkflowStatus.UNSPECIFIED,
    1: WorkflowStatus.RUNNING,
    2: WorkflowStatus.COMPLETED,
    3: WorkflowStatus.FAILED,
    4: WorkflowStatus.CANCELED,
    5: WorkflowStatus.TERMINATED,
    6: WorkflowStatus.CONTINUED_AS_NEW,
    7: WorkflowStatus.TIMED_OUT,
}


class WorkflowFilter(Enum):
    """Status filters cycled on the workflows screen.

    The absence of a filter is represented by ``None`` rather than a member.
    """

    RUNNING = "Running"
    COMPLETED = "Completed"
    FAILED = "Failed"
    CANCELED = "Canceled"
    ALL = "All"

    @property
    def query_atom(self) -> str | None:
        """Visibility query fragment for this filter, None for ALL."""
        if self is WorkflowFilter.ALL:
            return None
        return f"ExecutionStatus = '{self.value}'"


class MutationKind(Enum):
    """Operations that change a workflow execution."""

    TERMINATE = "terminate"
    CANCEL = "cancel"
    SIGNAL = "signal"


class PageDirection(Enum):
    """Direction of a page load relative to the page on screen."""

    FORWARD = "forward"
    BACKWARD = "backward"
    RELOAD = "reload"


class NamespaceState(Enum):
    """Namespace registration state values."""

    UNSPECIFIED = "Unknown"
    REGISTERED = "Registered"
    DEPRECATED = "Deprecated"
    DELETED = "Deleted"

    @classmethod
    def from_proto(cls, value: int) -> NamespaceState:
        """Map a ``NamespaceState`` wire number to a state."""
        members = list(cls)
        if 0 <= value < len(members):
            return members[value]
        return cls.UNSPECIFIED


# =============================================================================
# Error / Feedback Enums
# =============================================================================

class ErrorKind(Enum):
    """Failure categories carried by failed results."""

    CONNECTION = "connection"
    NETWORK = "network"
    DEADLINE = "deadline"
    REJECTED = "rejected"
    INTERNAL = "internal"


class BannerLevel(Enum):
    """Severity of a transient banner."""

    SUCCESS = "success"
    ERROR = "error"
