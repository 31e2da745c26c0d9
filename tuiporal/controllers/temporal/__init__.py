"""Temporal remote capability."""

from tuiporal.controllers.temporal.controller import TemporalController, error_kind_for
from tuiporal.controllers.temporal.parsers import (
    EventParser,
    NamespaceParser,
    WorkflowParser,
)

__all__ = [
    "EventParser",
    "NamespaceParser",
    "TemporalController",
    "WorkflowParser",
    "error_kind_for",
]
