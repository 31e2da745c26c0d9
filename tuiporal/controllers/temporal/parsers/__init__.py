"""Protobuf parsers for the Temporal controller."""

from tuiporal.controllers.temporal.parsers.event_parser import EventParser
from tuiporal.controllers.temporal.parsers.namespace_parser import NamespaceParser
from tuiporal.controllers.temporal.parsers.workflow_parser import WorkflowParser

__all__ = ["EventParser", "NamespaceParser", "WorkflowParser"]
