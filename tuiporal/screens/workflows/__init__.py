"""Workflows screen."""

from tuiporal.screens.workflows.machine import WorkflowsMachine, next_filter
from tuiporal.screens.workflows.presenter import render_workflows

__all__ = ["WorkflowsMachine", "next_filter", "render_workflows"]
