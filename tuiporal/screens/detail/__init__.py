"""Workflow detail screen."""

from tuiporal.screens.detail.machine import DetailMachine
from tuiporal.screens.detail.presenter import render_detail

__all__ = ["DetailMachine", "render_detail"]
