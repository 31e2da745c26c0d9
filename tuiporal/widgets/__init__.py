"""Widgets module for the Tuiporal TUI."""

from tuiporal.widgets.panes import BodyView, KeyHints, PaneStatic, StatusBar

__all__ = [
    "BodyView",
    "KeyHints",
    "PaneStatic",
    "StatusBar",
]
