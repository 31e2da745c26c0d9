"""Keyboard bindings module.

This module provides all keyboard bindings for the Tuiporal TUI.
Bindings are organized into two categories:

- app: App-level bindings (APP_BINDINGS)
- navigation: Screen and overlay bindings (*_BINDINGS)
"""

from tuiporal.keyboard.app import APP_BINDINGS
from tuiporal.keyboard.navigation import (
    DETAIL_SCREEN_BINDINGS,
    DIALOG_BINDINGS,
    EVENT_OVERLAY_BINDINGS,
    HELP_SCREEN_BINDINGS,
    NAMESPACES_SCREEN_BINDINGS,
    SEARCH_INPUT_BINDINGS,
    WORKFLOWS_SCREEN_BINDINGS,
    ScreenBinding,
    key_label,
)

__all__ = [
    "APP_BINDINGS",
    # Screen-specific bindings
    "DETAIL_SCREEN_BINDINGS",
    "DIALOG_BINDINGS",
    "EVENT_OVERLAY_BINDINGS",
    "HELP_SCREEN_BINDINGS",
    "NAMESPACES_SCREEN_BINDINGS",
    "SEARCH_INPUT_BINDINGS",
    "WORKFLOWS_SCREEN_BINDINGS",
    "ScreenBinding",
    "key_label",
]
