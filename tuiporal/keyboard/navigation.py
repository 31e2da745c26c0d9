"""Screen-specific keyboard bindings.

Keys use Textual key names. One entry may list several keys separated by
commas; the first one is shown in help and key hints.
"""

from typing import Annotated

ScreenBinding = Annotated[tuple[str, str, str], "key, action, description"]

# ============================================================================
# Workflows Screen Bindings
# ============================================================================

WORKFLOWS_SCREEN_BINDINGS: list[ScreenBinding] = [
    ("q,escape", "quit", "Quit"),
    ("1", "nav_workflows", "Workflows"),
    ("2", "nav_namespaces", "Namespaces"),
    ("question_mark", "show_help", "Help"),
    ("slash", "start_search", "Search"),
    ("f", "cycle_filter", "Filter"),
    ("c", "clear_filter", "Clear"),
    ("a", "toggle_auto_refresh", "Auto-refresh"),
    ("j,down", "select_next", "Down"),
    ("k,up", "select_previous", "Up"),
    ("r", "refresh", "Refresh"),
    ("n,right", "next_page", "Next page"),
    ("p,left", "prev_page", "Prev page"),
    ("enter", "open_detail", "Details"),
]

# Active while the search input is focused.
SEARCH_INPUT_BINDINGS: list[ScreenBinding] = [
    ("enter", "commit_search", "Apply"),
    ("escape", "cancel_search", "Cancel"),
    ("backspace", "delete_character", "Delete"),
    ("up", "history_previous", "Older query"),
    ("down", "history_next", "Newer query"),
]

# ============================================================================
# Namespaces Screen Bindings
# ============================================================================

NAMESPACES_SCREEN_BINDINGS: list[ScreenBinding] = [
    ("q,escape,1", "nav_workflows", "Back"),
    ("j,down", "select_next", "Down"),
    ("k,up", "select_previous", "Up"),
    ("r", "refresh", "Refresh"),
    ("a", "toggle_auto_refresh", "Auto-refresh"),
    ("question_mark", "show_help", "Help"),
    ("enter", "switch_namespace", "Use namespace"),
]

# ============================================================================
# Detail Screen Bindings
# ============================================================================

DETAIL_SCREEN_BINDINGS: list[ScreenBinding] = [
    ("q,escape,1", "nav_workflows", "Back"),
    ("2", "nav_namespaces", "Namespaces"),
    ("question_mark", "show_help", "Help"),
    ("j,down", "select_next", "Next event"),
    ("k,up", "select_previous", "Prev event"),
    ("enter", "open_event", "Event details"),
    ("r", "refresh", "Reload"),
    ("t", "terminate", "Terminate"),
    ("x", "cancel_workflow", "Cancel"),
    ("s", "signal", "Signal"),
]

# Active while a confirmation dialog is open.
DIALOG_BINDINGS: list[ScreenBinding] = [
    ("enter", "confirm", "Confirm"),
    ("escape", "dismiss", "Cancel"),
    ("backspace", "delete_character", "Delete"),
]

# Active while the event detail overlay is open.
EVENT_OVERLAY_BINDINGS: list[ScreenBinding] = [
    ("q,escape", "close", "Close"),
    ("j,down", "scroll_down", "Down"),
    ("k,up", "scroll_up", "Up"),
    ("pagedown", "page_down", "Page down"),
    ("pageup", "page_up", "Page up"),
]

# ============================================================================
# Help Screen Bindings
# ============================================================================

HELP_SCREEN_BINDINGS: list[ScreenBinding] = [
    ("q,escape,question_mark", "back", "Back"),
    ("j,down", "scroll_down", "Down"),
    ("k,up", "scroll_up", "Up"),
    ("pagedown", "page_down", "Page down"),
    ("pageup", "page_up", "Page up"),
]

# Display labels for Textual key names that are not printable as-is.
KEY_LABELS: dict[str, str] = {
    "question_mark": "?",
    "slash": "/",
    "escape": "Esc",
    "enter": "Enter",
    "backspace": "Backspace",
    "up": "↑",
    "down": "↓",
    "left": "←",
    "right": "→",
    "pageup": "PgUp",
    "pagedown": "PgDn",
}


def key_label(keys: str) -> str:
    """Return a display label for a comma-separated key list."""
    return "/".join(KEY_LABELS.get(key, key) for key in keys.split(","))


__all__ = [
    "DETAIL_SCREEN_BINDINGS",
    "DIALOG_BINDINGS",
    "EVENT_OVERLAY_BINDINGS",
    "HELP_SCREEN_BINDINGS",
    "KEY_LABELS",
    "NAMESPACES_SCREEN_BINDINGS",
    "SEARCH_INPUT_BINDINGS",
    "ScreenBinding",
    "WORKFLOWS_SCREEN_BINDINGS",
    "key_label",
]
