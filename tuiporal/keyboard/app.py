"""App-level keyboard bindings.

Every other key is forwarded to the active screen machine, so only
bindings that must work regardless of input mode live here.
"""

from textual.binding import Binding

# ============================================================================
# Textual Binding objects for app-level bindings
# ============================================================================

APP_BINDINGS: list[Binding] = [
    Binding("ctrl+c", "quit", "Quit", priority=True, show=False),
]

__all__ = [
    "APP_BINDINGS",
]
