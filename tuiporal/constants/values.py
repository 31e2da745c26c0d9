"""Scalar constants for the TUI.

All application-level constants with proper type hints using Final.
"""

from typing import Final

# ============================================================================
# Application
# ============================================================================

APP_TITLE: Final = "Tuiporal"
APP_SUBTITLE: Final = "Temporal TUI Client"
CLIENT_IDENTITY: Final = "tuiporal"

# ============================================================================
# Spinner frames (braille dots)
# ============================================================================

SPINNER_FRAMES: Final = ("⠋", "⠙", "⠹", "⠸", "⠼", "⠴", "⠦", "⠧", "⠇", "⠏")
SPINNER_FRAME_DIVISOR: Final = 3

# ============================================================================
# Messages
# ============================================================================

NO_PROFILE_MESSAGE: Final = "No active profile configured"
NOT_CONNECTED_MESSAGE: Final = "Not connected to Temporal"
DEFAULT_TERMINATE_REASON: Final = "Terminated by user"
EMPTY_SIGNAL_MESSAGE: Final = "Signal name cannot be empty"

# ============================================================================
# Status markup (rich text)
# ============================================================================

CONNECTED_MARKUP: Final = "[green]● Connected[/green]"
CONNECTING_MARKUP: Final = "[yellow]● Connecting[/yellow]"
DISCONNECTED_MARKUP: Final = "[red]● Disconnected[/red]"

__all__ = [
    "APP_SUBTITLE",
    "APP_TITLE",
    "CLIENT_IDENTITY",
    "CONNECTED_MARKUP",
    "CONNECTING_MARKUP",
    "DEFAULT_TERMINATE_REASON",
    "DISCONNECTED_MARKUP",
    "EMPTY_SIGNAL_MESSAGE",
    "NOT_CONNECTED_MESSAGE",
    "NO_PROFILE_MESSAGE",
    "SPINNER_FRAMES",
    "SPINNER_FRAME_DIVISOR",
]
