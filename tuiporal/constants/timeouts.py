"""Timeout constants for the TUI.

All timeout and interval values for remote requests, polling and shutdown.
"""

from typing import Final

# ============================================================================
# Remote call timeouts (float, in seconds)
# ============================================================================

REQUEST_TIMEOUT: Final = 30.0
CONNECT_TIMEOUT: Final = 10.0

# ============================================================================
# Loop intervals (float, in seconds)
# ============================================================================

# Upper bound on how long the main loop waits for input before a Tick.
POLL_INTERVAL: Final = 0.1
WORKER_SHUTDOWN_TIMEOUT: Final = 2.0

__all__ = [
    "CONNECT_TIMEOUT",
    "POLL_INTERVAL",
    "REQUEST_TIMEOUT",
    "WORKER_SHUTDOWN_TIMEOUT",
]
