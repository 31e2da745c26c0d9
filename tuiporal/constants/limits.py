"""Limit and threshold constants for the TUI.

All limit values, scroll steps, and validation ranges.
"""

from typing import Final

# ============================================================================
# Validation limits
# ============================================================================

PAGE_SIZE_MIN: Final = 1
PAGE_SIZE_MAX: Final = 1000
AUTO_REFRESH_INTERVAL_MIN: Final = 1

# ============================================================================
# Scrolling
# ============================================================================

SCROLL_STEP: Final = 1
SCROLL_PAGE_STEP: Final = 10
QUERY_HISTORY_MAX: Final = 50

__all__ = [
    "AUTO_REFRESH_INTERVAL_MIN",
    "PAGE_SIZE_MAX",
    "PAGE_SIZE_MIN",
    "QUERY_HISTORY_MAX",
    "SCROLL_PAGE_STEP",
    "SCROLL_STEP",
]
