"""Default values for settings.

All default values used in AppSettings model and validation fallback values.
"""

from typing import Final

# ============================================================================
# Connection defaults
# ============================================================================

PROFILE_NAME_DEFAULT: Final = "local"
ADDRESS_DEFAULT: Final = "localhost:7233"
NAMESPACE_DEFAULT: Final = "default"

# ============================================================================
# Paging defaults
# ============================================================================

WORKFLOW_PAGE_SIZE_DEFAULT: Final = 50
HISTORY_PAGE_SIZE_DEFAULT: Final = 100
NAMESPACE_PAGE_SIZE_DEFAULT: Final = 50

# ============================================================================
# UI defaults
# ============================================================================

AUTO_REFRESH_INTERVAL_DEFAULT: Final = 5
LOG_LEVEL_DEFAULT: Final = "INFO"

__all__ = [
    "ADDRESS_DEFAULT",
    "AUTO_REFRESH_INTERVAL_DEFAULT",
    "HISTORY_PAGE_SIZE_DEFAULT",
    "LOG_LEVEL_DEFAULT",
    "NAMESPACE_DEFAULT",
    "NAMESPACE_PAGE_SIZE_DEFAULT",
    "PROFILE_NAME_DEFAULT",
    "WORKFLOW_PAGE_SIZE_DEFAULT",
]
