"""Constants module for the Tuiporal TUI.

Centralized constants organized by domain:
- enums.py: All Enum class definitions
- values.py: Scalar constants (strings, numbers with Final)
- timeouts.py: Timeout values (seconds)
- limits.py: Limit values (max/min)
- defaults.py: Default values for settings

Note: Keyboard bindings are defined in tuiporal.keyboard module.
"""

from tuiporal.constants.defaults import (
    ADDRESS_DEFAULT,
    AUTO_REFRESH_INTERVAL_DEFAULT,
    HISTORY_PAGE_SIZE_DEFAULT,
    NAMESPACE_DEFAULT,
    NAMESPACE_PAGE_SIZE_DEFAULT,
    PROFILE_NAME_DEFAULT,
    WORKFLOW_PAGE_SIZE_DEFAULT,
)
from tuiporal.constants.enums import (
    BannerLevel,
    ConnectionStatus,
    ErrorKind,
    MutationKind,
    NamespaceState,
    PageDirection,
    ScreenId,
    WorkflowFilter,
    WorkflowStatus,
)
from tuiporal.constants.limits import (
    SCROLL_PAGE_STEP,
    SCROLL_STEP,
)
from tuiporal.constants.timeouts import (
    POLL_INTERVAL,
    REQUEST_TIMEOUT,
    WORKER_SHUTDOWN_TIMEOUT,
)
from tuiporal.constants.values import (
    APP_SUBTITLE,
    APP_TITLE,
)

__all__ = [
    # Defaults
    "ADDRESS_DEFAULT",
    # Application
    "APP_SUBTITLE",
    "APP_TITLE",
    "AUTO_REFRESH_INTERVAL_DEFAULT",
    "HISTORY_PAGE_SIZE_DEFAULT",
    "NAMESPACE_DEFAULT",
    "NAMESPACE_PAGE_SIZE_DEFAULT",
    # Timeouts
    "POLL_INTERVAL",
    "PROFILE_NAME_DEFAULT",
    "REQUEST_TIMEOUT",
    # Limits
    "SCROLL_PAGE_STEP",
    "SCROLL_STEP",
    "WORKER_SHUTDOWN_TIMEOUT",
    "WORKFLOW_PAGE_SIZE_DEFAULT",
    # Enums
    "BannerLevel",
    "ConnectionStatus",
    "ErrorKind",
    "MutationKind",
    "NamespaceState",
    "PageDirection",
    "ScreenId",
    "WorkflowFilter",
    "WorkflowStatus",
]
