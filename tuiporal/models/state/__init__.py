"""Mutable UI state and persisted settings."""

from tuiporal.models.state.app_settings import (
    AppSettings,
    ConfigError,
    ConfigLoadError,
    ConfigSaveError,
    ConnectionProfile,
    TlsSettings,
)
from tuiporal.models.state.config_manager import ConfigManager
from tuiporal.models.state.detail_state import (
    Banner,
    DetailViewState,
    EventDetailOverlay,
    InputValidationError,
    PendingDialog,
)
from tuiporal.models.state.list_state import AutoRefresh, ListViewState, PageSnapshot
from tuiporal.models.state.session import (
    ConnectionState,
    HelpState,
    InvalidTransitionError,
    Session,
)

__all__ = [
    "AppSettings",
    "AutoRefresh",
    "Banner",
    "ConfigError",
    "ConfigLoadError",
    "ConfigManager",
    "ConfigSaveError",
    "ConnectionProfile",
    "ConnectionState",
    "DetailViewState",
    "EventDetailOverlay",
    "HelpState",
    "InputValidationError",
    "InvalidTransitionError",
    "ListViewState",
    "PageSnapshot",
    "PendingDialog",
    "Session",
    "TlsSettings",
]
