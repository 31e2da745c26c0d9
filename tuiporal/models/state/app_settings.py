"""Application settings models."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, SecretStr

from tuiporal.constants.defaults import (
    ADDRESS_DEFAULT,
    AUTO_REFRESH_INTERVAL_DEFAULT,
    HISTORY_PAGE_SIZE_DEFAULT,
    NAMESPACE_DEFAULT,
    NAMESPACE_PAGE_SIZE_DEFAULT,
    PROFILE_NAME_DEFAULT,
    WORKFLOW_PAGE_SIZE_DEFAULT,
)
from tuiporal.constants.limits import (
    AUTO_REFRESH_INTERVAL_MIN,
    PAGE_SIZE_MAX,
    PAGE_SIZE_MIN,
)
from tuiporal.constants.timeouts import REQUEST_TIMEOUT


class TlsSettings(BaseModel):
    """TLS material for one connection profile (paths to PEM files)."""

    enabled: bool = True
    cert_path: str | None = None
    key_path: str | None = None
    ca_path: str | None = None
    server_name: str | None = None

    @property
    def is_mutual(self) -> bool:
        return bool(self.cert_path and self.key_path)


class ConnectionProfile(BaseModel):
    """Named connection target."""

    name: str
    address: str
    namespace: str = NAMESPACE_DEFAULT
    tls: TlsSettings | None = None
    api_key: SecretStr | None = None

    @property
    def uses_tls(self) -> bool:
        return self.tls is not None and self.tls.enabled


def _default_profiles() -> list[ConnectionProfile]:
    return [
        ConnectionProfile(
            name=PROFILE_NAME_DEFAULT,
            address=ADDRESS_DEFAULT,
            namespace=NAMESPACE_DEFAULT,
        )
    ]


class AppSettings(BaseModel):
    """Application settings model with validation."""

    model_config = ConfigDict(populate_by_name=True)

    # Connection
    profiles: list[ConnectionProfile] = Field(default_factory=_default_profiles)
    active_profile: str | None = PROFILE_NAME_DEFAULT

    # Paging
    page_size: int = Field(
        default=WORKFLOW_PAGE_SIZE_DEFAULT, ge=PAGE_SIZE_MIN, le=PAGE_SIZE_MAX
    )
    history_page_size: int = Field(
        default=HISTORY_PAGE_SIZE_DEFAULT, ge=PAGE_SIZE_MIN, le=PAGE_SIZE_MAX
    )
    namespace_page_size: int = Field(
        default=NAMESPACE_PAGE_SIZE_DEFAULT, ge=PAGE_SIZE_MIN, le=PAGE_SIZE_MAX
    )

    # UI preferences
    auto_refresh_interval: int = Field(
        default=AUTO_REFRESH_INTERVAL_DEFAULT, ge=AUTO_REFRESH_INTERVAL_MIN
    )  # seconds
    request_timeout_seconds: float = Field(default=REQUEST_TIMEOUT, gt=0)

    def get_active_profile(self) -> ConnectionProfile | None:
        """Resolve the active profile.

        Falls back to the first profile when no name is selected. A selected
        name that matches no profile resolves to None.
        """
        if self.active_profile:
            for profile in self.profiles:
                if profile.name == self.active_profile:
                    return profile
            return None
        return self.profiles[0] if self.profiles else None


class ConfigError(Exception):
    """Base exception for configuration errors."""


class ConfigLoadError(ConfigError):
    """Raised when settings fail to load."""


class ConfigSaveError(ConfigError):
    """Raised when settings fail to save."""
