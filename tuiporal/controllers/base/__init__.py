"""Base controller and remote error taxonomy."""

from tuiporal.controllers.base.base_controller import (
    BaseController,
    RemoteCapability,
    RemoteConnectionError,
    RemoteError,
    RequestError,
)

__all__ = [
    "BaseController",
    "RemoteCapability",
    "RemoteConnectionError",
    "RemoteError",
    "RequestError",
]
