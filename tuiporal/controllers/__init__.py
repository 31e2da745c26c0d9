"""Controllers module for Tuiporal.

Remote capabilities consumed by the worker loop.
"""

from __future__ import annotations

# Base classes
from tuiporal.controllers.base import (
    BaseController,
    RemoteCapability,
    RemoteConnectionError,
    RemoteError,
    RequestError,
)

# Temporal
from tuiporal.controllers.temporal import TemporalController

__all__ = [
    "BaseController",
    "RemoteCapability",
    "RemoteConnectionError",
    "RemoteError",
    "RequestError",
    "TemporalController",
]
