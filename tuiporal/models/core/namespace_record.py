"""Namespace record."""

from __future__ import annotations

from datetime import timedelta

from pydantic import BaseModel, ConfigDict

from tuiporal.constants.enums import NamespaceState


class NamespaceRecord(BaseModel):
    """A namespace as described by the Temporal frontend."""

    model_config = ConfigDict(frozen=True)

    name: str
    namespace_id: str = ""
    state: NamespaceState = NamespaceState.UNSPECIFIED
    description: str = ""
    owner_email: str = ""
    retention: timedelta | None = None
