"""Workflow history event record.

Event attributes are kept as a generic key/value bag. Kinds the parser does
not recognise keep their raw text in ``raw`` instead.
"""

from __future__ import annotations

from datetime import datetime
from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class HistoryEvent(BaseModel):
    """One entry of a workflow execution's event history."""

    model_config = ConfigDict(frozen=True)

    event_id: int
    event_type: str
    event_time: datetime | None = None
    attributes: dict[str, Any] = Field(default_factory=dict)
    raw: str | None = None
