"""Formatting utilities for timestamps, durations and attribute values.

Provides functions shared by the presenters:
- Timestamps: rendered in local time, "-" when absent
- Durations: compact "3d", "12h 5m", "45s" forms
- Attribute bags: pretty-printed JSON for the event overlay
"""

from __future__ import annotations

import json
from datetime import datetime, timedelta
from typing import Any

TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S"
MISSING_VALUE = "-"

# Unit sizes in seconds, largest first.
_DURATION_UNITS: tuple[tuple[str, int], ...] = (
    ("d", 86400),
    ("h", 3600),
    ("m", 60),
    ("s", 1),
)


def format_timestamp(value: datetime | None) -> str:
    """Format an aware or naive datetime for display.

    Aware datetimes are converted to the local timezone first.
    """
    if value is None:
        return MISSING_VALUE
    if value.tzinfo is not None:
        value = value.astimezone()
    return value.strftime(TIMESTAMP_FORMAT)


def format_duration(value: timedelta | None, max_parts: int = 2) -> str:
    """Format a duration using at most ``max_parts`` units.

    Examples:
        timedelta(days=3) -> "3d"
        timedelta(hours=12, minutes=5) -> "12h 5m"
        timedelta(0) -> "0s"
    """
    if value is None:
        return MISSING_VALUE
    remaining = int(value.total_seconds())
    if remaining <= 0:
        return "0s"
    parts: list[str] = []
    for suffix, size in _DURATION_UNITS:
        count, remaining = divmod(remaining, size)
        if count:
            parts.append(f"{count}{suffix}")
        if len(parts) == max_parts:
            break
    return " ".join(parts)


def elapsed(start: datetime | None, end: datetime | None) -> timedelta | None:
    if start is None or end is None:
        return None
    return end - start


def format_attributes(attributes: dict[str, Any]) -> str:
    """Pretty-print an event attribute bag."""
    if not attributes:
        return "{}"
    return json.dumps(attributes, indent=2, sort_keys=True, default=str)


def truncate(text: str, width: int) -> str:
    """Cut ``text`` to ``width`` characters, marking the cut with an ellipsis."""
    if width <= 0:
        return ""
    if len(text) <= width:
        return text
    if width == 1:
        return "…"
    return text[: width - 1] + "…"
