"""Utility functions for Tuiporal."""

from tuiporal.utils.formatting import (
    elapsed,
    format_attributes,
    format_duration,
    format_timestamp,
    truncate,
)
from tuiporal.utils.viewport import scroll_lines, visible_window

__all__ = [
    # Formatting
    "elapsed",
    "format_attributes",
    "format_duration",
    "format_timestamp",
    "truncate",
    # Viewport
    "scroll_lines",
    "visible_window",
]
