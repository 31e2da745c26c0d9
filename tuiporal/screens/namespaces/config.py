"""Namespaces screen configuration - column definitions."""

from __future__ import annotations

# =============================================================================
# Table Column Definitions: list[tuple[str, int]] = [(name, width), ...]
# =============================================================================

NAMESPACE_TABLE_COLUMNS: list[tuple[str, int]] = [
    ("", 1),
    ("Name", 32),
    ("State", 12),
    ("Retention", 10),
    ("Description", 48),
]
