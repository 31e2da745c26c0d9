"""Detail screen configuration - column definitions and dialog text."""

from __future__ import annotations

from tuiporal.constants.enums import MutationKind

# =============================================================================
# Table Column Definitions: list[tuple[str, int]] = [(name, width), ...]
# =============================================================================

EVENT_TABLE_COLUMNS: list[tuple[str, int]] = [
    ("ID", 6),
    ("Time", 20),
    ("Type", 48),
]

# =============================================================================
# Dialogs
# =============================================================================

DIALOG_TITLES: dict[MutationKind, str] = {
    MutationKind.TERMINATE: "Terminate workflow",
    MutationKind.CANCEL: "Cancel workflow",
    MutationKind.SIGNAL: "Signal workflow",
}

DIALOG_PROMPTS: dict[MutationKind, str] = {
    MutationKind.TERMINATE: "Reason (optional):",
    MutationKind.CANCEL: "Request cancellation of this workflow?",
    MutationKind.SIGNAL: "Signal name:",
}
