"""Help screen presenter - key reference generated from the keymaps."""

from __future__ import annotations

from rich.console import RenderableType
from rich.text import Text

from tuiporal.keyboard import (
    DETAIL_SCREEN_BINDINGS,
    DIALOG_BINDINGS,
    EVENT_OVERLAY_BINDINGS,
    NAMESPACES_SCREEN_BINDINGS,
    SEARCH_INPUT_BINDINGS,
    WORKFLOWS_SCREEN_BINDINGS,
    ScreenBinding,
    key_label,
)
from tuiporal.models.state.session import Session
from tuiporal.utils.viewport import scroll_lines

HELP_SECTIONS: list[tuple[str, list[ScreenBinding]]] = [
    ("Workflows", WORKFLOWS_SCREEN_BINDINGS),
    ("Search input", SEARCH_INPUT_BINDINGS),
    ("Namespaces", NAMESPACES_SCREEN_BINDINGS),
    ("Workflow detail", DETAIL_SCREEN_BINDINGS),
    ("Dialogs", DIALOG_BINDINGS),
    ("Event details", EVENT_OVERLAY_BINDINGS),
]

_KEY_COLUMN_WIDTH = 18


def help_lines() -> list[str]:
    lines: list[str] = []
    for title, bindings in HELP_SECTIONS:
        if lines:
            lines.append("")
        lines.append(f"[{title}]")
        for keys, _action, description in bindings:
            lines.append(f"  {key_label(keys):<{_KEY_COLUMN_WIDTH}}{description}")
    return lines


def render_help(session: Session, height: int) -> RenderableType:
    visible, _offset = scroll_lines(help_lines(), session.help.scroll_offset, max(1, height - 2))
    text = Text("Keyboard shortcuts", style="bold")
    text.append("\n\n")
    for line in visible:
        if line.startswith("["):
            text.append(line.strip("[]"), style="bold cyan")
        else:
            text.append(line)
        text.append("\n")
    return text
