"""Namespaces screen presenter."""

from __future__ import annotations

from rich import box
from rich.console import Group, RenderableType
from rich.table import Table
from rich.text import Text

from tuiporal.models.state.session import Session
from tuiporal.screens.common_presenter import render_error, title_line
from tuiporal.screens.namespaces.config import NAMESPACE_TABLE_COLUMNS
from tuiporal.utils.formatting import format_duration, truncate
from tuiporal.utils.viewport import visible_window

_CHROME_ROWS = 5


def render_namespaces(session: Session, height: int) -> RenderableType:
    state = session.namespaces
    parts: list[RenderableType] = [title_line("Namespaces", session, state.loading)]
    if state.error:
        parts.append(render_error(state.error))
    if not state.items:
        if not state.loading and not state.error:
            parts.append(Text("No namespaces found", style="dim italic"))
        return Group(*parts)

    table = Table(box=box.SIMPLE_HEAD, expand=True, show_edge=False)
    for name, width in NAMESPACE_TABLE_COLUMNS:
        table.add_column(name, max_width=width, no_wrap=True)
    rows = max(1, height - _CHROME_ROWS)
    for index in visible_window(len(state.items), state.selection_index, rows):
        record = state.items[index]
        marker = "*" if record.name == session.current_namespace else ""
        table.add_row(
            marker,
            record.name,
            record.state.value,
            format_duration(record.retention),
            truncate(record.description, NAMESPACE_TABLE_COLUMNS[-1][1]),
            style="reverse" if index == state.selection_index else None,
        )
    parts.append(table)
    return Group(*parts)
