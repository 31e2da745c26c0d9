"""Workflows screen presenter - builds the workflow table and its header lines."""

from __future__ import annotations

from rich import box
from rich.console import Group, RenderableType
from rich.table import Table
from rich.text import Text

from tuiporal.models.state.session import Session
from tuiporal.screens.common_presenter import render_error, title_line
from tuiporal.screens.workflows.config import STATUS_STYLES, WORKFLOW_TABLE_COLUMNS
from tuiporal.utils.formatting import format_timestamp, truncate
from tuiporal.utils.viewport import visible_window

# Title, query line, blank, table header and border rows.
_CHROME_ROWS = 6


def query_line(session: Session) -> Text:
    state = session.workflows
    text = Text()
    if state.input_mode:
        text.append("/ ", style="bold yellow")
        text.append(state.query_draft)
        text.append("█", style="blink")
        return text
    text.append("Filter: ", style="dim")
    text.append(state.filter.value if state.filter else "None", style="bold")
    text.append("   Query: ", style="dim")
    text.append(state.query or "-", style="bold")
    text.append("   Auto-refresh: ", style="dim")
    if state.auto_refresh.enabled:
        text.append(f"on ({state.auto_refresh.interval_seconds}s)", style="green")
    else:
        text.append("off")
    return text


def build_table(session: Session, height: int) -> Table:
    state = session.workflows
    table = Table(box=box.SIMPLE_HEAD, expand=True, show_edge=False)
    for name, width in WORKFLOW_TABLE_COLUMNS:
        table.add_column(name, min_width=min(width, 12), max_width=width, no_wrap=True)
    rows = max(1, height - _CHROME_ROWS)
    for index in visible_window(len(state.items), state.selection_index, rows):
        record = state.items[index]
        table.add_row(
            truncate(record.workflow_id, WORKFLOW_TABLE_COLUMNS[0][1]),
            truncate(record.workflow_type, WORKFLOW_TABLE_COLUMNS[1][1]),
            Text(record.status.value, style=STATUS_STYLES[record.status]),
            format_timestamp(record.start_time),
            format_timestamp(record.close_time),
            style="reverse" if index == state.selection_index else None,
        )
    return table


def render_workflows(session: Session, height: int) -> RenderableType:
    state = session.workflows
    pager = f"page {state.page}"
    if state.has_next_page:
        pager += " ›"
    parts: list[RenderableType] = [
        title_line(f"Workflows · {session.current_namespace} · {pager}", session, state.loading),
        query_line(session),
    ]
    if state.error:
        parts.append(render_error(state.error))
    if state.items:
        parts.append(build_table(session, height))
    elif not state.loading and not state.error:
        parts.append(Text("No workflows found", style="dim italic"))
    return Group(*parts)
