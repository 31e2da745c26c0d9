"""Detail screen presenter - workflow summary, event list, dialogs and overlay."""

from __future__ import annotations

from rich import box
from rich.console import Group, RenderableType
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from tuiporal.models.core import HistoryEvent, WorkflowRecord
from tuiporal.models.state.detail_state import (
    DetailViewState,
    EventDetailOverlay,
    PendingDialog,
)
from tuiporal.models.state.session import Session
from tuiporal.screens.common_presenter import render_banner, render_error, title_line
from tuiporal.screens.detail.config import (
    DIALOG_PROMPTS,
    DIALOG_TITLES,
    EVENT_TABLE_COLUMNS,
)
from tuiporal.screens.workflows.config import STATUS_STYLES
from tuiporal.utils.formatting import (
    elapsed,
    format_attributes,
    format_duration,
    format_timestamp,
)
from tuiporal.utils.viewport import scroll_lines, visible_window

# Title, summary panel (8 rows), table header and borders.
_CHROME_ROWS = 14
_OVERLAY_CHROME_ROWS = 4


def render_summary(workflow: WorkflowRecord) -> Panel:
    grid = Table.grid(padding=(0, 2))
    grid.add_column(style="dim", no_wrap=True)
    grid.add_column()
    grid.add_row("Workflow ID", workflow.workflow_id)
    grid.add_row("Run ID", workflow.run_id or "-")
    grid.add_row("Type", workflow.workflow_type)
    grid.add_row("Status", Text(workflow.status.value, style=STATUS_STYLES[workflow.status]))
    grid.add_row("Task queue", workflow.task_queue or "-")
    grid.add_row("Started", format_timestamp(workflow.start_time))
    grid.add_row(
        "Closed",
        f"{format_timestamp(workflow.close_time)}"
        + (
            f"  ({format_duration(elapsed(workflow.start_time, workflow.close_time))})"
            if workflow.close_time
            else ""
        ),
    )
    grid.add_row("History length", str(workflow.history_length))
    return Panel(grid, box=box.ROUNDED, title="Workflow", title_align="left")


def render_events(state: DetailViewState, rows: int) -> RenderableType:
    if not state.events:
        return Text("No history events", style="dim italic")
    table = Table(box=box.SIMPLE_HEAD, expand=True, show_edge=False)
    for name, width in EVENT_TABLE_COLUMNS:
        table.add_column(name, max_width=width, no_wrap=True)
    for index in visible_window(len(state.events), state.selection_index, rows):
        event = state.events[index]
        table.add_row(
            str(event.event_id),
            format_timestamp(event.event_time),
            event.event_type,
            style="reverse" if index == state.selection_index else None,
        )
    if not state.events_truncated:
        return table
    note = Text(
        f"Showing the first {len(state.events)} events; history continues on the server.",
        style="dim italic",
    )
    return Group(table, note)


def render_dialog(dialog: PendingDialog) -> Panel:
    body = Text(DIALOG_PROMPTS[dialog.kind])
    if dialog.accepts_input:
        body.append("\n> ", style="bold yellow")
        body.append(dialog.input_buffer)
        body.append("█", style="blink")
    body.append("\n\nEnter confirm · Esc cancel", style="dim")
    return Panel(body, title=DIALOG_TITLES[dialog.kind], border_style="yellow", box=box.DOUBLE)


def event_lines(event: HistoryEvent) -> list[str]:
    lines = [
        f"Event {event.event_id}: {event.event_type}",
        f"Time: {format_timestamp(event.event_time)}",
        "",
    ]
    if event.attributes:
        lines.extend(format_attributes(event.attributes).splitlines())
    elif event.raw:
        lines.extend(event.raw.splitlines())
    else:
        lines.append("(no attributes)")
    return lines


def render_event_overlay(
    overlay: EventDetailOverlay, event: HistoryEvent, height: int
) -> RenderableType:
    visible, offset = scroll_lines(
        event_lines(event),
        overlay.scroll_offset,
        max(1, height - _OVERLAY_CHROME_ROWS),
    )
    return Panel(
        Text("\n".join(visible)),
        title=f"Event {event.event_id}",
        subtitle=f"line {offset + 1}",
        box=box.ROUNDED,
    )


def render_detail(session: Session, height: int) -> RenderableType:
    state = session.detail
    event = state.overlay_event()
    if event is not None:
        return render_event_overlay(state.event_overlay, event, height)

    parts: list[RenderableType] = [
        title_line(f"Workflow {state.workflow_id}", session, state.loading)
    ]
    if state.banner is not None:
        parts.append(render_banner(state.banner))
    if state.error:
        parts.append(render_error(state.error))
    if state.subject is not None:
        parts.append(render_summary(state.subject))
        parts.append(render_events(state, max(1, height - _CHROME_ROWS)))
    if state.pending_dialog is not None:
        parts.append(render_dialog(state.pending_dialog))
    return Group(*parts)
