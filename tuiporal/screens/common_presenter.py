"""Presenter helpers shared by every screen - status bar, key hints, banners.

All functions are pure: they read the session and return rich renderables.
"""

from __future__ import annotations

from rich.console import RenderableType
from rich.text import Text

from tuiporal.constants.enums import ConnectionStatus, ScreenId
from tuiporal.constants.values import (
    APP_TITLE,
    CONNECTED_MARKUP,
    CONNECTING_MARKUP,
    DISCONNECTED_MARKUP,
)
from tuiporal.keyboard import (
    DETAIL_SCREEN_BINDINGS,
    DIALOG_BINDINGS,
    EVENT_OVERLAY_BINDINGS,
    HELP_SCREEN_BINDINGS,
    NAMESPACES_SCREEN_BINDINGS,
    SEARCH_INPUT_BINDINGS,
    WORKFLOWS_SCREEN_BINDINGS,
    ScreenBinding,
    key_label,
)
from tuiporal.models.state.detail_state import Banner
from tuiporal.models.state.session import Session

_SCREEN_BINDINGS: dict[ScreenId, list[ScreenBinding]] = {
    ScreenId.WORKFLOWS: WORKFLOWS_SCREEN_BINDINGS,
    ScreenId.NAMESPACES: NAMESPACES_SCREEN_BINDINGS,
    ScreenId.DETAIL: DETAIL_SCREEN_BINDINGS,
    ScreenId.HELP: HELP_SCREEN_BINDINGS,
}


def connection_text(session: Session) -> Text:
    connection = session.connection
    if connection.status is ConnectionStatus.CONNECTED:
        return Text.from_markup(CONNECTED_MARKUP)
    if connection.status is ConnectionStatus.CONNECTING:
        return Text.from_markup(f"{CONNECTING_MARKUP} {session.spinner}")
    if connection.status is ConnectionStatus.ERRORED:
        text = Text("● Error", style="bold red")
        if connection.message:
            text.append(f": {connection.message}", style="red")
        return text
    return Text.from_markup(DISCONNECTED_MARKUP)


def render_status_bar(session: Session) -> RenderableType:
    text = Text(APP_TITLE, style="bold")
    text.append("  │  ")
    text.append_text(connection_text(session))
    text.append("  │  ")
    text.append(f"profile: {session.profile_name or '-'}")
    text.append("  │  ")
    text.append(f"namespace: {session.current_namespace}", style="cyan")
    return text


def active_bindings(session: Session) -> list[ScreenBinding]:
    """Bindings currently in effect, overlays first."""
    screen = session.active_screen
    if screen is ScreenId.WORKFLOWS and session.workflows.input_mode:
        return SEARCH_INPUT_BINDINGS
    if screen is ScreenId.DETAIL:
        detail = session.detail
        if detail.event_overlay is not None:
            return EVENT_OVERLAY_BINDINGS
        if detail.pending_dialog is not None:
            return DIALOG_BINDINGS
    return _SCREEN_BINDINGS[screen]


def render_key_hints(session: Session) -> RenderableType:
    text = Text()
    for index, (keys, _action, description) in enumerate(active_bindings(session)):
        if index:
            text.append("  ")
        text.append(key_label(keys.split(",")[0]), style="bold yellow")
        text.append(f" {description}", style="dim")
    return text


def render_banner(banner: Banner) -> Text:
    style = "bold white on red" if banner.is_error else "bold black on green"
    text = Text(f" {banner.message} ", style=style)
    text.append("  (press any key)", style="dim")
    return text


def render_error(message: str) -> Text:
    return Text(f"Error: {message}", style="bold red")


def title_line(title: str, session: Session, loading: bool) -> Text:
    text = Text(title, style="bold")
    if loading:
        text.append(f"  {session.spinner} loading", style="yellow")
    return text
