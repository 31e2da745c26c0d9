"""Render dispatch - picks the presenter for the active screen."""

from __future__ import annotations

from collections.abc import Callable

from rich.console import RenderableType

from tuiporal.constants.enums import ScreenId
from tuiporal.models.state.session import Session
from tuiporal.screens.detail.presenter import render_detail
from tuiporal.screens.help.presenter import render_help
from tuiporal.screens.namespaces.presenter import render_namespaces
from tuiporal.screens.workflows.presenter import render_workflows

PRESENTERS: dict[ScreenId, Callable[[Session, int], RenderableType]] = {
    ScreenId.WORKFLOWS: render_workflows,
    ScreenId.NAMESPACES: render_namespaces,
    ScreenId.DETAIL: render_detail,
    ScreenId.HELP: render_help,
}


def render_body(session: Session, height: int) -> RenderableType:
    """Body renderable for the active screen, sized to ``height`` rows."""
    return PRESENTERS[session.active_screen](session, height)
