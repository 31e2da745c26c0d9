"""Smoke tests running the Textual app headless against an in-memory capability."""

from __future__ import annotations

import asyncio

import pytest

from tuiporal.app import TuiporalApp
from tuiporal.constants.enums import ScreenId
from tuiporal.engine.runtime import DashboardRuntime
from tuiporal.models.state.app_settings import AppSettings
from tuiporal.widgets import BodyView, StatusBar


async def settle(pilot, condition, attempts: int = 100) -> bool:
    """Let ticks run until ``condition`` holds."""
    for _ in range(attempts):
        if condition():
            return True
        await asyncio.sleep(0.02)
        await pilot.pause()
    return condition()


@pytest.fixture
def app(fake_capability) -> TuiporalApp:
    return TuiporalApp(DashboardRuntime(AppSettings(), capability=fake_capability))


@pytest.mark.asyncio
@pytest.mark.smoke
async def test_app_lists_workflows(app: TuiporalApp) -> None:
    """The first page appears and the status bar reports the connection."""
    async with app.run_test() as pilot:
        assert await settle(pilot, lambda: len(app.session.workflows.items) == 2)
        assert app.session.connection.is_connected
        await pilot.pause()
        assert app.query_one("#status-bar", StatusBar).last_renderable is not None
        assert app.query_one("#body", BodyView).last_renderable is not None


@pytest.mark.asyncio
@pytest.mark.smoke
async def test_app_opens_detail_and_returns(app: TuiporalApp) -> None:
    async with app.run_test() as pilot:
        assert await settle(pilot, lambda: len(app.session.workflows.items) == 2)
        await pilot.press("enter")
        assert app.session.active_screen is ScreenId.DETAIL
        assert await settle(pilot, lambda: app.session.detail.subject is not None)
        assert len(app.session.detail.events) == 2
        await pilot.press("escape")
        assert app.session.active_screen is ScreenId.WORKFLOWS


@pytest.mark.asyncio
@pytest.mark.smoke
async def test_app_quits_on_q(app: TuiporalApp) -> None:
    async with app.run_test() as pilot:
        await pilot.press("q")
        await pilot.pause()
        assert not app.session.running
