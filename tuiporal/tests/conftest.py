"""Shared fixtures for Tuiporal tests."""

from __future__ import annotations

import io
from datetime import datetime, timezone

import pytest
from rich.console import Console

from tuiporal.constants.enums import MutationKind, WorkflowStatus
from tuiporal.controllers.base import BaseController
from tuiporal.engine.commands import Command
from tuiporal.engine.event_source import KeyPress
from tuiporal.models.core import HistoryEvent, NamespaceRecord, Page, WorkflowRecord
from tuiporal.models.state.session import Session
from tuiporal.screens.state_machine import ScreenStateMachine

STARTED_AT = datetime(2024, 5, 1, 12, 0, tzinfo=timezone.utc)


def make_workflow(
    workflow_id: str,
    status: WorkflowStatus = WorkflowStatus.RUNNING,
    run_id: str | None = None,
) -> WorkflowRecord:
    return WorkflowRecord(
        workflow_id=workflow_id,
        run_id=run_id if run_id is not None else f"run-{workflow_id}",
        workflow_type="OrderWorkflow",
        status=status,
        task_queue="orders",
        start_time=STARTED_AT,
    )


def make_event(event_id: int, event_type: str = "WorkflowTaskScheduled") -> HistoryEvent:
    return HistoryEvent(
        event_id=event_id,
        event_type=event_type,
        event_time=STARTED_AT,
        attributes={"taskQueue": {"name": "orders"}},
    )


class FakeCapability(BaseController):
    """In-memory remote capability recording every call.

    Set ``failures[<method name>]`` to an exception to make that call raise.
    """

    def __init__(self) -> None:
        self.calls: list[tuple[str, tuple]] = []
        self.failures: dict[str, Exception] = {}
        self.pages: dict[bytes, Page[WorkflowRecord]] = {
            b"": Page(items=(make_workflow("wf-1"), make_workflow("wf-2")), next_page_token=b"p2"),
            b"p2": Page(items=(make_workflow("wf-3"),), next_page_token=b""),
        }
        self.found: WorkflowRecord | None = make_workflow("wf-1")
        self.history: Page[HistoryEvent] = Page(items=(make_event(1), make_event(2)))
        self.namespaces: Page[NamespaceRecord] = Page(
            items=(NamespaceRecord(name="default"), NamespaceRecord(name="orders"))
        )
        self.closed = False

    def _enter(self, name: str, *args) -> None:
        self.calls.append((name, args))
        failure = self.failures.get(name)
        if failure is not None:
            raise failure

    async def connect(self) -> None:
        self._enter("connect")

    async def list_page(self, namespace, page_size, page_token, query):
        self._enter("list_page", namespace, page_size, page_token, query)
        return self.pages.get(page_token, Page())

    async def find_one(self, namespace, query):
        self._enter("find_one", namespace, query)
        return self.found

    async def get_history(self, namespace, workflow_id, run_id, page_size, page_token):
        self._enter("get_history", namespace, workflow_id, run_id, page_size, page_token)
        return self.history

    async def list_namespaces(self, page_size, page_token):
        self._enter("list_namespaces", page_size, page_token)
        return self.namespaces

    async def describe_namespace(self, name):
        self._enter("describe_namespace", name)
        return NamespaceRecord(name=name)

    async def mutate(self, namespace, kind: MutationKind, workflow_id, run_id, argument):
        self._enter("mutate", namespace, kind, workflow_id, run_id, argument)

    async def close(self) -> None:
        self.closed = True


class FakeClock:
    """Manually advanced monotonic clock."""

    def __init__(self, now: float = 1000.0) -> None:
        self.now = now

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


@pytest.fixture
def fake_capability() -> FakeCapability:
    return FakeCapability()


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def session() -> Session:
    return Session(current_namespace="default", profile_name="local")


@pytest.fixture
def sent() -> list[Command]:
    """Commands issued by the machine fixture, in order."""
    return []


@pytest.fixture
def machine(session: Session, sent: list[Command], clock: FakeClock) -> ScreenStateMachine:
    return ScreenStateMachine(session, sent.append, clock)


@pytest.fixture
def workflow_factory():
    return make_workflow


@pytest.fixture
def event_factory():
    return make_event


@pytest.fixture
def press(machine: ScreenStateMachine):
    """Feed keys to the machine; single printable keys carry their character."""

    def _press(*keys: str) -> None:
        for key in keys:
            character = key if len(key) == 1 else None
            machine.handle_key(KeyPress(key=key, character=character))

    return _press


@pytest.fixture
def render_text():
    """Render a rich renderable to plain text at a fixed width."""

    def _render(renderable, width: int = 140) -> str:
        console = Console(width=width, record=True, file=io.StringIO(), color_system=None)
        console.print(renderable)
        return console.export_text()

    return _render
