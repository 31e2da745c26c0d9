"""Tests for the worker loop."""

from __future__ import annotations

import pytest

from tuiporal.constants.enums import ErrorKind, MutationKind, PageDirection
from tuiporal.constants.values import NO_PROFILE_MESSAGE
from tuiporal.controllers.base import RemoteConnectionError, RequestError
from tuiporal.engine.channels import Channel
from tuiporal.engine.commands import (
    Connect,
    LoadPage,
    Mutate,
    RefreshList,
    RefreshNamespaces,
    SwitchNamespace,
    ViewDetail,
)
from tuiporal.engine.results import (
    CommandFailed,
    Connected,
    DetailLoaded,
    ListLoaded,
    MutationApplied,
    NamespacesLoaded,
    NamespaceSwitched,
)
from tuiporal.engine.worker_loop import WorkerLoop, mutation_message, workflow_id_query


def build_worker(capability) -> WorkerLoop:
    return WorkerLoop(capability, Channel("commands"), Channel("results"), "default", page_size=2)


class TestHelpers:
    def test_workflow_id_query_escapes_quotes(self) -> None:
        assert workflow_id_query("it's") == "WorkflowId = 'it\\'s'"

    @pytest.mark.parametrize(
        ("kind", "argument", "expected"),
        [
            (MutationKind.TERMINATE, "stuck", "Workflow wf-1 terminated successfully"),
            (MutationKind.CANCEL, None, "Workflow wf-1 cancel requested successfully"),
            (MutationKind.SIGNAL, "ping", "Signal 'ping' sent to workflow wf-1 successfully"),
        ],
    )
    def test_mutation_message(self, kind, argument, expected) -> None:
        assert mutation_message(kind, "wf-1", argument) == expected


class TestExecute:
    """One command in, one result out."""

    @pytest.mark.asyncio
    async def test_connect(self, fake_capability) -> None:
        result = await build_worker(fake_capability).execute(Connect(seq=1))
        assert isinstance(result, Connected)
        assert result.seq == 1

    @pytest.mark.asyncio
    async def test_refresh_list_uses_first_page(self, fake_capability) -> None:
        worker = build_worker(fake_capability)
        result = await worker.execute(RefreshList(query="x = 1", seq=2))
        assert isinstance(result, ListLoaded)
        assert [r.workflow_id for r in result.records] == ["wf-1", "wf-2"]
        assert result.next_page_token == b"p2"
        assert fake_capability.calls[-1] == ("list_page", ("default", 2, b"", "x = 1"))

    @pytest.mark.asyncio
    async def test_load_page_passes_token(self, fake_capability) -> None:
        worker = build_worker(fake_capability)
        command = LoadPage(query="", page_token=b"p2", direction=PageDirection.FORWARD, seq=3)
        result = await worker.execute(command)
        assert [r.workflow_id for r in result.records] == ["wf-3"]
        assert result.next_page_token == b""

    @pytest.mark.asyncio
    async def test_view_detail(self, fake_capability) -> None:
        worker = build_worker(fake_capability)
        result = await worker.execute(ViewDetail("wf-1", "run-wf-1", seq=4))
        assert isinstance(result, DetailLoaded)
        assert result.workflow.workflow_id == "wf-1"
        assert len(result.events) == 2
        assert not result.truncated
        assert fake_capability.calls[0] == ("find_one", ("default", "WorkflowId = 'wf-1'"))

    @pytest.mark.asyncio
    async def test_view_detail_placeholder_when_lookup_fails(self, fake_capability) -> None:
        """History is still shown when the metadata lookup fails."""
        fake_capability.failures["find_one"] = RequestError("visibility down")
        result = await build_worker(fake_capability).execute(ViewDetail("wf-9", "r", seq=5))
        assert isinstance(result, DetailLoaded)
        assert result.workflow.is_placeholder
        assert result.workflow.workflow_id == "wf-9"
        assert len(result.events) == 2

    @pytest.mark.asyncio
    async def test_view_detail_placeholder_when_not_found(self, fake_capability) -> None:
        fake_capability.found = None
        result = await build_worker(fake_capability).execute(ViewDetail("wf-9", seq=5))
        assert result.workflow.is_placeholder

    @pytest.mark.asyncio
    async def test_view_detail_history_failure(self, fake_capability) -> None:
        fake_capability.failures["get_history"] = RequestError("not found")
        result = await build_worker(fake_capability).execute(ViewDetail("wf-9", seq=6))
        assert isinstance(result, CommandFailed)
        assert result.cause == "not found"
        assert result.kind is ErrorKind.REJECTED

    @pytest.mark.asyncio
    async def test_namespaces(self, fake_capability) -> None:
        result = await build_worker(fake_capability).execute(RefreshNamespaces(seq=7))
        assert isinstance(result, NamespacesLoaded)
        assert [n.name for n in result.namespaces] == ["default", "orders"]

    @pytest.mark.asyncio
    async def test_switch_namespace_adopts_name(self, fake_capability) -> None:
        worker = build_worker(fake_capability)
        result = await worker.execute(SwitchNamespace("orders", seq=8))
        assert isinstance(result, NamespaceSwitched)
        assert worker.namespace == "orders"
        await worker.execute(RefreshList(seq=9))
        assert fake_capability.calls[-1][1][0] == "orders"

    @pytest.mark.asyncio
    async def test_failed_switch_keeps_namespace(self, fake_capability) -> None:
        fake_capability.failures["describe_namespace"] = RequestError("no such namespace")
        worker = build_worker(fake_capability)
        result = await worker.execute(SwitchNamespace("ghost", seq=8))
        assert isinstance(result, CommandFailed)
        assert worker.namespace == "default"

    @pytest.mark.asyncio
    async def test_mutate(self, fake_capability) -> None:
        worker = build_worker(fake_capability)
        command = Mutate(MutationKind.SIGNAL, "wf-1", "run-1", "ping", seq=10)
        result = await worker.execute(command)
        assert isinstance(result, MutationApplied)
        assert result.message == "Signal 'ping' sent to workflow wf-1 successfully"
        assert fake_capability.calls[-1] == (
            "mutate",
            ("default", MutationKind.SIGNAL, "wf-1", "run-1", "ping"),
        )

    @pytest.mark.asyncio
    async def test_connection_error_kind(self, fake_capability) -> None:
        fake_capability.failures["connect"] = RemoteConnectionError("refused")
        result = await build_worker(fake_capability).execute(Connect(seq=1))
        assert isinstance(result, CommandFailed)
        assert result.kind is ErrorKind.CONNECTION

    @pytest.mark.asyncio
    async def test_unexpected_exception_becomes_internal_failure(self, fake_capability) -> None:
        """The worker survives bugs in the capability."""
        fake_capability.failures["list_page"] = KeyError("boom")
        result = await build_worker(fake_capability).execute(RefreshList(seq=1))
        assert isinstance(result, CommandFailed)
        assert result.kind is ErrorKind.INTERNAL
        assert result.cause.startswith("Internal error")

    @pytest.mark.asyncio
    async def test_no_capability_fails_every_command(self) -> None:
        result = await build_worker(None).execute(RefreshList(seq=1))
        assert isinstance(result, CommandFailed)
        assert result.cause == NO_PROFILE_MESSAGE
        assert result.kind is ErrorKind.CONNECTION


class TestThread:
    def test_results_in_command_order(self, fake_capability) -> None:
        commands = Channel("commands")
        results = Channel("results")
        worker = WorkerLoop(fake_capability, commands, results, "default")
        worker.start()
        for seq in range(1, 6):
            commands.send(RefreshList(seq=seq))
        commands.close()
        assert worker.join(timeout=5.0)
        delivered = results.drain()
        assert [result.seq for result in delivered] == [1, 2, 3, 4, 5]
        assert fake_capability.closed

    def test_join_without_start(self, fake_capability) -> None:
        assert build_worker(fake_capability).join(timeout=0.1)
