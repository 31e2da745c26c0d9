"""Background worker executing commands against the remote capability.

The worker owns one daemon thread and one private asyncio event loop. It takes
commands in FIFO order and runs each remote call to completion before taking
the next, so at most one call is in flight. Every command yields exactly one
result, including when the call raises something unexpected.
"""

from __future__ import annotations

import asyncio
import logging
import threading
import time
from collections.abc import Awaitable, Callable

from tuiporal.constants.defaults import (
    HISTORY_PAGE_SIZE_DEFAULT,
    NAMESPACE_PAGE_SIZE_DEFAULT,
    WORKFLOW_PAGE_SIZE_DEFAULT,
)
from tuiporal.constants.enums import ErrorKind, MutationKind
from tuiporal.constants.values import NO_PROFILE_MESSAGE
from tuiporal.controllers.base import BaseController, RemoteConnectionError, RemoteError
from tuiporal.engine.channels import Channel, ChannelClosedError
from tuiporal.engine.commands import (
    Command,
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
    Result,
)
from tuiporal.models.core import WorkflowRecord

logger = logging.getLogger(__name__)


def workflow_id_query(workflow_id: str) -> str:
    """Visibility query matching one workflow id."""
    escaped = workflow_id.replace("\\", "\\\\").replace("'", "\\'")
    return f"WorkflowId = '{escaped}'"


def mutation_message(kind: MutationKind, workflow_id: str, argument: str | None) -> str:
    if kind is MutationKind.TERMINATE:
        return f"Workflow {workflow_id} terminated successfully"
    if kind is MutationKind.CANCEL:
        return f"Workflow {workflow_id} cancel requested successfully"
    return f"Signal '{argument}' sent to workflow {workflow_id} successfully"


class WorkerLoop:
    """Serializes remote calls off the main loop thread.

    Args:
        capability: Remote capability, or None when no connection profile
            resolved. Without one every command fails with a connection error.
        commands: Channel the main loop sends commands on.
        results: Channel results are sent back on.
        namespace: Namespace passed to namespaced calls until a successful
            SwitchNamespace replaces it.
    """

    def __init__(
        self,
        capability: BaseController | None,
        commands: Channel[Command],
        results: Channel[Result],
        namespace: str,
        page_size: int = WORKFLOW_PAGE_SIZE_DEFAULT,
        history_page_size: int = HISTORY_PAGE_SIZE_DEFAULT,
        namespace_page_size: int = NAMESPACE_PAGE_SIZE_DEFAULT,
    ) -> None:
        self._capability = capability
        self._commands = commands
        self._results = results
        self.namespace = namespace
        self._page_size = page_size
        self._history_page_size = history_page_size
        self._namespace_page_size = namespace_page_size
        self._thread: threading.Thread | None = None
        self._handlers: dict[type[Command], Callable[[Command], Awaitable[Result]]] = {
            Connect: self._connect,
            RefreshList: self._refresh_list,
            LoadPage: self._load_page,
            ViewDetail: self._view_detail,
            RefreshNamespaces: self._refresh_namespaces,
            SwitchNamespace: self._switch_namespace,
            Mutate: self._mutate,
        }

    # ------------------------------------------------------------------
    # Thread lifecycle
    # ------------------------------------------------------------------

    def start(self) -> None:
        if self._thread is not None:
            return
        self._thread = threading.Thread(
            target=self._run, name="tuiporal-worker", daemon=True
        )
        self._thread.start()

    def join(self, timeout: float | None = None) -> bool:
        """Wait for the thread to finish. Returns True when it has exited."""
        if self._thread is None:
            return True
        self._thread.join(timeout)
        alive = self._thread.is_alive()
        if alive:
            logger.warning(f"Worker still running after {timeout}s; abandoning it")
        return not alive

    @property
    def is_alive(self) -> bool:
        return self._thread is not None and self._thread.is_alive()

    def _run(self) -> None:
        loop = asyncio.new_event_loop()
        logger.debug("Worker started")
        try:
            while True:
                command = self._commands.receive()
                if command is None:
                    break
                result = loop.run_until_complete(self.execute(command))
                try:
                    self._results.send(result)
                except ChannelClosedError:
                    logger.debug(f"Result for {command.describe()} dropped after shutdown")
                    break
            if self._capability is not None:
                loop.run_until_complete(self._capability.close())
        finally:
            loop.close()
            logger.debug("Worker stopped")

    # ------------------------------------------------------------------
    # Execution
    # ------------------------------------------------------------------

    async def execute(self, command: Command) -> Result:
        """Run one command and convert the outcome into a result."""
        started = time.monotonic()
        logger.info(f"Executing {command.describe()}")
        try:
            if self._capability is None:
                raise RemoteConnectionError(NO_PROFILE_MESSAGE)
            handler = self._handlers.get(type(command))
            if handler is None:
                raise TypeError(f"Unsupported command {type(command).__name__}")
            result = await handler(command)
        except RemoteError as e:
            logger.warning(f"{command.describe()} failed ({e.kind.value}): {e}")
            return CommandFailed(command, str(e), e.kind)
        except Exception as e:
            logger.exception(f"{command.describe()} raised unexpectedly")
            return CommandFailed(command, f"Internal error: {e}", ErrorKind.INTERNAL)
        duration_ms = (time.monotonic() - started) * 1000
        logger.debug(f"{command.describe()} completed in {duration_ms:.1f}ms")
        return result

    async def _connect(self, command: Connect) -> Result:
        await self._capability.connect()
        return Connected(command)

    async def _refresh_list(self, command: RefreshList) -> Result:
        page = await self._capability.list_page(
            self.namespace, self._page_size, b"", command.query
        )
        return ListLoaded(command, page.items, page.next_page_token)

    async def _load_page(self, command: LoadPage) -> Result:
        page = await self._capability.list_page(
            self.namespace, self._page_size, command.page_token, command.query
        )
        return ListLoaded(command, page.items, page.next_page_token)

    async def _view_detail(self, command: ViewDetail) -> Result:
        workflow: WorkflowRecord | None = None
        try:
            workflow = await self._capability.find_one(
                self.namespace, workflow_id_query(command.workflow_id)
            )
        except RemoteError as e:
            logger.warning(
                f"Metadata lookup for {command.workflow_id} failed, using placeholder: {e}"
            )
        if workflow is None:
            workflow = WorkflowRecord.placeholder(command.workflow_id, command.run_id)
        history = await self._capability.get_history(
            self.namespace,
            command.workflow_id,
            command.run_id,
            self._history_page_size,
            b"",
        )
        return DetailLoaded(command, workflow, history.items, history.has_next)

    async def _refresh_namespaces(self, command: RefreshNamespaces) -> Result:
        page = await self._capability.list_namespaces(self._namespace_page_size, b"")
        return NamespacesLoaded(command, page.items, page.next_page_token)

    async def _switch_namespace(self, command: SwitchNamespace) -> Result:
        record = await self._capability.describe_namespace(command.name)
        logger.info(f"Namespace {self.namespace} -> {record.name}")
        self.namespace = record.name
        return NamespaceSwitched(command, record)

    async def _mutate(self, command: Mutate) -> Result:
        await self._capability.mutate(
            self.namespace,
            command.kind,
            command.workflow_id,
            command.run_id,
            command.argument,
        )
        return MutationApplied(
            command, mutation_message(command.kind, command.workflow_id, command.argument)
        )
