"""Temporal controller - remote capability backed by the temporalio SDK.

Calls go straight to the frontend's ``WorkflowService`` RPCs so pagination
tokens and raw history events stay visible to the dashboard.
"""

from __future__ import annotations

import asyncio
import logging
import uuid
from collections.abc import Awaitable, Callable
from datetime import timedelta
from pathlib import Path
from typing import Any

from temporalio.api.common.v1 import WorkflowExecution
from temporalio.api.workflowservice.v1 import (
    DescribeNamespaceRequest,
    GetWorkflowExecutionHistoryRequest,
    ListNamespacesRequest,
    ListWorkflowExecutionsRequest,
    RequestCancelWorkflowExecutionRequest,
    SignalWorkflowExecutionRequest,
    TerminateWorkflowExecutionRequest,
)
from temporalio.client import Client, TLSConfig
from temporalio.service import RPCError, RPCStatusCode

from tuiporal.constants.enums import ErrorKind, MutationKind
from tuiporal.constants.timeouts import CONNECT_TIMEOUT, REQUEST_TIMEOUT
from tuiporal.constants.values import CLIENT_IDENTITY, NOT_CONNECTED_MESSAGE
from tuiporal.controllers.base import (
    BaseController,
    RemoteConnectionError,
    RequestError,
)
from tuiporal.controllers.temporal.parsers import (
    EventParser,
    NamespaceParser,
    WorkflowParser,
)
from tuiporal.models.core import HistoryEvent, NamespaceRecord, Page, WorkflowRecord
from tuiporal.models.state.app_settings import ConnectionProfile

logger = logging.getLogger(__name__)

_KIND_BY_STATUS: dict[RPCStatusCode, ErrorKind] = {
    RPCStatusCode.DEADLINE_EXCEEDED: ErrorKind.DEADLINE,
    RPCStatusCode.UNAVAILABLE: ErrorKind.NETWORK,
}


def error_kind_for(status: RPCStatusCode) -> ErrorKind:
    """Classify a gRPC status as network, deadline or rejected."""
    return _KIND_BY_STATUS.get(status, ErrorKind.REJECTED)


def _read_pem(path: str | None) -> bytes | None:
    if not path:
        return None
    try:
        return Path(path).expanduser().read_bytes()
    except OSError as e:
        raise RemoteConnectionError(f"Cannot read TLS material {path}: {e}") from e


class TemporalController(BaseController):
    """Remote capability for one Temporal connection profile."""

    def __init__(
        self,
        profile: ConnectionProfile,
        request_timeout: float = REQUEST_TIMEOUT,
        connect_timeout: float = CONNECT_TIMEOUT,
    ) -> None:
        self._profile = profile
        self._request_timeout = timedelta(seconds=request_timeout)
        self._connect_timeout = connect_timeout
        self._client: Client | None = None
        self._workflow_parser = WorkflowParser()
        self._event_parser = EventParser()
        self._namespace_parser = NamespaceParser()

    @property
    def is_connected(self) -> bool:
        return self._client is not None

    # ------------------------------------------------------------------
    # Connection
    # ------------------------------------------------------------------

    def _build_tls(self) -> TLSConfig | bool:
        """Build the SDK TLS option from the profile.

        Returns False for plaintext and True for server TLS with system roots.
        """
        tls = self._profile.tls
        if tls is None or not tls.enabled:
            return False
        if not (tls.cert_path or tls.key_path or tls.ca_path or tls.server_name):
            return True
        if bool(tls.cert_path) != bool(tls.key_path):
            raise RemoteConnectionError(
                "Mutual TLS requires both cert_path and key_path"
            )
        return TLSConfig(
            server_root_ca_cert=_read_pem(tls.ca_path),
            domain=tls.server_name,
            client_cert=_read_pem(tls.cert_path),
            client_private_key=_read_pem(tls.key_path),
        )

    async def connect(self) -> None:
        profile = self._profile
        tls = self._build_tls()
        api_key = profile.api_key.get_secret_value() if profile.api_key else None
        logger.info(
            f"Connecting to {profile.address} namespace={profile.namespace} "
            f"tls={'on' if tls else 'off'} api_key={'set' if api_key else 'unset'}"
        )
        try:
            self._client = await asyncio.wait_for(
                Client.connect(
                    profile.address,
                    namespace=profile.namespace,
                    tls=tls,
                    api_key=api_key,
                    identity=CLIENT_IDENTITY,
                ),
                timeout=self._connect_timeout,
            )
        except asyncio.TimeoutError as e:
            raise RemoteConnectionError(
                f"Timed out connecting to {profile.address}"
            ) from e
        except (RPCError, RuntimeError, OSError, ValueError) as e:
            raise RemoteConnectionError(
                f"Failed to connect to {profile.address}: {e}"
            ) from e
        logger.info(f"Connected to {profile.address}")

    async def close(self) -> None:
        # The SDK client has no explicit close; dropping it releases the channel.
        self._client = None

    # ------------------------------------------------------------------
    # Calls
    # ------------------------------------------------------------------

    def _service(self) -> Any:
        if self._client is None:
            raise RequestError(NOT_CONNECTED_MESSAGE, ErrorKind.CONNECTION)
        return self._client.workflow_service

    async def _call(
        self,
        operation: str,
        rpc: Callable[..., Awaitable[Any]],
        request: Any,
    ) -> Any:
        """Run one RPC with the per-call timeout and map its failures."""
        try:
            return await rpc(request, timeout=self._request_timeout)
        except RPCError as e:
            kind = error_kind_for(e.status)
            raise RequestError(f"{operation} failed: {e.message}", kind) from e
        except asyncio.TimeoutError as e:
            raise RequestError(f"{operation} timed out", ErrorKind.DEADLINE) from e

    async def list_page(
        self,
        namespace: str,
        page_size: int,
        page_token: bytes,
        query: str,
    ) -> Page[WorkflowRecord]:
        service = self._service()
        response = await self._call(
            "ListWorkflowExecutions",
            service.list_workflow_executions,
            ListWorkflowExecutionsRequest(
                namespace=namespace,
                page_size=page_size,
                next_page_token=page_token,
                query=query,
            ),
        )
        return Page(
            items=self._workflow_parser.parse_executions(response.executions),
            next_page_token=bytes(response.next_page_token),
        )

    async def find_one(self, namespace: str, query: str) -> WorkflowRecord | None:
        page = await self.list_page(namespace, 1, b"", query)
        return page.items[0] if page.items else None

    async def get_history(
        self,
        namespace: str,
        workflow_id: str,
        run_id: str,
        page_size: int,
        page_token: bytes,
    ) -> Page[HistoryEvent]:
        service = self._service()
        response = await self._call(
            "GetWorkflowExecutionHistory",
            service.get_workflow_execution_history,
            GetWorkflowExecutionHistoryRequest(
                namespace=namespace,
                execution=WorkflowExecution(workflow_id=workflow_id, run_id=run_id),
                maximum_page_size=page_size,
                next_page_token=page_token,
            ),
        )
        events: tuple[HistoryEvent, ...] = ()
        if response.HasField("history"):
            events = self._event_parser.parse_events(response.history.events)
        return Page(items=events, next_page_token=bytes(response.next_page_token))

    async def list_namespaces(
        self, page_size: int, page_token: bytes
    ) -> Page[NamespaceRecord]:
        service = self._service()
        response = await self._call(
            "ListNamespaces",
            service.list_namespaces,
            ListNamespacesRequest(page_size=page_size, next_page_token=page_token),
        )
        return Page(
            items=self._namespace_parser.parse_namespaces(response.namespaces),
            next_page_token=bytes(response.next_page_token),
        )

    async def describe_namespace(self, name: str) -> NamespaceRecord:
        service = self._service()
        response = await self._call(
            "DescribeNamespace",
            service.describe_namespace,
            DescribeNamespaceRequest(namespace=name),
        )
        return self._namespace_parser.parse_namespace(response)

    async def mutate(
        self,
        namespace: str,
        kind: MutationKind,
        workflow_id: str,
        run_id: str,
        argument: str | None,
    ) -> None:
        service = self._service()
        execution = WorkflowExecution(workflow_id=workflow_id, run_id=run_id)
        if kind is MutationKind.TERMINATE:
            await self._call(
                "TerminateWorkflowExecution",
                service.terminate_workflow_execution,
                TerminateWorkflowExecutionRequest(
                    namespace=namespace,
                    workflow_execution=execution,
                    reason=argument or "",
                    identity=CLIENT_IDENTITY,
                ),
            )
        elif kind is MutationKind.CANCEL:
            await self._call(
                "RequestCancelWorkflowExecution",
                service.request_cancel_workflow_execution,
                RequestCancelWorkflowExecutionRequest(
                    namespace=namespace,
                    workflow_execution=execution,
                    identity=CLIENT_IDENTITY,
                    request_id=str(uuid.uuid4()),
                ),
            )
        elif kind is MutationKind.SIGNAL:
            if not argument:
                raise RequestError("Signal name is required", ErrorKind.REJECTED)
            await self._call(
                "SignalWorkflowExecution",
                service.signal_workflow_execution,
                SignalWorkflowExecutionRequest(
                    namespace=namespace,
                    workflow_execution=execution,
                    signal_name=argument,
                    identity=CLIENT_IDENTITY,
                    request_id=str(uuid.uuid4()),
                ),
            )
        else:
            raise RequestError(f"Unsupported mutation: {kind}", ErrorKind.INTERNAL)
