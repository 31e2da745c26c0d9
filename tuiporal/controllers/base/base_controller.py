"""Base controller for remote Temporal operations.

The worker loop is the only caller. Every method is a coroutine run to
completion on the worker's private event loop, one call at a time.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod

from tuiporal.constants.enums import ErrorKind, MutationKind
from tuiporal.models.core import HistoryEvent, NamespaceRecord, Page, WorkflowRecord

logger = logging.getLogger(__name__)


class RemoteError(Exception):
    """Base class for failures reported by a remote capability."""

    kind: ErrorKind = ErrorKind.INTERNAL


class RemoteConnectionError(RemoteError):
    """Connect, authentication or TLS material failure."""

    kind = ErrorKind.CONNECTION


class RequestError(RemoteError):
    """A single remote call failed."""

    def __init__(self, message: str, kind: ErrorKind = ErrorKind.REJECTED) -> None:
        super().__init__(message)
        self.kind = kind


class BaseController(ABC):
    """Remote capability consumed by the worker loop.

    Implementations hold at most one connection. Namespaced calls receive the
    namespace explicitly so the worker decides which one is current.
    """

    @abstractmethod
    async def connect(self) -> None:
        """Open the connection.

        Raises:
            RemoteConnectionError: The endpoint could not be reached or
                rejected the credentials.
        """
        ...

    @abstractmethod
    async def list_page(
        self,
        namespace: str,
        page_size: int,
        page_token: bytes,
        query: str,
    ) -> Page[WorkflowRecord]:
        """List one page of workflow executions matching ``query``."""
        ...

    @abstractmethod
    async def find_one(self, namespace: str, query: str) -> WorkflowRecord | None:
        """Return the first execution matching ``query``, or None."""
        ...

    @abstractmethod
    async def get_history(
        self,
        namespace: str,
        workflow_id: str,
        run_id: str,
        page_size: int,
        page_token: bytes,
    ) -> Page[HistoryEvent]:
        """Fetch one page of an execution's event history."""
        ...

    @abstractmethod
    async def list_namespaces(
        self, page_size: int, page_token: bytes
    ) -> Page[NamespaceRecord]:
        ...

    @abstractmethod
    async def describe_namespace(self, name: str) -> NamespaceRecord:
        ...

    @abstractmethod
    async def mutate(
        self,
        namespace: str,
        kind: MutationKind,
        workflow_id: str,
        run_id: str,
        argument: str | None,
    ) -> None:
        """Terminate, cancel or signal one execution.

        ``argument`` is the terminate reason or the signal name; unused for
        cancel.
        """
        ...

    async def close(self) -> None:
        """Release the connection. The default holds nothing to release."""
        return None


# Alias used by the engine, which only cares about the capability contract.
RemoteCapability = BaseController
