"""Results sent from the worker loop back to the main loop.

Each result references the command that produced it. Exactly one result is
emitted per command.
"""

from __future__ import annotations

from dataclasses import dataclass

from tuiporal.constants.enums import ErrorKind
from tuiporal.engine.commands import Command
from tuiporal.models.core import HistoryEvent, NamespaceRecord, WorkflowRecord


@dataclass(frozen=True)
class Result:
    command: Command

    @property
    def seq(self) -> int:
        return self.command.seq


@dataclass(frozen=True)
class Connected(Result):
    pass


@dataclass(frozen=True)
class ListLoaded(Result):
    records: tuple[WorkflowRecord, ...]
    next_page_token: bytes = b""


@dataclass(frozen=True)
class DetailLoaded(Result):
    workflow: WorkflowRecord
    events: tuple[HistoryEvent, ...]
    truncated: bool = False


@dataclass(frozen=True)
class NamespacesLoaded(Result):
    namespaces: tuple[NamespaceRecord, ...]
    next_page_token: bytes = b""


@dataclass(frozen=True)
class NamespaceSwitched(Result):
    namespace: NamespaceRecord


@dataclass(frozen=True)
class MutationApplied(Result):
    message: str


@dataclass(frozen=True)
class CommandFailed(Result):
    cause: str
    kind: ErrorKind = ErrorKind.INTERNAL
