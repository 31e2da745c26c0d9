"""Commands sent from the screen machines to the worker loop.

Commands are immutable. ``seq`` is assigned by the state machine when the
command is issued and increases monotonically for the life of the process.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from tuiporal.constants.enums import MutationKind, PageDirection


@dataclass(frozen=True)
class Command:
    seq: int = field(default=0, kw_only=True)

    def describe(self) -> str:
        """Short text used in log lines."""
        return f"{type(self).__name__}#{self.seq}"


@dataclass(frozen=True)
class Connect(Command):
    pass


@dataclass(frozen=True)
class RefreshList(Command):
    """Load the first page of workflows for ``query``."""

    query: str = ""

    def describe(self) -> str:
        return f"{super().describe()} query={self.query!r}"


@dataclass(frozen=True)
class LoadPage(Command):
    """Load the page produced by ``page_token``."""

    query: str
    page_token: bytes
    direction: PageDirection

    def describe(self) -> str:
        return f"{super().describe()} {self.direction.value} query={self.query!r}"


@dataclass(frozen=True)
class ViewDetail(Command):
    workflow_id: str
    run_id: str = ""

    def describe(self) -> str:
        return f"{super().describe()} workflow_id={self.workflow_id} run_id={self.run_id}"


@dataclass(frozen=True)
class RefreshNamespaces(Command):
    pass


@dataclass(frozen=True)
class SwitchNamespace(Command):
    name: str

    def describe(self) -> str:
        return f"{super().describe()} namespace={self.name}"


@dataclass(frozen=True)
class Mutate(Command):
    kind: MutationKind
    workflow_id: str
    run_id: str = ""
    argument: str | None = None

    def describe(self) -> str:
        return (
            f"{super().describe()} {self.kind.value} "
            f"workflow_id={self.workflow_id} run_id={self.run_id}"
        )


LIST_COMMANDS = (RefreshList, LoadPage)
