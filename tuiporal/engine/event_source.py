"""Input events consumed by the main loop."""

from __future__ import annotations

from collections.abc import Callable, Iterator
from dataclasses import dataclass
from typing import Union

from tuiporal.constants.timeouts import POLL_INTERVAL


@dataclass(frozen=True)
class KeyPress:
    """A key press using Textual key names (``"j"``, ``"enter"``, ``"question_mark"``)."""

    key: str
    character: str | None = None

    @property
    def is_printable(self) -> bool:
        return (
            self.character is not None
            and len(self.character) == 1
            and self.character.isprintable()
        )


@dataclass(frozen=True)
class Tick:
    """No input arrived within the poll interval."""


TICK = Tick()

Event = Union[KeyPress, Tick]


class PollingEventSource:
    """Event source backed by a poll function with bounded wait.

    ``poll(timeout)`` returns a key press or None when nothing arrived.
    ``next()`` never waits longer than ``timeout`` before yielding a Tick.
    """

    def __init__(
        self,
        poll: Callable[[float], KeyPress | None],
        timeout: float = POLL_INTERVAL,
    ) -> None:
        self._poll = poll
        self._timeout = timeout

    def next(self) -> Event:
        key = self._poll(self._timeout)
        return key if key is not None else TICK

    def __iter__(self) -> Iterator[Event]:
        while True:
            yield self.next()
