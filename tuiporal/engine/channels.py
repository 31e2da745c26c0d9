"""Unbounded, ordered, closable channels between the main loop and the worker."""

from __future__ import annotations

import logging
import queue
import threading
from typing import Generic, TypeVar

logger = logging.getLogger(__name__)

T = TypeVar("T")

_CLOSED = object()


class ChannelClosedError(RuntimeError):
    """Raised when sending on a closed channel."""


class Channel(Generic[T]):
    """FIFO queue with a close signal.

    Any thread may send; receivers see items in send order followed by the
    close signal. Sending after close raises ChannelClosedError.
    """

    def __init__(self, name: str) -> None:
        self.name = name
        self._queue: queue.Queue = queue.Queue()
        self._closed = threading.Event()
        # Serialises send against close so nothing lands behind the close signal.
        self._lock = threading.Lock()

    @property
    def closed(self) -> bool:
        return self._closed.is_set()

    def send(self, item: T) -> None:
        with self._lock:
            if self._closed.is_set():
                raise ChannelClosedError(f"Channel '{self.name}' is closed")
            self._queue.put(item)

    def close(self) -> None:
        with self._lock:
            if self._closed.is_set():
                return
            self._closed.set()
            self._queue.put(_CLOSED)
        logger.debug(f"Channel '{self.name}' closed")

    def receive(self, timeout: float | None = None) -> T | None:
        """Block for the next item.

        Returns None once the channel is closed and empty, or when
        ``timeout`` elapses with nothing to receive.
        """
        try:
            item = self._queue.get(timeout=timeout)
        except queue.Empty:
            return None
        if item is _CLOSED:
            # Leave the signal in place for any other receiver.
            self._queue.put(_CLOSED)
            return None
        return item

    def drain(self) -> list[T]:
        """Return every item available right now without blocking."""
        items: list[T] = []
        while True:
            try:
                item = self._queue.get_nowait()
            except queue.Empty:
                break
            if item is _CLOSED:
                self._queue.put(_CLOSED)
                break
            items.append(item)
        return items
