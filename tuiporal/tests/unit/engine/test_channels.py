"""Tests for the command/result channels."""

from __future__ import annotations

import threading

import pytest

from tuiporal.engine.channels import Channel, ChannelClosedError


class TestChannel:
    def test_fifo_order(self) -> None:
        channel: Channel[int] = Channel("test")
        for value in range(5):
            channel.send(value)
        assert [channel.receive(timeout=0.1) for _ in range(5)] == [0, 1, 2, 3, 4]

    def test_receive_times_out(self) -> None:
        channel: Channel[int] = Channel("test")
        assert channel.receive(timeout=0.01) is None

    def test_close_after_items(self) -> None:
        """Items sent before close are still delivered, then None."""
        channel: Channel[int] = Channel("test")
        channel.send(1)
        channel.close()
        assert channel.receive() == 1
        assert channel.receive() is None
        assert channel.receive() is None

    def test_send_after_close_raises(self) -> None:
        channel: Channel[int] = Channel("test")
        channel.close()
        channel.close()
        assert channel.closed
        with pytest.raises(ChannelClosedError):
            channel.send(1)

    def test_drain_is_non_blocking(self) -> None:
        channel: Channel[int] = Channel("test")
        assert channel.drain() == []
        channel.send(1)
        channel.send(2)
        assert channel.drain() == [1, 2]
        assert channel.drain() == []

    def test_drain_stops_at_close(self) -> None:
        channel: Channel[int] = Channel("test")
        channel.send(1)
        channel.close()
        assert channel.drain() == [1]
        assert channel.receive() is None

    def test_cross_thread_order(self) -> None:
        channel: Channel[int] = Channel("test")

        def produce() -> None:
            for value in range(100):
                channel.send(value)
            channel.close()

        thread = threading.Thread(target=produce)
        thread.start()
        received = []
        while (item := channel.receive(timeout=1.0)) is not None:
            received.append(item)
        thread.join()
        assert received == list(range(100))

    def test_every_accepted_send_is_delivered(self) -> None:
        """A send racing close either raises or is received before the close."""
        channel: Channel[int] = Channel("test")
        accepted: list[int] = []
        started = threading.Event()

        def produce() -> None:
            value = 0
            while True:
                try:
                    channel.send(value)
                except ChannelClosedError:
                    return
                accepted.append(value)
                started.set()
                value += 1

        thread = threading.Thread(target=produce)
        thread.start()
        started.wait(timeout=1.0)
        channel.close()
        thread.join(timeout=5.0)
        received = []
        while (item := channel.receive(timeout=0.1)) is not None:
            received.append(item)
        assert received == accepted
