"""Tests for display formatting helpers."""

from __future__ import annotations

from datetime import datetime, timedelta

import pytest

from tuiporal.utils.formatting import (
    elapsed,
    format_attributes,
    format_duration,
    format_timestamp,
    truncate,
)
from tuiporal.utils.viewport import scroll_lines, visible_window


class TestFormatting:
    @pytest.mark.parametrize(
        ("value", "expected"),
        [
            (None, "-"),
            (timedelta(0), "0s"),
            (timedelta(seconds=45), "45s"),
            (timedelta(hours=12, minutes=5, seconds=3), "12h 5m"),
            (timedelta(days=3), "3d"),
        ],
    )
    def test_format_duration(self, value, expected) -> None:
        assert format_duration(value) == expected

    def test_format_naive_timestamp(self) -> None:
        assert format_timestamp(datetime(2024, 5, 1, 12, 0, 5)) == "2024-05-01 12:00:05"
        assert format_timestamp(None) == "-"

    def test_elapsed(self) -> None:
        start = datetime(2024, 5, 1, 12, 0)
        assert elapsed(start, start + timedelta(minutes=2)) == timedelta(minutes=2)
        assert elapsed(start, None) is None

    def test_format_attributes(self) -> None:
        assert format_attributes({}) == "{}"
        assert '"name": "orders"' in format_attributes({"taskQueue": {"name": "orders"}})

    @pytest.mark.parametrize(
        ("text", "width", "expected"),
        [("short", 10, "short"), ("abcdef", 4, "abc…"), ("abc", 1, "…"), ("abc", 0, "")],
    )
    def test_truncate(self, text, width, expected) -> None:
        assert truncate(text, width) == expected


class TestViewport:
    def test_short_list_shows_everything(self) -> None:
        assert visible_window(3, 2, 10) == range(3)

    def test_selection_stays_visible(self) -> None:
        window = visible_window(100, 50, 10)
        assert 50 in window
        assert len(window) == 10

    def test_window_sticks_to_end(self) -> None:
        assert visible_window(100, 99, 10) == range(90, 100)

    def test_scroll_lines_clamps(self) -> None:
        lines = [str(i) for i in range(5)]
        assert scroll_lines(lines, 10, 3) == (["2", "3", "4"], 2)
        assert scroll_lines(lines, -1, 3) == (["0", "1", "2"], 0)
