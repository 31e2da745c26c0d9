"""Viewport helpers keeping the selected row visible in a fixed-height pane."""

from __future__ import annotations


def visible_window(total: int, selected: int | None, height: int) -> range:
    """Return the indices to draw so ``selected`` stays on screen.

    The selection is kept roughly centred once the list is taller than the
    pane; near either end the window sticks to that end.
    """
    if total <= 0 or height <= 0:
        return range(0)
    if total <= height:
        return range(total)
    if selected is None:
        return range(height)
    start = max(0, selected - height // 2)
    start = min(start, total - height)
    return range(start, start + height)


def scroll_lines(lines: list[str], offset: int, height: int) -> tuple[list[str], int]:
    """Slice ``lines`` at ``offset`` clamped to the content.

    Returns:
        Tuple of (visible lines, effective offset).
    """
    if height <= 0:
        return [], 0
    max_offset = max(0, len(lines) - height)
    effective = min(max(0, offset), max_offset)
    return lines[effective : effective + height], effective
