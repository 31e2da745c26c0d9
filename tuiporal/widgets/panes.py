"""Static panes painted by the app from presenter output."""

from __future__ import annotations

from typing import ClassVar

from rich.console import RenderableType
from textual.widgets import Static


class PaneStatic(Static):
    """Static pane that keeps the last renderable it was given."""

    _default_classes: ClassVar[str] = ""

    def __init__(self, *, id: str | None = None, classes: str = "") -> None:
        super().__init__("", id=id, classes=classes)
        if self._default_classes:
            self.add_class(*self._default_classes.split())
        self.last_renderable: RenderableType = ""

    def show(self, renderable: RenderableType) -> None:
        self.last_renderable = renderable
        self.update(renderable)


class StatusBar(PaneStatic):
    _default_classes = "status-bar"


class BodyView(PaneStatic):
    _default_classes = "body-view"

    @property
    def rows(self) -> int:
        """Rows available for content, zero before the first layout."""
        return self.content_size.height


class KeyHints(PaneStatic):
    _default_classes = "key-hints"
