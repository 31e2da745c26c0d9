"""Base screen machine for Tuiporal.

A screen machine turns key presses into session changes and commands, and
applies the results of the commands it issued. Screens are plain objects
driven by the main loop; the Textual app only paints what they leave in the
session.

Key handling:
    1. ``intercept`` gets the first look, for overlays such as search input,
       dialogs and banners. Returning True consumes the key.
    2. Otherwise the key is looked up in ``BINDINGS`` and the matching
       ``action_<name>`` method is called.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, ClassVar

from tuiporal.keyboard import ScreenBinding

if TYPE_CHECKING:
    from tuiporal.engine.event_source import KeyPress
    from tuiporal.engine.results import Result
    from tuiporal.models.state.session import Session
    from tuiporal.screens.state_machine import ScreenStateMachine

logger = logging.getLogger(__name__)


def find_action(bindings: list[ScreenBinding], key: str) -> str | None:
    """Return the action bound to ``key`` or None."""
    for keys, action, _description in bindings:
        if key in keys.split(","):
            return action
    return None


class BaseScreenMachine:
    """Common key dispatch for all screens.

    Subclasses set ``BINDINGS`` and implement one ``action_<name>`` method per
    bound action.
    """

    BINDINGS: ClassVar[list[ScreenBinding]] = []

    def __init__(self, machine: ScreenStateMachine) -> None:
        self.machine = machine

    @property
    def session(self) -> Session:
        return self.machine.session

    def handle_key(self, event: KeyPress) -> None:
        if self.intercept(event):
            return
        if not self.run_binding(self.BINDINGS, event):
            logger.debug(f"Unbound key {event.key!r} on {type(self).__name__}")

    def intercept(self, event: KeyPress) -> bool:
        """Give overlays the first look at a key. True consumes it."""
        return False

    def run_binding(
        self,
        bindings: list[ScreenBinding],
        event: KeyPress,
        prefix: str = "action_",
    ) -> bool:
        """Call ``<prefix><action>`` for the binding matching the key."""
        action = find_action(bindings, event.key)
        if action is None:
            return False
        getattr(self, f"{prefix}{action}")()
        return True

    def apply(self, result: Result) -> None:
        """Apply a result of a command this screen issued."""

    def refresh_if_due(self, now: float) -> bool:
        """Fire an automatic refresh when one is due. True when fired."""
        return False
