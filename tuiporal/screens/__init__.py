"""Screens for Tuiporal.

Each screen package holds a machine (keys and results), a presenter (pure
render functions) and its configuration.
"""

from tuiporal.screens.render import render_body
from tuiporal.screens.state_machine import ScreenStateMachine

__all__ = ["ScreenStateMachine", "render_body"]
