"""Help screen machine."""

from __future__ import annotations

from tuiporal.constants.limits import SCROLL_PAGE_STEP, SCROLL_STEP
from tuiporal.keyboard import HELP_SCREEN_BINDINGS
from tuiporal.screens.base_screen import BaseScreenMachine


class HelpMachine(BaseScreenMachine):
    BINDINGS = HELP_SCREEN_BINDINGS

    def action_back(self) -> None:
        self.session.navigate(self.session.previous_screen)

    def action_scroll_down(self) -> None:
        self.session.help.scroll(SCROLL_STEP)

    def action_scroll_up(self) -> None:
        self.session.help.scroll(-SCROLL_STEP)

    def action_page_down(self) -> None:
        self.session.help.scroll(SCROLL_PAGE_STEP)

    def action_page_up(self) -> None:
        self.session.help.scroll(-SCROLL_PAGE_STEP)
