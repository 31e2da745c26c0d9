"""Help screen."""

from tuiporal.screens.help.machine import HelpMachine
from tuiporal.screens.help.presenter import help_lines, render_help

__all__ = ["HelpMachine", "help_lines", "render_help"]
