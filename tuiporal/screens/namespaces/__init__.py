"""Namespaces screen."""

from tuiporal.screens.namespaces.machine import NamespacesMachine
from tuiporal.screens.namespaces.presenter import render_namespaces

__all__ = ["NamespacesMachine", "render_namespaces"]
