"""Tuiporal - terminal dashboard for Temporal workflows."""

__version__ = "0.1.0"
