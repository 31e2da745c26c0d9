"""Data models for the Tuiporal TUI.

- core: records returned by the remote capability
- state: settings and UI state owned by the main loop
"""
