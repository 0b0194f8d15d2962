"""
Top-level package for the admin panel.

This package exposes the core architecture (records, query view, pages, UI adapters).
Most code should import from submodules such as:
    admin_panel.core
    admin_panel.services
    admin_panel.ui
"""

__all__: list[str] = []
