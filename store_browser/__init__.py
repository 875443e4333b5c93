"""
Top-level package for the store browser dashboard.

This package exposes the core architecture (domain, views, services, UI adapters).
Most code should import from submodules such as:
    store_browser.core
    store_browser.views
    store_browser.ui
"""

__all__: list[str] = []
