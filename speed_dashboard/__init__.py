"""
Top-level package for the internet speed dashboard.

This package exposes the core architecture (domain, views, UI adapters).
Most code should import from submodules such as:
    speed_dashboard.core
    speed_dashboard.views
    speed_dashboard.ui
"""

__all__: list[str] = []
