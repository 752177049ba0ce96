"""
Dash UI layer: layout builders, callbacks and the app factory.

Views and the recompute driver live in speed_dashboard.core / speed_dashboard.views;
this package only wires them to Dash components.
"""

from .dash_app import create_dash_app

__all__ = ["create_dash_app"]
