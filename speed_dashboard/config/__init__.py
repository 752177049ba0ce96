"""
Config package for speed_dashboard.

Responsible for:
- config models (GlobalConfig, view presets)
- config I/O helpers (load_global_config)
"""

from .model import GlobalConfig, VIEW_PRESETS, DEFAULT_PRESET
from .io import load_global_config

__all__ = ["GlobalConfig", "VIEW_PRESETS", "DEFAULT_PRESET", "load_global_config"]
