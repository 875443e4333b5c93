"""
Config package for store_browser.

Responsible for:
- config models (GlobalConfig)
- config I/O helpers (load_global_config)
"""

from .model import GlobalConfig
from .io import load_global_config

__all__ = ["GlobalConfig", "load_global_config"]
