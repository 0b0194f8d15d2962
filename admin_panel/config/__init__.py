"""
Config package for admin_panel.

Responsible for:
- config models (GlobalConfig, Credentials)
- config I/O helpers (load_global_config)
"""

from .model import GlobalConfig
from .loader import load_global_config
