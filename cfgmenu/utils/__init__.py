"""
Utility functions for cfgmenu.
"""

from .logger import setup_logging, get_log_dir, get_log_level
from .validators import normalize_menu_key, is_valid_menu_key

__all__ = [
    "setup_logging",
    "get_log_dir",
    "get_log_level",
    "normalize_menu_key",
    "is_valid_menu_key",
]
