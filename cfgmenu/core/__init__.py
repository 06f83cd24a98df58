"""
Menu functionality for cfgmenu.

This module binds configuration items to operator keys:
- Menu options with optional change actions
- A keyed menu with a single selection
- The default operator menu over the configuration tree
"""

from .menu import (
    Menu,
    MenuOption,
    MenuError,
    SelectionError,
    DuplicateKeyError,
)
from .bindings import DEFAULT_BINDINGS, build_menu

__all__ = [
    "Menu",
    "MenuOption",
    "MenuError",
    "SelectionError",
    "DuplicateKeyError",
    "DEFAULT_BINDINGS",
    "build_menu",
]
