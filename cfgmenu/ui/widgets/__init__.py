"""Custom widgets for cfgmenu."""

from .menu_panel import MenuPanelWidget

__all__ = ["MenuPanelWidget"]
