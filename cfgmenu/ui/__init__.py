"""Qt user interface for cfgmenu."""

from .main_window import MainWindow

__all__ = ["MainWindow"]
