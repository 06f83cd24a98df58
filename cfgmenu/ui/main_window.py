"""
Main application window for cfgmenu.

Hosts the menu panel over the configuration tree and saves the
settings file when the window closes.
"""

import logging
from typing import Optional

from PySide6.QtWidgets import QMainWindow, QWidget, QStatusBar
from PySide6.QtGui import QAction

from ..config import ConfigTree, Settings
from ..core import Menu
from .widgets.menu_panel import MenuPanelWidget

logger = logging.getLogger(__name__)


class MainWindow(QMainWindow):
    """Settings editor window."""

    def __init__(self, tree: ConfigTree, menu: Menu, settings: Settings,
                 parent: Optional[QWidget] = None):
        super().__init__(parent)
        self.tree = tree
        self.menu = menu
        self.settings = settings
        self._init_ui()

    def _init_ui(self):
        self.setWindowTitle("cfgmenu")
        self.resize(int(self.tree.screen.width), int(self.tree.screen.height))

        self.panel = MenuPanelWidget(self.menu)
        self.panel.value_applied.connect(self._on_value_applied)
        self.setCentralWidget(self.panel)

        file_menu = self.menuBar().addMenu("&File")

        save_action = QAction("&Save", self)
        save_action.setShortcut("Ctrl+S")
        save_action.triggered.connect(self.save_settings)
        file_menu.addAction(save_action)

        quit_action = QAction("&Quit", self)
        quit_action.setShortcut("Ctrl+Q")
        quit_action.triggered.connect(self.close)
        file_menu.addAction(quit_action)

        self.setStatusBar(QStatusBar())
        self.statusBar().showMessage(f"Settings file: {self.settings.filename}")

    def save_settings(self) -> bool:
        """Write the configuration tree to the settings file."""
        saved = self.settings.save(self.tree)
        if saved:
            self.statusBar().showMessage(f"Saved {self.settings.filename}", 3000)
        else:
            self.statusBar().showMessage("Failed to save settings", 5000)
        return saved

    def _on_value_applied(self, key: str):
        logger.debug(f"Option {key!r} applied")

    def closeEvent(self, event):
        """Save settings and close."""
        self.save_settings()
        logger.info("Application closing")
        event.accept()
