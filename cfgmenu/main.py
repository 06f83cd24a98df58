"""
cfgmenu - Main entry point.

Loads the settings file, shows the menu window, and saves on exit.
"""

import sys
import logging

from PySide6.QtWidgets import QApplication

from cfgmenu import __version__
from cfgmenu.config import ConfigTree, Settings
from cfgmenu.core import build_menu
from cfgmenu.ui import MainWindow
from cfgmenu.utils import get_log_level, setup_logging


def main():
    """Main entry point for cfgmenu."""
    setup_logging(log_level=get_log_level(), log_file=True)
    logger = logging.getLogger(__name__)

    logger.info(f"cfgmenu v{__version__} starting...")

    tree = ConfigTree.defaults()
    settings = Settings()
    settings.load(tree)

    menu = build_menu(tree)

    app = QApplication(sys.argv)
    app.setApplicationName("cfgmenu")

    window = MainWindow(tree, menu, settings)
    window.show()

    exit_code = app.exec()

    logger.info("cfgmenu exiting")
    return exit_code


if __name__ == "__main__":
    sys.exit(main())
