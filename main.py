#!/usr/bin/env python3
"""
cfgmenu - Main entry point.

Launches the Qt application.
"""

import sys

from cfgmenu.main import main


if __name__ == "__main__":
    sys.exit(main())
