"""
cfgmenu - typed configuration settings with XML persistence
and a key-driven editing menu.
"""

__version__ = "0.1.0"
