"""
Configuration model for cfgmenu.

This module defines typed configuration items, the application's
configuration tree with its defaults, and XML persistence.
"""

from .item import ConfigItem, TypedValue, ValueKind, TypeMismatchError
from .defaults import DEFAULT_SETTINGS, FLATTEN_ORDER, ColorFormat
from .tree import ConfigTree, ConfigError
from .xml_store import XmlSettings, XmlSettingsError
from .settings import Settings

__all__ = [
    "ConfigItem",
    "TypedValue",
    "ValueKind",
    "TypeMismatchError",
    "DEFAULT_SETTINGS",
    "FLATTEN_ORDER",
    "ColorFormat",
    "ConfigTree",
    "ConfigError",
    "XmlSettings",
    "XmlSettingsError",
    "Settings",
]
