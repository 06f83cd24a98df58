"""
Default operator menu for the configuration tree.
"""

import logging
from typing import Dict, Optional

from ..config.tree import ConfigTree
from .menu import Action, Menu

logger = logging.getLogger(__name__)

# (key, item path); display order of the operator menu
DEFAULT_BINDINGS = [
    ("p", "pid.kp"),
    ("i", "pid.ki"),
    ("d", "pid.kd"),
    ("n", "vision.ballradius.min"),
    ("m", "vision.ballradius.max"),
    ("v", "vision.displaydebug"),
    ("t", "vision.trackball"),
    ("e", "cam.exposure"),
    ("s", "cam.sharpness"),
    ("c", "cam.contrast"),
    ("b", "cam.brightness"),
    ("u", "cam.hue"),
    ("g", "cam.gain"),
    ("a", "cam.autogain"),
    ("w", "cam.balance.autowhite"),
]


def build_menu(
    tree: ConfigTree,
    actions: Optional[Dict[str, Action]] = None,
    bindings=None,
) -> Menu:
    """
    Build a menu over items of a configuration tree.

    Args:
        tree: Tree that owns the items; must outlive the menu
        actions: Item path -> callback run after that item changes
        bindings: (key, item path) pairs, DEFAULT_BINDINGS if omitted

    Returns:
        New Menu with one option per binding

    Raises:
        ConfigError: If a binding names an unknown item path
        DuplicateKeyError: If two bindings share a key
    """
    actions = actions or {}
    bindings = DEFAULT_BINDINGS if bindings is None else bindings

    unknown = set(actions).difference(path for _, path in bindings)
    if unknown:
        logger.warning(f"Actions for unbound items ignored: {sorted(unknown)}")

    menu = Menu()
    for key, path in bindings:
        menu.add(key, tree.item(path), actions.get(path))
    return menu
