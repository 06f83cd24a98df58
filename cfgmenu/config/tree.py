"""
Configuration tree for cfgmenu.

Groups every ConfigItem of the application into fixed sections and
provides a stable flattened view used for persistence.
"""

import logging
from dataclasses import dataclass, field, fields, is_dataclass
from typing import Any, Dict, Iterator, List, Optional, Tuple

from .defaults import DEFAULT_SETTINGS, FLATTEN_ORDER
from .item import ConfigItem

logger = logging.getLogger(__name__)


class ConfigError(Exception):
    """Raised when the configuration tree is inconsistent."""
    pass


@dataclass
class ScreenConfig:
    """Application screen."""
    width: ConfigItem
    height: ConfigItem
    rate: ConfigItem


@dataclass
class SerialConfig:
    """Serial connection."""
    enabled: ConfigItem
    deviceid: ConfigItem
    baudrate: ConfigItem


@dataclass
class PidConfig:
    """PID controller gains."""
    kp: ConfigItem
    ki: ConfigItem
    kd: ConfigItem


@dataclass
class RangeConfig:
    min: ConfigItem
    max: ConfigItem


@dataclass
class VisionConfig:
    """Computer vision."""
    displaydebug: ConfigItem
    trackball: ConfigItem
    ballradius: RangeConfig


@dataclass
class FrameConfig:
    """Camera frame."""
    width: ConfigItem
    height: ConfigItem
    rate: ConfigItem

    def size(self, depth: int = 1) -> int:
        """
        Size of one camera frame.

        Args:
            depth: Bytes (or channels) per pixel

        Returns:
            depth * width * height
        """
        return depth * int(self.width) * int(self.height)


@dataclass
class BalanceConfig:
    """Color balance."""
    red: ConfigItem
    green: ConfigItem
    blue: ConfigItem
    autowhite: ConfigItem


@dataclass
class CameraConfig:
    """Camera image settings."""
    frame: FrameConfig
    balance: BalanceConfig
    format: ConfigItem
    exposure: ConfigItem
    sharpness: ConfigItem
    contrast: ConfigItem
    brightness: ConfigItem
    hue: ConfigItem
    gain: ConfigItem
    autogain: ConfigItem


def _build_section(section_type: type, values: Dict[str, Any]) -> Any:
    """Recursively instantiate a section dataclass from a defaults dict."""
    kwargs = {}
    for f in fields(section_type):
        entry = values[f.name]
        if isinstance(entry, dict):
            kwargs[f.name] = _build_section(f.type, entry)
        else:
            name, kind, value = entry
            kwargs[f.name] = ConfigItem(name, value, kind)
    return section_type(**kwargs)


def _walk(node: Any, prefix: str = "") -> Iterator[Tuple[str, ConfigItem]]:
    """Yield (path, item) for every item below a section, in field order."""
    for f in fields(node):
        if not f.init:
            continue
        child = getattr(node, f.name)
        path = f"{prefix}{f.name}"
        if isinstance(child, ConfigItem):
            yield path, child
        elif is_dataclass(child):
            yield from _walk(child, f"{path}.")


@dataclass
class ConfigTree:
    """
    All configuration settings of the application.

    The shape is fixed: no items are added or removed at runtime. Use
    ConfigTree.defaults() to build a populated tree.

    The flattened view follows FLATTEN_ORDER and is built once, so load
    and save always visit the items in the same order.
    """
    screen: ScreenConfig
    serial: SerialConfig
    pid: PidConfig
    vision: VisionConfig
    cam: CameraConfig
    _registry: List[Tuple[str, ConfigItem]] = field(
        default_factory=list, init=False, repr=False, compare=False
    )

    def __post_init__(self):
        self._registry = [(path, self._resolve(path)) for path in FLATTEN_ORDER]
        self._validate()

    @classmethod
    def defaults(cls) -> "ConfigTree":
        """Build a tree with every item at its default value."""
        sections = {
            f.name: _build_section(f.type, DEFAULT_SETTINGS[f.name])
            for f in fields(cls) if f.init
        }
        return cls(**sections)

    def _resolve(self, path: str) -> ConfigItem:
        node: Any = self
        for part in path.split('.'):
            try:
                node = getattr(node, part)
            except AttributeError:
                raise ConfigError(f"Unknown configuration path: {path}")
        if not isinstance(node, ConfigItem):
            raise ConfigError(f"Path is a section, not an item: {path}")
        return node

    def _validate(self):
        """Check that the registry covers every item exactly once."""
        walked = {path for path, _ in _walk(self)}
        registered = [path for path, _ in self._registry]

        missing = walked.difference(registered)
        if missing:
            raise ConfigError(f"Items missing from flatten order: {sorted(missing)}")
        if len(set(registered)) != len(registered):
            raise ConfigError("Duplicate path in flatten order")

        tags = [item.tagname for _, item in self._registry]
        duplicates = {tag for tag in tags if tags.count(tag) > 1}
        if duplicates:
            raise ConfigError(f"Duplicate tag names: {sorted(duplicates)}")

    def flatten(self) -> List[ConfigItem]:
        """
        Get every item in persistence order.

        Returns:
            List of references to the tree's items (not copies)
        """
        return [item for _, item in self._registry]

    def paths(self) -> List[str]:
        """Dotted paths of every item, in persistence order."""
        return [path for path, _ in self._registry]

    def item(self, path: str) -> ConfigItem:
        """
        Get an item by dotted path, e.g. "cam.frame.width".

        Raises:
            ConfigError: If the path does not name an item
        """
        for item_path, item in self._registry:
            if item_path == path:
                return item
        raise ConfigError(f"Unknown configuration path: {path}")

    def find(self, tagname: str) -> Optional[ConfigItem]:
        """
        Look up an item by tag name.

        Returns:
            The item, or None if no item has that tag name
        """
        for _, item in self._registry:
            if item.tagname == tagname:
                return item
        return None

    def __iter__(self) -> Iterator[ConfigItem]:
        return iter(self.flatten())

    def __len__(self) -> int:
        return len(self._registry)
