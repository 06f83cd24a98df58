"""
Settings persistence for cfgmenu.

Loads a ConfigTree from, and saves it to, an XML settings file.
"""

import os
import logging
from pathlib import Path
from typing import Optional, Union

from .defaults import DEFAULT_FILENAME, DEFAULT_TAGNAME
from .tree import ConfigTree
from .xml_store import XmlSettings, XmlSettingsError

logger = logging.getLogger(__name__)


class Settings:
    """
    Reads and writes a ConfigTree as flat key/value pairs.

    All items live below one root tag, keyed by their tag name:

        <settings>
            <screen-width>800</screen-width>
            ...
        </settings>

    Keys missing from the file leave the item at its current value.
    """

    def __init__(
        self,
        filename: Union[str, Path] = DEFAULT_FILENAME,
        tagname: str = DEFAULT_TAGNAME,
        store: Optional[XmlSettings] = None,
    ):
        """
        Initialize settings persistence.

        Args:
            filename: Path of the settings file
            tagname: Root tag that holds all items
            store: XML document to use (a fresh one by default)
        """
        self.filename = Path(filename)
        self.tagname = tagname
        self.store = store if store is not None else XmlSettings()

    @staticmethod
    def default_path() -> Path:
        """
        Get the platform-specific settings file path.

        Returns:
            Path to settings.xml in the user's config directory
        """
        if os.name == 'nt':  # Windows
            base = os.environ.get('APPDATA', os.path.expanduser('~'))
        else:  # Linux/macOS
            base = os.environ.get('XDG_CONFIG_HOME', os.path.expanduser('~/.config'))
        return Path(base) / 'cfgmenu' / DEFAULT_FILENAME

    def load(self, tree: ConfigTree) -> bool:
        """
        Overwrite tree items with values from the settings file.

        A missing file is not an error; the tree keeps its values.

        Args:
            tree: Tree to update in place

        Returns:
            False if the file could not be parsed, True otherwise
        """
        try:
            if not self.store.load(self.filename):
                logger.info(f"No settings file at {self.filename}, using defaults")
                return True

            with self.store.scope(self.tagname):
                for item in tree.flatten():
                    text = self.store.get_value(item.tagname, item.to_string())
                    if not item.set(text):
                        logger.warning(
                            f"Invalid value {text!r} for '{item.tagname}', "
                            f"keeping {item.to_string()}"
                        )

            logger.info(f"Loaded settings from {self.filename}")
            return True

        except (XmlSettingsError, OSError) as e:
            logger.error(f"Failed to load settings: {e}, using defaults")
            return False

        finally:
            self.store.clear()

    def save(self, tree: ConfigTree) -> bool:
        """
        Write every tree item to the settings file.

        Creates parent directories if needed.

        Args:
            tree: Tree to persist

        Returns:
            True if the file was written
        """
        try:
            with self.store.scope(self.tagname):
                for item in tree.flatten():
                    self.store.set_value(item.tagname, item.to_string())

            self.filename.parent.mkdir(parents=True, exist_ok=True)
            self.store.save_file(self.filename)

            logger.info(f"Saved settings to {self.filename}")
            return True

        except (XmlSettingsError, OSError) as e:
            logger.error(f"Failed to save settings: {e}")
            return False

        finally:
            self.store.clear()
