"""
Tag-scoped XML settings document.

A small key/value document: values live as text in child elements,
and a stack of pushed tags selects the scope that get/set operate on.
"""

import logging
import xml.etree.ElementTree as ET
from contextlib import contextmanager
from pathlib import Path
from typing import Iterator, List, Union

logger = logging.getLogger(__name__)

PathLike = Union[str, Path]

# Holds the top-level elements of the document
_DOCUMENT_TAG = "document"


class XmlSettingsError(Exception):
    """Raised on malformed files or invalid scope operations."""
    pass


class XmlSettings:
    """
    In-memory XML settings document.

    Example:
        store = XmlSettings()
        store.load("settings.xml")
        with store.scope("settings"):
            width = store.get_value("screen-width", "800")
            store.set_value("screen-width", "1024")
        store.save_file("settings.xml")
    """

    def __init__(self):
        self._document = ET.Element(_DOCUMENT_TAG)
        self._scopes: List[ET.Element] = [self._document]

    @property
    def depth(self) -> int:
        """Number of tags currently pushed."""
        return len(self._scopes) - 1

    @property
    def _current(self) -> ET.Element:
        return self._scopes[-1]

    def load(self, filename: PathLike) -> bool:
        """
        Replace the document with the contents of a file.

        Args:
            filename: Path of the XML file

        Returns:
            True if the file was read, False if it does not exist

        Raises:
            XmlSettingsError: If the file is not well-formed XML
        """
        self.clear()
        path = Path(filename)
        if not path.exists():
            logger.debug(f"Settings file not found: {path}")
            return False

        try:
            root = ET.parse(path).getroot()
        except ET.ParseError as e:
            raise XmlSettingsError(f"Malformed settings file {path}: {e}")

        self._document.append(root)
        return True

    def save_file(self, filename: PathLike):
        """
        Write the document to a file.

        Raises:
            XmlSettingsError: If the document does not have exactly one
                top-level tag
            OSError: If the file cannot be written
        """
        roots = list(self._document)
        if len(roots) != 1:
            raise XmlSettingsError(
                f"Expected one top-level tag, found {len(roots)}"
            )

        tree = ET.ElementTree(roots[0])
        ET.indent(tree, space="    ")
        tree.write(Path(filename), encoding="utf-8", xml_declaration=True)
        logger.debug(f"Wrote settings file: {filename}")

    def clear(self):
        """Drop all tags and scopes."""
        self._document = ET.Element(_DOCUMENT_TAG)
        self._scopes = [self._document]

    def add_tag(self, tag: str):
        """Append a new, empty tag to the current scope."""
        ET.SubElement(self._current, tag)

    def _children(self, tag: str) -> List[ET.Element]:
        # Compared by name rather than ElementPath; tags may contain '.'
        return [child for child in self._current if child.tag == tag]

    def tag_exists(self, tag: str, which: int = 0) -> bool:
        return len(self._children(tag)) > which

    def push_tag(self, tag: str, which: int = 0) -> bool:
        """
        Enter a tag of the current scope.

        Args:
            tag: Tag name
            which: Index among tags with the same name

        Returns:
            True if the tag was found and entered
        """
        matches = self._children(tag)
        if which >= len(matches):
            return False
        self._scopes.append(matches[which])
        return True

    def pop_tag(self):
        """
        Leave the current scope.

        Raises:
            XmlSettingsError: If no tag is pushed
        """
        if self.depth == 0:
            raise XmlSettingsError("pop_tag() without a matching push_tag()")
        self._scopes.pop()

    @contextmanager
    def scope(self, tag: str) -> Iterator["XmlSettings"]:
        """Enter a tag (creating it if missing) for the duration of a block."""
        if not self.tag_exists(tag):
            self.add_tag(tag)
        self.push_tag(tag)
        try:
            yield self
        finally:
            self.pop_tag()

    def get_value(self, tag: str, default: str) -> str:
        """
        Read the text of a tag in the current scope.

        Returns:
            Tag text, or default if the tag does not exist
        """
        matches = self._children(tag)
        if not matches:
            return default
        return matches[0].text or ""

    def set_value(self, tag: str, value: str):
        """Write the text of a tag in the current scope, creating it if needed."""
        matches = self._children(tag)
        element = matches[0] if matches else ET.SubElement(self._current, tag)
        element.text = value

    def keys(self) -> List[str]:
        """Tag names directly below the current scope."""
        return [child.tag for child in self._current]
