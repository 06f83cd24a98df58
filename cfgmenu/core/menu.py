"""
Key-driven text menu over configuration items.

A Menu maps single-byte keys to configuration items. An input loop
selects an option by key and applies a new value to it; an optional
action runs after every change.

Options hold references to items owned elsewhere (usually a
ConfigTree), so that owner must outlive the menu.
"""

import logging
from typing import Callable, Iterator, List, Optional, Union

from ..config.item import ConfigItem, Scalar
from ..utils.validators import MenuKey, normalize_menu_key

logger = logging.getLogger(__name__)

Action = Callable[[], None]

NAME_WIDTH = 20
VALUE_WIDTH = 16


class MenuError(Exception):
    """Base class for menu errors."""
    pass


class SelectionError(MenuError):
    """Raised when an operation needs a selection and none is held."""
    pass


class DuplicateKeyError(MenuError):
    """Raised when adding an option whose key is already in use."""
    pass


class MenuOption:
    """
    A key bound to a configuration item and an optional action.

    Two options are equal when their keys are equal.
    """

    def __init__(self, key: MenuKey, item: ConfigItem, action: Optional[Action] = None):
        self._key = normalize_menu_key(key)
        self._item = item
        self._action = action

    @property
    def key(self) -> str:
        return self._key

    @property
    def label(self) -> str:
        """Key as shown in the menu; only ASCII a-z are uppercased."""
        return self._key.encode("latin-1").upper().decode("latin-1")

    @property
    def item(self) -> ConfigItem:
        return self._item

    @property
    def action(self) -> Optional[Action]:
        return self._action

    def apply(self, value: Union[str, Scalar]) -> bool:
        """
        Set the item, then run the action if there is one.

        The action always sees the new value. It also runs when text was
        rejected and the value did not change.

        Args:
            value: Text or scalar value for the item

        Returns:
            Result of ConfigItem.set()
        """
        accepted = self._item.set(value)
        if self._action is not None:
            self._action()
        return accepted

    def __str__(self) -> str:
        return f"{self._item.name:<{NAME_WIDTH}} {self._item.to_string():>{VALUE_WIDTH}}\n"

    def __repr__(self) -> str:
        return f"MenuOption({self._key!r}, {self._item!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, MenuOption):
            return NotImplemented
        return self._key == other._key

    def __hash__(self) -> int:
        return hash(self._key)


class Menu:
    """
    Ordered collection of menu options with one selection.

    The menu is either unselected (initially) or has one selected
    option. add() and remove() always clear the selection, so select()
    must be called again after either.

    Keys are unique: adding a key that is already present raises
    DuplicateKeyError.

    Example:
        menu = Menu()
        menu.add('w', tree.screen.width)
        menu.add('h', tree.screen.height, on_resize)
        if menu.select('h'):
            menu.apply(1080)
        print(menu.render())
    """

    def __init__(self):
        self._options: List[MenuOption] = []
        self._selection: Optional[MenuOption] = None

    def add(self, key: MenuKey, item: ConfigItem, action: Optional[Action] = None):
        """
        Append an option.

        Args:
            key: Single-byte key
            item: Item to edit through this option
            action: Called with no arguments after each apply

        Raises:
            ValueError: If the key is not a single byte
            DuplicateKeyError: If the key is already used
        """
        option = MenuOption(key, item, action)
        if option in self._options:
            raise DuplicateKeyError(f"Menu key already in use: {option.key!r}")

        self._options.append(option)
        self._selection = None
        logger.debug(f"Added menu option {option.key!r} -> '{item.name}'")

    def select(self, key: MenuKey) -> bool:
        """
        Select the option with the given key.

        Args:
            key: Key to look up

        Returns:
            True if found. Otherwise the selection is cleared and False
            is returned.
        """
        self._selection = None
        try:
            key = normalize_menu_key(key)
        except ValueError:
            return False

        for option in self._options:
            if option.key == key:
                self._selection = option
                return True
        return False

    def _require_selection(self, operation: str) -> MenuOption:
        if self._selection is None:
            raise SelectionError(f"{operation}() requires a selected option")
        return self._selection

    def remove(self):
        """
        Remove the selected option.

        Raises:
            SelectionError: If nothing is selected
        """
        option = self._require_selection("remove")
        self._options.remove(option)
        self._selection = None
        logger.debug(f"Removed menu option {option.key!r}")

    def apply(self, value: Union[str, Scalar]) -> bool:
        """
        Apply a value to the selected option.

        Returns:
            Result of MenuOption.apply()

        Raises:
            SelectionError: If nothing is selected
        """
        option = self._require_selection("apply")
        accepted = option.apply(value)
        if not accepted:
            logger.warning(f"Rejected value {value!r} for '{option.item.name}'")
        return accepted

    @property
    def selection(self) -> Optional[MenuOption]:
        """Selected option, or None."""
        return self._selection

    @property
    def is_selected(self) -> bool:
        return self._selection is not None

    def keys(self) -> List[str]:
        """Keys of all options, in insertion order."""
        return [option.key for option in self._options]

    def render(self) -> str:
        """
        Render every option as one line of text.

        Returns:
            "KEY | name value" lines in insertion order
        """
        return "".join(
            f"{option.label} | {option}" for option in self._options
        )

    def __str__(self) -> str:
        return self.render()

    def __len__(self) -> int:
        return len(self._options)

    def __iter__(self) -> Iterator[MenuOption]:
        return iter(list(self._options))

    def __contains__(self, key: object) -> bool:
        try:
            key = normalize_menu_key(key)
        except ValueError:
            return False
        return key in self.keys()
