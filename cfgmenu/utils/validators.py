"""
Validation utilities for cfgmenu.
"""

from typing import Union

MenuKey = Union[str, int]


def normalize_menu_key(key: MenuKey) -> str:
    """
    Convert a menu key to its single-character form.

    A key is one byte: either a one-character string with a code point
    below 256, or an integer 0-255.

    Args:
        key: Key as a character or byte value

    Returns:
        Key as a one-character string

    Raises:
        ValueError: If the key is not a single byte
    """
    if isinstance(key, bool):
        raise ValueError(f"Invalid menu key: {key!r}")

    if isinstance(key, int):
        if not 0 <= key <= 0xFF:
            raise ValueError(f"Menu key out of byte range: {key}")
        return chr(key)

    if isinstance(key, str) and len(key) == 1 and ord(key) <= 0xFF:
        return key

    raise ValueError(f"Invalid menu key: {key!r}")


def is_valid_menu_key(key: MenuKey) -> bool:
    """
    Check whether a value can be used as a menu key.

    Args:
        key: Candidate key

    Returns:
        True if normalize_menu_key() would accept it
    """
    try:
        normalize_menu_key(key)
    except ValueError:
        return False
    return True
