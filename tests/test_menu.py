"""Tests for the key-driven menu.

Tests for MenuOption, Menu selection handling and the default
operator bindings.
"""

import pytest
from unittest.mock import MagicMock

from cfgmenu.config import ConfigError, ConfigItem, ConfigTree
from cfgmenu.core import (
    DEFAULT_BINDINGS,
    DuplicateKeyError,
    Menu,
    MenuError,
    MenuOption,
    SelectionError,
    build_menu,
)
from cfgmenu.utils import is_valid_menu_key, normalize_menu_key


def _line(key: str, name: str, value: str) -> str:
    return f"{key} | {name:<20} {value:>16}\n"


# ---------------------------------------------------------------------------
# Key validation
# ---------------------------------------------------------------------------

class TestMenuKeys:

    def test_character_key(self):
        assert normalize_menu_key("w") == "w"

    def test_byte_value_key(self):
        assert normalize_menu_key(ord("x")) == "x"
        assert normalize_menu_key(0xFF) == "\xff"

    @pytest.mark.parametrize("key", ["", "ab", 256, -1, True, None, "€"])
    def test_invalid_keys(self, key):
        with pytest.raises(ValueError):
            normalize_menu_key(key)
        assert not is_valid_menu_key(key)


# ---------------------------------------------------------------------------
# MenuOption tests
# ---------------------------------------------------------------------------

class TestMenuOption:
    """Tests for a single key/item/action binding."""

    def test_key_is_read_only(self):
        option = MenuOption("w", ConfigItem("screen width", 800))
        assert option.key == "w"
        with pytest.raises(AttributeError):
            option.key = "x"

    def test_apply_without_action(self):
        item = ConfigItem("screen width", 800)
        option = MenuOption("w", item)
        assert option.apply(1024) is True
        assert item.to_typed(int) == 1024

    def test_apply_runs_action_after_set(self):
        item = ConfigItem("screen height", 600)
        seen = []
        option = MenuOption("h", item, lambda: seen.append(item.to_typed(int)))

        option.apply("1080")
        assert seen == [1080]

    def test_rejected_text_still_runs_action(self):
        item = ConfigItem("proportional", 0.3)
        action = MagicMock()
        option = MenuOption("p", item, action)

        assert option.apply("abc") is False
        assert item.to_typed(float) == 0.3
        action.assert_called_once_with()

    def test_render_line(self):
        option = MenuOption("w", ConfigItem("screen width", 800))
        assert str(option) == f"{'screen width':<20} {'800':>16}\n"
        assert len(str(option)) == 20 + 1 + 16 + 1

    def test_render_follows_value(self):
        item = ConfigItem("ball tracking", True)
        option = MenuOption("t", item)
        item.set(False)
        assert str(option).rstrip().endswith("false")

    def test_equality_by_key(self):
        a = MenuOption("a", ConfigItem("first", 1))
        b = MenuOption("a", ConfigItem("second", 2.0))
        c = MenuOption("c", ConfigItem("first", 1))
        assert a == b
        assert a != c

    def test_holds_item_by_reference(self):
        item = ConfigItem("gain", 20)
        option = MenuOption("g", item)
        assert option.item is item


# ---------------------------------------------------------------------------
# Menu tests
# ---------------------------------------------------------------------------

class TestMenuSelection:
    """Tests for the Unselected / Selected state machine."""

    def _make_menu(self):
        width = ConfigItem("screen width", 800)
        height = ConfigItem("screen height", 600)
        rate = ConfigItem("screen rate", 60)
        on_height = MagicMock()

        menu = Menu()
        menu.add("w", width)
        menu.add("h", height, on_height)
        menu.add("r", rate)
        return menu, width, height, rate, on_height

    def test_starts_unselected(self):
        menu, *_ = self._make_menu()
        assert not menu.is_selected
        assert menu.selection is None

    def test_select_existing_key(self):
        menu, *_ = self._make_menu()
        assert menu.select("h") is True
        assert menu.selection.key == "h"

    def test_select_by_byte_value(self):
        menu, *_ = self._make_menu()
        assert menu.select(ord("r")) is True
        assert menu.selection.key == "r"

    def test_select_is_case_sensitive(self):
        menu, *_ = self._make_menu()
        assert menu.select("W") is False

    def test_failed_select_clears_selection(self):
        menu, *_ = self._make_menu()
        menu.select("w")
        assert menu.select("z") is False
        assert menu.selection is None
        with pytest.raises(SelectionError):
            menu.apply(1)

    def test_invalid_key_select_returns_false(self):
        menu, *_ = self._make_menu()
        assert menu.select("long") is False

    def test_apply_sets_item_and_runs_action_once(self):
        menu, width, height, rate, on_height = self._make_menu()
        assert menu.select("h")
        menu.apply(1080)
        assert height.to_typed(int) == 1080
        on_height.assert_called_once_with()

    def test_apply_without_action(self):
        menu, width, height, rate, on_height = self._make_menu()
        menu.select("w")
        menu.apply(1920)
        assert width.to_typed(int) == 1920
        on_height.assert_not_called()

    def test_apply_keeps_selection(self):
        menu, *_ = self._make_menu()
        menu.select("w")
        menu.apply("1")
        menu.apply("2")
        assert menu.selection.key == "w"

    def test_apply_unselected_raises(self):
        menu, *_ = self._make_menu()
        with pytest.raises(SelectionError):
            menu.apply(5)

    def test_remove_selected(self):
        menu, *_ = self._make_menu()
        menu.select("h")
        menu.remove()
        assert len(menu) == 2
        assert menu.keys() == ["w", "r"]
        assert menu.select("h") is False
        assert not menu.is_selected

    def test_remove_clears_selection(self):
        menu, *_ = self._make_menu()
        menu.select("w")
        menu.remove()
        with pytest.raises(SelectionError):
            menu.remove()

    def test_remove_unselected_raises(self):
        menu, *_ = self._make_menu()
        with pytest.raises(SelectionError):
            menu.remove()
        assert len(menu) == 3

    def test_add_clears_selection(self):
        menu, *_ = self._make_menu()
        menu.select("w")
        menu.add("x", ConfigItem("extra", 0))
        assert menu.selection is None
        with pytest.raises(SelectionError):
            menu.apply(1)

    def test_duplicate_key_rejected(self):
        menu, *_ = self._make_menu()
        with pytest.raises(DuplicateKeyError):
            menu.add("w", ConfigItem("other", 1))
        assert len(menu) == 3

    def test_errors_share_base_class(self):
        assert issubclass(SelectionError, MenuError)
        assert issubclass(DuplicateKeyError, MenuError)

    def test_invalid_key_rejected_on_add(self):
        menu = Menu()
        with pytest.raises(ValueError):
            menu.add("wh", ConfigItem("screen width", 800))
        assert len(menu) == 0


class TestMenuRender:
    """Tests for the text rendering of a menu."""

    def test_render_all_options_in_order(self):
        menu = Menu()
        menu.add("w", ConfigItem("screen width", 800))
        menu.add("k", ConfigItem("proportional", 0.3))
        menu.add("e", ConfigItem("serial enabled", True))

        assert menu.render() == (
            _line("W", "screen width", "800")
            + _line("K", "proportional", "0.3")
            + _line("E", "serial enabled", "true")
        )
        assert str(menu) == menu.render()

    def test_render_latin1_keys_keep_width(self):
        menu = Menu()
        menu.add("\xdf", ConfigItem("screen width", 800))
        menu.add("\xff", ConfigItem("screen height", 600))
        menu.add("q", ConfigItem("screen rate", 60))

        lines = menu.render().splitlines()
        assert [line[0] for line in lines] == ["\xdf", "\xff", "Q"]
        assert all(len(line) == 41 for line in lines)
        assert all(ord(line[0]) <= 0xFF for line in lines)

    def test_option_label_uppercases_ascii_only(self):
        item = ConfigItem("gain", 20)
        assert MenuOption("g", item).label == "G"
        assert MenuOption("1", item).label == "1"
        assert MenuOption("\xe9", item).label == "\xe9"

    def test_render_empty_menu(self):
        assert Menu().render() == ""

    def test_render_does_not_touch_selection(self):
        menu = Menu()
        menu.add("w", ConfigItem("screen width", 800))
        menu.select("w")
        menu.render()
        assert menu.selection.key == "w"

    def test_render_after_apply(self):
        menu = Menu()
        menu.add("h", ConfigItem("screen height", 600))
        menu.select("h")
        menu.apply(1080)
        assert menu.render() == _line("H", "screen height", "1080")

    def test_container_protocol(self):
        menu = Menu()
        menu.add("w", ConfigItem("screen width", 800))
        menu.add("h", ConfigItem("screen height", 600))
        assert "w" in menu
        assert "z" not in menu
        assert "too long" not in menu
        assert [option.key for option in menu] == ["w", "h"]


# ---------------------------------------------------------------------------
# Default bindings
# ---------------------------------------------------------------------------

class TestBuildMenu:
    """Tests for building the operator menu over a tree."""

    def test_default_bindings(self):
        tree = ConfigTree.defaults()
        menu = build_menu(tree)
        assert len(menu) == len(DEFAULT_BINDINGS)
        assert menu.keys() == [key for key, _ in DEFAULT_BINDINGS]

    def test_options_reference_tree_items(self):
        tree = ConfigTree.defaults()
        menu = build_menu(tree)
        assert menu.select("p")
        menu.apply("0.45")
        assert tree.pid.kp.to_typed(float) == 0.45

    def test_actions_by_path(self):
        tree = ConfigTree.defaults()
        on_gain = MagicMock()
        menu = build_menu(tree, actions={"cam.gain": on_gain})

        menu.select("g")
        menu.apply(42)
        on_gain.assert_called_once_with()
        assert int(tree.cam.gain) == 42

        menu.select("e")
        menu.apply(10)
        on_gain.assert_called_once_with()

    def test_custom_bindings(self):
        tree = ConfigTree.defaults()
        menu = build_menu(tree, bindings=[("w", "screen.width"), ("h", "screen.height")])
        assert menu.render().startswith("W | screen width")

    def test_unknown_path_raises(self):
        with pytest.raises(ConfigError):
            build_menu(ConfigTree.defaults(), bindings=[("x", "no.such.item")])

    def test_duplicate_binding_raises(self):
        with pytest.raises(DuplicateKeyError):
            build_menu(
                ConfigTree.defaults(),
                bindings=[("x", "screen.width"), ("x", "screen.height")],
            )
