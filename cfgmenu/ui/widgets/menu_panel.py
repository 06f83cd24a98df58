"""
Menu panel widget for cfgmenu.

Shows the rendered menu text and lets the operator pick an option by
key and type a new value for it.
"""

import logging
from typing import Optional

from PySide6.QtWidgets import (
    QWidget, QVBoxLayout, QHBoxLayout, QPlainTextEdit,
    QLineEdit, QLabel, QPushButton,
)
from PySide6.QtCore import Signal, Slot
from PySide6.QtGui import QFont

from ...core.menu import Menu

logger = logging.getLogger(__name__)


class MenuPanelWidget(QWidget):
    """
    Operator view of a Menu.

    Layout:
        [ menu text (read-only, monospace) ]
        Key: [_]  Value: [__________] [Remove]
        status line

    Emits value_applied(str) with the option key after each apply.
    """

    value_applied = Signal(str)

    def __init__(self, menu: Menu, parent: Optional[QWidget] = None):
        super().__init__(parent)
        self._menu = menu
        self._init_ui()
        self.refresh()

    def _init_ui(self):
        layout = QVBoxLayout(self)

        self._view = QPlainTextEdit()
        self._view.setReadOnly(True)
        self._view.setFont(QFont("Consolas", 10))
        self._view.setLineWrapMode(QPlainTextEdit.LineWrapMode.NoWrap)
        layout.addWidget(self._view)

        controls = QHBoxLayout()

        controls.addWidget(QLabel("Key:"))
        self._key_input = QLineEdit()
        self._key_input.setMaxLength(1)
        self._key_input.setMaximumWidth(40)
        self._key_input.textEdited.connect(self._on_key_edited)
        controls.addWidget(self._key_input)

        controls.addWidget(QLabel("Value:"))
        self._value_input = QLineEdit()
        self._value_input.setPlaceholderText("new value, Enter to apply")
        self._value_input.returnPressed.connect(self._on_return_pressed)
        controls.addWidget(self._value_input)

        self._remove_button = QPushButton("Remove")
        self._remove_button.setToolTip("Remove the selected option from the menu")
        self._remove_button.clicked.connect(self.remove_selected)
        controls.addWidget(self._remove_button)

        layout.addLayout(controls)

        self._status = QLabel("")
        layout.addWidget(self._status)

        self._update_controls()

    def refresh(self):
        """Re-render the menu text."""
        self._view.setPlainText(self._menu.render())

    def select_key(self, key: str) -> bool:
        """
        Select a menu option by key.

        Keys are shown uppercased, so an uppercase key that has no option
        of its own falls back to its lowercase form.

        Returns:
            True if an option with that key exists
        """
        if not key:
            return False

        found = self._menu.select(key)
        if not found and key.lower() != key:
            found = self._menu.select(key.lower())
        self._update_controls()
        if found:
            option = self._menu.selection
            self._value_input.setText(option.item.to_string())
            self._status.setText(f"Editing '{option.item.name}'")
            self._value_input.setFocus()
        else:
            self._status.setText(f"No option for key '{key}'")
        return found

    def apply_value(self, text: Optional[str] = None) -> bool:
        """
        Apply text (or the value field) to the selected option.

        Returns:
            True if the value was accepted
        """
        if not self._menu.is_selected:
            self._status.setText("Select an option first")
            return False

        if text is None:
            text = self._value_input.text().strip()

        option = self._menu.selection
        accepted = self._menu.apply(text)
        if accepted:
            self._status.setText(f"{option.item.name} = {option.item.to_string()}")
        else:
            self._status.setText(f"Invalid value for '{option.item.name}': {text}")

        self.refresh()
        self.value_applied.emit(option.key)
        return accepted

    def remove_selected(self) -> bool:
        """Remove the selected option from the menu."""
        if not self._menu.is_selected:
            self._status.setText("Select an option first")
            return False

        name = self._menu.selection.item.name
        self._menu.remove()
        logger.info(f"Removed '{name}' from menu")
        self._status.setText(f"Removed '{name}'")
        self._key_input.clear()
        self._value_input.clear()
        self._update_controls()
        self.refresh()
        return True

    def get_text(self) -> str:
        """Return the displayed menu text."""
        return self._view.toPlainText()

    def status_text(self) -> str:
        return self._status.text()

    def _update_controls(self):
        selected = self._menu.is_selected
        self._value_input.setEnabled(selected)
        self._remove_button.setEnabled(selected)

    @Slot(str)
    def _on_key_edited(self, text: str):
        self.select_key(text)

    @Slot()
    def _on_return_pressed(self):
        self.apply_value()
