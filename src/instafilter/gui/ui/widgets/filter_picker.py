"""Dialog listing every filter plus a cancel action."""

from __future__ import annotations

from typing import Optional

from PySide6.QtWidgets import QDialog, QPushButton, QVBoxLayout, QWidget

from ....core.filter_kinds import FilterKind
from ..palette import BUTTON_STYLESHEET


class FilterPickerDialog(QDialog):
    """Modal "Select a filter" sheet with one button per :class:`FilterKind`."""

    def __init__(self, current: Optional[FilterKind] = None, parent: Optional[QWidget] = None) -> None:
        super().__init__(parent)
        self.setWindowTitle("Select a filter")
        self.setModal(True)
        self._selected: Optional[FilterKind] = None
        self._buttons: dict[FilterKind, QPushButton] = {}

        layout = QVBoxLayout(self)
        layout.setSpacing(4)
        for kind in FilterKind:
            button = QPushButton(kind.label, self)
            button.setStyleSheet(BUTTON_STYLESHEET)
            if kind is current:
                button.setDefault(True)
            button.clicked.connect(lambda _checked=False, k=kind: self.choose(k))
            layout.addWidget(button)
            self._buttons[kind] = button

        cancel = QPushButton("Cancel", self)
        cancel.clicked.connect(self.reject)
        layout.addSpacing(8)
        layout.addWidget(cancel)

    def button_for(self, kind: FilterKind) -> QPushButton:
        return self._buttons[kind]

    def selected(self) -> Optional[FilterKind]:
        return self._selected

    def choose(self, kind: FilterKind) -> None:
        """Record *kind* and close the dialog as accepted."""

        self._selected = kind
        self.accept()


def pick_filter(parent: Optional[QWidget], current: Optional[FilterKind] = None) -> Optional[FilterKind]:
    """Run the picker and return the chosen filter, or ``None`` when cancelled."""

    dialog = FilterPickerDialog(current, parent)
    dialog.exec()
    return dialog.selected()


__all__ = ["FilterPickerDialog", "pick_filter"]
