"""Preferences dialog for the Stopwatch Game."""

from PySide6.QtCore import Qt
from PySide6.QtGui import QFont
from PySide6.QtWidgets import (
    QComboBox,
    QDialog,
    QHBoxLayout,
    QLabel,
    QPushButton,
    QVBoxLayout,
)
from swg.core.messages import LANGUAGES
from swg.ui.theme import THEMES

_LANGUAGE_NAMES = {"en": "English", "ja": "日本語"}
_WINDOW_BEHAVIORS = ("Normal Window", "Always On Top")

# Small settings dialog opened from the gear button. Only editable while no attempt is running.
class SettingsDialog(QDialog):

    def __init__(self, parent, cfg):
        super().__init__(parent)
        self.setWindowTitle("Settings")
        self.setModal(True)

        # Output attributes, read by MainWindow after dialog closes
        self.chosen_language = cfg.get("language", "en")
        self.chosen_theme = cfg.get("theme", "Light")
        self.chosen_always_on_top = cfg.get("always_on_top", False)

        outer = QVBoxLayout(self)
        outer.setSpacing(12)

        self._language = QComboBox()
        for code in LANGUAGES:
            self._language.addItem(_LANGUAGE_NAMES[code], code)
        self._language.setCurrentIndex(self._language.findData(self.chosen_language))
        outer.addLayout(self._labelled_row("Language:", self._language))

        self._theme = QComboBox()
        self._theme.addItems(list(THEMES))
        self._theme.setCurrentText(self.chosen_theme)
        outer.addLayout(self._labelled_row("Theme:", self._theme))

        self._always_on_top = QComboBox()
        self._always_on_top.addItems(list(_WINDOW_BEHAVIORS))
        self._always_on_top.setCurrentText(
            "Always On Top" if self.chosen_always_on_top else "Normal Window")
        self._always_on_top.setToolTip(
            "Always On Top: Will remain as a focused window even while clicking on other windows.\n\n"
            "Normal Window: Behaves like a normal window.")
        outer.addLayout(self._labelled_row("Window Behavior:", self._always_on_top))

        btn_row = QHBoxLayout()
        btn_row.addStretch()
        apply_btn = QPushButton("Apply")
        apply_btn.setObjectName("gearButton")
        apply_btn.setFont(QFont("Helvetica", 12))
        apply_btn.clicked.connect(self._apply)
        btn_row.addWidget(apply_btn)
        outer.addLayout(btn_row)

    @staticmethod
    def _labelled_row(text, widget):
        row = QHBoxLayout()
        lbl = QLabel(text)
        lbl.setFont(QFont("Helvetica", 12, QFont.Bold))
        lbl.setAlignment(Qt.AlignLeft | Qt.AlignVCenter)
        widget.setMinimumWidth(180)
        row.addWidget(lbl)
        row.addStretch()
        row.addWidget(widget)
        return row

    def _apply(self):
        self.chosen_language = self._language.currentData()
        self.chosen_theme = self._theme.currentText()
        self.chosen_always_on_top = self._always_on_top.currentText() == "Always On Top"
        self.accept()
