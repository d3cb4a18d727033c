import sys
from PySide6.QtCore import Qt, QTimer
from PySide6.QtWidgets import (
    QApplication,
    QDialog,
    QHBoxLayout,
    QMainWindow,
    QMessageBox,
    QPushButton,
    QVBoxLayout,
    QWidget,
)
from swg.common.logger import log
from swg.core import config
from swg.core.controller import GameController
from swg.core.messages import ICONS, ui_text
from swg.core.session import Phase
from swg.ui.dialogs.settings import SettingsDialog
from swg.ui.theme import THEMES, build_stylesheet, build_action_button_style, resolve_theme, severity_color
from swg.ui.ticker import qt_ticker_factory
from swg.ui.widgets import (
    build_action_button,
    build_header,
    build_result_view,
    build_running_view,
    build_target_panel,
)
from swg.util import format_seconds


# ---------------------------------------------------------------------------
# Main window
# ---------------------------------------------------------------------------

# The single game screen. Renders the controller's Session and forwards button/slider intents back to it.
class MainWindow(QMainWindow):

    def __init__(self):
        super().__init__()

        # -- Load preferences --
        self._prefs = config.load_settings()
        s = self._prefs["settings"]
        self.language = s["language"]
        self.theme = s["theme"] if s["theme"] in THEMES else "Light"
        self.always_on_top = s["always_on_top"]

        if self.always_on_top:
            self.setWindowFlags(self.windowFlags() | Qt.WindowStaysOnTopHint)

        # -- Game state --
        self.controller = GameController(
            ticker_factory=qt_ticker_factory(self),
            target_seconds=s["target_seconds"],
            language=self.language,
        )
        self._rendered_phase = None

        # -- Build UI skeleton --
        central = QWidget()
        self.setCentralWidget(central)
        self._main_lay = QVBoxLayout(central)
        self._main_lay.setContentsMargins(16, 16, 16, 30)
        self._main_lay.setSpacing(40)

        t = resolve_theme(self.theme)
        header, self._header = build_header(ui_text("title", self.language), t)
        self._main_lay.addWidget(header)

        panel, self._target = build_target_panel(
            self.controller.session.target_seconds, self._on_target_changed)
        self._main_lay.addWidget(panel)

        self._main_lay.addStretch(1)
        self._running_view, self._running = build_running_view(t)
        self._main_lay.addWidget(self._running_view)
        self._result_view, self._result = build_result_view()
        self._main_lay.addWidget(self._result_view)
        self._main_lay.addStretch(1)

        bottom = QHBoxLayout()
        bottom.setContentsMargins(14, 0, 14, 0)
        self._action_btn, _ = build_action_button(self._on_action)
        bottom.addWidget(self._action_btn, 1)
        self._gear_btn = QPushButton("⚙")
        self._gear_btn.setObjectName("gearButton")
        self._gear_btn.setFocusPolicy(Qt.NoFocus)
        self._gear_btn.clicked.connect(self._on_settings)
        bottom.addWidget(self._gear_btn)
        self._main_lay.addLayout(bottom)

        self.controller.subscribe(self._render)
        self._apply_style()
        self._render()
        QTimer.singleShot(0, self.adjustSize)

    # ------------------------------------------------------------------ #
    #  Style                                                               #
    # ------------------------------------------------------------------ #

    def _apply_style(self):
        style = build_stylesheet(self.theme)
        self.setStyleSheet(style)
        app = QApplication.instance()
        if app is not None:
            app.setStyleSheet(style)

        t = resolve_theme(self.theme)
        self._header["glyph"].setStyleSheet(f"color: {t['accent']};")
        self._running["clock"].set_color(t["accent"])
        # Force the phase-dependent parts to be repainted with the new colours
        self._rendered_phase = None

    # ------------------------------------------------------------------ #
    #  Rendering                                                           #
    # ------------------------------------------------------------------ #

    def _render(self):
        session = self.controller.session
        phase = session.phase

        self._target["value"].setText(
            ui_text("seconds", self.language, value=format_seconds(session.target_seconds)))

        if phase is Phase.RUNNING:
            self._running["clock"].set_elapsed(session.elapsed_seconds)

        # Everything below only changes on a phase transition, not on every tick
        if phase is self._rendered_phase:
            return
        self._rendered_phase = phase

        self._header["title"].setText(ui_text("title", self.language))
        self._target["caption"].setText(ui_text("target", self.language))
        self._target["slider"].setVisible(phase is Phase.IDLE)
        self._running_view.setVisible(phase is Phase.RUNNING)
        self._running["prompt"].setText(ui_text("prompt", self.language))
        self._result_view.setVisible(phase is Phase.RESULT)
        self._gear_btn.setEnabled(phase is not Phase.RUNNING)
        self._gear_btn.setToolTip(ui_text("settings", self.language))

        if phase is Phase.RESULT:
            color = severity_color(self.theme, session.result_severity)
            self._result["icon"].setText(ICONS[session.result_severity])
            self._result["icon"].setStyleSheet(f"color: {color};")
            self._result["message"].setText(session.result_message)
            self._result["message"].setStyleSheet(f"color: {color};")

        role, key = {
            Phase.IDLE: ("start", "start"),
            Phase.RUNNING: ("stop", "stop"),
            Phase.RESULT: ("again", "again"),
        }[phase]
        self._action_btn.setText(ui_text(key, self.language))
        self._action_btn.setStyleSheet(build_action_button_style(self.theme, role))

    # ------------------------------------------------------------------ #
    #  Intents                                                             #
    # ------------------------------------------------------------------ #

    def _on_action(self):
        phase = self.controller.phase
        if phase is Phase.RUNNING:
            self.controller.stop()
        elif phase is Phase.RESULT:
            self.controller.reset()
        else:
            self.controller.start()

    def _on_target_changed(self, value):
        self.controller.set_target(value)
        self._prefs["settings"]["target_seconds"] = self.controller.session.target_seconds

    def keyPressEvent(self, event):
        if event.key() == Qt.Key_Space and not event.isAutoRepeat():
            self._on_action()
            return
        super().keyPressEvent(event)

    def _on_settings(self):
        dlg = SettingsDialog(self, self._prefs["settings"])
        if dlg.exec() != QDialog.Accepted:
            return

        self.language = dlg.chosen_language
        self.controller.set_language(self.language)
        self.theme = dlg.chosen_theme
        if dlg.chosen_always_on_top != self.always_on_top:
            self.always_on_top = dlg.chosen_always_on_top
            self.setWindowFlag(Qt.WindowStaysOnTopHint, self.always_on_top)
            # Changing window flags hides the window
            self.show()

        s = self._prefs["settings"]
        s["language"] = self.language
        s["theme"] = self.theme
        s["always_on_top"] = self.always_on_top
        self._save_settings()

        self._apply_style()
        self._render()
        log.info(f"Applied settings: language '{self.language}', theme '{self.theme}', always_on_top {self.always_on_top}")

    # ------------------------------------------------------------------ #
    #  Persistence / close                                                 #
    # ------------------------------------------------------------------ #

    def _save_settings(self):
        try:
            config.save_settings(self._prefs)
        except OSError as e:
            log.warning("Failed to save settings.json", exc_info=True)
            QMessageBox.warning(self, "Save Error", f"Failed to save settings:\n{e}")

    def closeEvent(self, event):
        self.controller.reset()
        self._save_settings()
        event.accept()


# ---------------------------------------------------------------------------
# Entry point
# ---------------------------------------------------------------------------

def main():
    app = QApplication(sys.argv)
    app.setApplicationName("Stopwatch Game")
    window = MainWindow()
    window.setWindowTitle("Stopwatch Game")
    window.show()
    sys.exit(app.exec())
