"""Tests for the Qt side: QtTicker, the theme lookups and the MainWindow presentation rules."""

import json
import os
import shutil
import tempfile
import unittest
from pathlib import Path

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

from PySide6.QtCore import Qt
from PySide6.QtTest import QTest
from PySide6.QtWidgets import QApplication


def _app():
    return QApplication.instance() or QApplication([])


class TestQtTicker(unittest.TestCase):

    @classmethod
    def setUpClass(cls):
        cls.app = _app()

    def test_start_and_stop(self):
        from swg.ui.ticker import QtTicker
        ticker = QtTicker(10, lambda: None)
        self.assertFalse(ticker.is_active)
        ticker.start()
        self.assertTrue(ticker.is_active)
        ticker.stop()
        self.assertFalse(ticker.is_active)

    def test_drives_controller(self):
        from swg.core.controller import GameController
        from swg.ui.ticker import qt_ticker_factory
        controller = GameController(ticker_factory=qt_ticker_factory())
        controller.start()
        self.assertTrue(controller.ticking)
        controller.stop()
        self.assertFalse(controller.ticking)


class TestTheme(unittest.TestCase):

    def test_severity_colors_follow_roles(self):
        from swg.core.session import Severity
        from swg.ui.theme import THEMES, severity_color
        for name, t in THEMES.items():
            with self.subTest(theme=name):
                self.assertEqual(severity_color(name, Severity.PERFECT), t["favorable"])
                self.assertEqual(severity_color(name, Severity.GREAT), t["favorable"])
                self.assertEqual(severity_color(name, Severity.GOOD), t["neutral"])
                self.assertEqual(severity_color(name, Severity.CLOSE), t["cautionary"])
                self.assertEqual(severity_color(name, Severity.MISS), t["unfavorable"])

    def test_unknown_theme_falls_back_to_light(self):
        from swg.ui.theme import THEMES, resolve_theme
        self.assertIs(resolve_theme("Nope"), THEMES["Light"])

    def test_theme_names_match_settings_choices(self):
        from swg.core.config import THEME_NAMES
        from swg.ui.theme import THEMES
        self.assertEqual(tuple(THEMES), THEME_NAMES)

    def test_stylesheets_build(self):
        from swg.ui.theme import THEMES, build_stylesheet, build_action_button_style
        for name in THEMES:
            self.assertIn(THEMES[name]["bg"], build_stylesheet(name))
            for role in ("start", "stop", "again"):
                self.assertIn(THEMES[name][role], build_action_button_style(name, role))


# ──────────────────────────────────────────────────────────────────────────
# app.py tests
# ──────────────────────────────────────────────────────────────────────────

class TestMainWindow(unittest.TestCase):

    @classmethod
    def setUpClass(cls):
        cls.app = _app()

    def setUp(self):
        self.tmpdir = tempfile.mkdtemp()

        # Monkey-patch the settings path to use temp dir
        from swg.core import config
        self._orig_settings_path = config.SETTINGS_PATH
        config.SETTINGS_PATH = Path(self.tmpdir) / "settings.json"
        self.windows = []

    def tearDown(self):
        from swg.core import config
        for w in self.windows:
            w.controller.reset()
            w.deleteLater()
        config.SETTINGS_PATH = self._orig_settings_path
        shutil.rmtree(self.tmpdir, ignore_errors=True)

    def _window(self, settings=None):
        from swg.core import config
        from swg.ui.app import MainWindow
        if settings is not None:
            with open(config.SETTINGS_PATH, "w", encoding="utf-8") as f:
                json.dump({"schema_version": 1, "settings": settings}, f)
        w = MainWindow()
        self.windows.append(w)
        return w

    def test_saved_fractional_target_matches_slider(self):
        w = self._window({"target_seconds": 12.6})
        slider = w._target["slider"]
        self.assertEqual(slider.value(), 13)
        self.assertEqual(w.controller.session.target_seconds, float(slider.value()))
        self.assertEqual(w._target["value"].text(), "13 s")

    def test_idle_layout(self):
        w = self._window()
        self.assertFalse(w._target["slider"].isHidden())
        self.assertTrue(w._running_view.isHidden())
        self.assertTrue(w._result_view.isHidden())
        self.assertTrue(w._gear_btn.isEnabled())
        self.assertEqual(w._action_btn.text(), "Start")

    def test_running_layout(self):
        w = self._window()
        w._action_btn.click()
        self.assertTrue(w._target["slider"].isHidden())
        self.assertFalse(w._running_view.isHidden())
        self.assertTrue(w._result_view.isHidden())
        self.assertFalse(w._gear_btn.isEnabled())
        self.assertEqual(w._action_btn.text(), "Stop")

    def test_result_layout(self):
        from swg.core.messages import ICONS
        from swg.core.session import Severity
        from swg.ui.theme import severity_color
        w = self._window({"target_seconds": 5})
        w._action_btn.click()
        w.controller.session.elapsed_seconds = 8.5
        w._action_btn.click()
        self.assertTrue(w._target["slider"].isHidden())
        self.assertTrue(w._running_view.isHidden())
        self.assertFalse(w._result_view.isHidden())
        self.assertTrue(w._gear_btn.isEnabled())
        self.assertEqual(w._action_btn.text(), "Play again")
        self.assertEqual(w._result["icon"].text(), ICONS[Severity.MISS])
        self.assertEqual(w._result["message"].text(), w.controller.session.result_message)
        self.assertIn(severity_color("Light", Severity.MISS), w._result["message"].styleSheet())

    def test_space_presses_visible_action(self):
        from swg.core.session import Phase
        w = self._window()
        QTest.keyClick(w, Qt.Key_Space)
        self.assertIs(w.controller.phase, Phase.RUNNING)
        QTest.keyClick(w, Qt.Key_Space)
        self.assertIs(w.controller.phase, Phase.RESULT)
        QTest.keyClick(w, Qt.Key_Space)
        self.assertIs(w.controller.phase, Phase.IDLE)
        self.assertEqual(w._action_btn.text(), "Start")

    def test_slider_sets_target_only_in_idle(self):
        w = self._window()
        w._target["slider"].setValue(20)
        self.assertEqual(w.controller.session.target_seconds, 20.0)
        self.assertEqual(w._target["value"].text(), "20 s")

    def test_clock_hand_follows_elapsed(self):
        w = self._window()
        w._action_btn.click()
        for _ in range(150):
            w.controller.tick()
        self.assertAlmostEqual(w._running["clock"].angle, 30.0)

    def test_japanese_labels(self):
        w = self._window({"language": "ja"})
        self.assertEqual(w._action_btn.text(), "スタート")
        self.assertEqual(w._header["title"].text(), "体内時計チャレンジ")


if __name__ == "__main__":
    unittest.main()
