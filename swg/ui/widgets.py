"""Widget builders: header, target panel, clock face, result view and action button.

Each builder returns a (container, widget_dict) tuple.  The container is
inserted into the main layout; the widget_dict maps logical names to
sub-widgets that MainWindow updates on every render.
"""

import math

from PySide6.QtCore import Qt, QPointF, QSize
from PySide6.QtGui import QColor, QFont, QPainter, QPen
from PySide6.QtWidgets import (
    QFrame,
    QHBoxLayout,
    QLabel,
    QPushButton,
    QSizePolicy,
    QSlider,
    QVBoxLayout,
    QWidget,
)

from swg.core.session import TARGET_MIN, TARGET_MAX

FONT_FAMILY = "Helvetica"

# Degrees the clock hand turns per elapsed second.
CLOCK_DEGREES_PER_SECOND = 20


class ClockFace(QWidget):
    """Round clock whose single hand turns with elapsed time.

    The hand is the only feedback shown while running; the elapsed number
    itself stays hidden from the player.
    """

    def __init__(self, color, diameter=160, parent=None):
        super().__init__(parent)
        self._color = QColor(color)
        self._angle = 0.0
        self.setFixedSize(QSize(diameter, diameter))

    def set_color(self, color):
        self._color = QColor(color)
        self.update()

    def set_elapsed(self, seconds):
        self._angle = (seconds * CLOCK_DEGREES_PER_SECOND) % 360
        self.update()

    @property
    def angle(self):
        return self._angle

    def paintEvent(self, event):
        p = QPainter(self)
        p.setRenderHint(QPainter.Antialiasing)
        side = min(self.width(), self.height())
        pen_w = max(4, side // 20)
        r = side / 2 - pen_w
        c = QPointF(self.width() / 2, self.height() / 2)

        p.setPen(QPen(self._color, pen_w))
        p.setBrush(Qt.NoBrush)
        p.drawEllipse(c, r, r)

        # 12 o'clock is -90 degrees in Qt's coordinate system
        rad = math.radians(self._angle - 90)
        tip = QPointF(c.x() + math.cos(rad) * r * 0.75, c.y() + math.sin(rad) * r * 0.75)
        p.setPen(QPen(self._color, pen_w, Qt.SolidLine, Qt.RoundCap))
        p.drawLine(c, tip)
        p.setBrush(self._color)
        p.drawEllipse(c, pen_w, pen_w)
        p.end()


def build_header(title, theme):
    """Clock glyph above the title."""
    rc = QWidget()
    lay = QVBoxLayout(rc)
    lay.setSpacing(12)

    glyph = QLabel("⏰")
    glyph.setFont(QFont(FONT_FAMILY, 36))
    glyph.setAlignment(Qt.AlignCenter)
    glyph.setStyleSheet(f"color: {theme['accent']};")
    lay.addWidget(glyph)

    title_lbl = QLabel(title)
    f = QFont(FONT_FAMILY, 26)
    f.setWeight(QFont.Black)
    title_lbl.setFont(f)
    title_lbl.setAlignment(Qt.AlignCenter)
    lay.addWidget(title_lbl)

    return rc, {"glyph": glyph, "title": title_lbl}


def build_target_panel(target_seconds, on_target_changed):
    """Rounded panel with the target readout and the 5-30 s slider."""
    rc = QFrame()
    rc.setObjectName("targetPanel")
    lay = QVBoxLayout(rc)
    lay.setContentsMargins(20, 20, 20, 20)
    lay.setSpacing(16)

    row = QHBoxLayout()
    caption = QLabel()
    caption_font = QFont(FONT_FAMILY, 14)
    caption_font.setWeight(QFont.DemiBold)
    caption.setFont(caption_font)
    row.addWidget(caption)
    row.addStretch()
    value_lbl = QLabel()
    value_font = QFont(FONT_FAMILY, 20)
    value_font.setBold(True)
    value_lbl.setFont(value_font)
    row.addWidget(value_lbl)
    lay.addLayout(row)

    slider = QSlider(Qt.Horizontal)
    slider.setRange(int(TARGET_MIN), int(TARGET_MAX))
    slider.setSingleStep(1)
    slider.setPageStep(1)
    slider.setValue(round(target_seconds))
    slider.valueChanged.connect(lambda v: on_target_changed(float(v)))
    lay.addWidget(slider)

    return rc, {"caption": caption, "value": value_lbl, "slider": slider}


def build_running_view(theme):
    """Clock face plus the 'count in your head' prompt."""
    rc = QWidget()
    lay = QVBoxLayout(rc)
    lay.setContentsMargins(30, 30, 30, 30)
    lay.setSpacing(24)

    clock = ClockFace(theme["accent"])
    lay.addWidget(clock, 0, Qt.AlignHCenter)

    prompt = QLabel()
    prompt.setObjectName("promptLabel")
    prompt_font = QFont(FONT_FAMILY, 18)
    prompt_font.setWeight(QFont.Medium)
    prompt.setFont(prompt_font)
    prompt.setAlignment(Qt.AlignCenter)
    lay.addWidget(prompt)

    return rc, {"clock": clock, "prompt": prompt}


def build_result_view():
    rc = QWidget()
    lay = QVBoxLayout(rc)
    lay.setSpacing(12)

    icon = QLabel()
    icon.setFont(QFont(FONT_FAMILY, 48))
    icon.setAlignment(Qt.AlignCenter)
    lay.addWidget(icon)

    message = QLabel()
    message_font = QFont(FONT_FAMILY, 24)
    message_font.setWeight(QFont.DemiBold)
    message.setFont(message_font)
    message.setAlignment(Qt.AlignCenter)
    message.setWordWrap(True)
    lay.addWidget(message)

    return rc, {"icon": icon, "message": message}


def build_action_button(on_click):
    """Full-width capsule button; MainWindow swaps its text and colour per phase."""
    btn = QPushButton()
    f = QFont(FONT_FAMILY, 16)
    f.setWeight(QFont.DemiBold)
    btn.setFont(f)
    btn.setSizePolicy(QSizePolicy.Expanding, QSizePolicy.Fixed)
    btn.setMinimumHeight(52)
    btn.setFocusPolicy(Qt.NoFocus)
    btn.clicked.connect(lambda _=False: on_click())
    return btn, {"button": btn}
