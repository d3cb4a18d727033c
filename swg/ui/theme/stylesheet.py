from swg.core.messages import COLOR_ROLES
from .colors import THEMES


def resolve_theme(theme_name):
    return THEMES.get(theme_name, THEMES["Light"])


def severity_color(theme_name, severity):
    """Colour for a result of the given Severity, via its colour role."""
    return resolve_theme(theme_name)[COLOR_ROLES[severity]]


def build_stylesheet(theme_name):
    """Build the window-wide Qt stylesheet for a theme name."""
    t = resolve_theme(theme_name)
    return (
        f"QMainWindow, QDialog, QWidget {{ background-color: {t['bg']}; }}"
        f"QLabel {{ color: {t['text']}; background: transparent; }}"
        f"#targetPanel {{ background-color: {t['panel']}; border: 1px solid {t['panel_border']};"
        f" border-radius: 16px; }}"
        f"#targetPanel QLabel {{ background: transparent; }}"
        f"#promptLabel {{ color: {t['text_muted']}; }}"
        f"QSlider {{ background: transparent; }}"
        f"QSlider::groove:horizontal {{ height: 6px; background: {t['panel_border']}; border-radius: 3px; }}"
        f"QSlider::sub-page:horizontal {{ background: {t['accent']}; border-radius: 3px; }}"
        f"QSlider::handle:horizontal {{ background: {t['panel']}; border: 1px solid {t['panel_border']};"
        f" width: 22px; margin: -9px 0; border-radius: 11px; }}"
        f"QComboBox, QPushButton#gearButton {{ color: {t['text']}; background-color: {t['panel']};"
        f" border: 1px solid {t['panel_border']}; border-radius: 6px; padding: 4px 8px; }}"
        f"QPushButton#gearButton:disabled {{ color: {t['text_muted']}; }}"
    )


def build_action_button_style(theme_name, role):
    """Capsule button style for 'start', 'stop' or 'again'."""
    t = resolve_theme(theme_name)
    return (
        f"QPushButton {{ color: {t['button_text']}; background-color: {t[role]};"
        f" border: none; border-radius: 26px; padding: 14px; }}"
        f"QPushButton:pressed {{ background-color: {t['panel_border']}; }}"
    )
