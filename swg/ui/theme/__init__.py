"""Theme system: colors and stylesheet generation."""
from .colors import THEMES
from .stylesheet import resolve_theme, severity_color, build_stylesheet, build_action_button_style

__all__ = ["THEMES", "resolve_theme", "severity_color", "build_stylesheet", "build_action_button_style"]
