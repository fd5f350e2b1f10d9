"""Theme package for kubedash TUI."""

from kubedash.tui.theme.dracula import THEME, Colors, LightColors
from kubedash.tui.theme.styles import SemanticStyle, get_style

__all__ = [
    "THEME",
    "Colors",
    "LightColors",
    "SemanticStyle",
    "get_style",
]
