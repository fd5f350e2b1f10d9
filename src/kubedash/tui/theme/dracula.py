"""Dracula theme for the TUI.

Uses the Dracula color palette: https://draculatheme.com/
"""

from __future__ import annotations

from enum import Enum

from textual.theme import Theme


class Colors(str, Enum):
    """Kubedash color palette for the dark (Dracula) theme."""

    # Core colors
    BACKGROUND = "#000000"
    FOREGROUND = "#f8f8f2"
    SURFACE = "#44475a"  # Borders, elevated surfaces
    MUTED = "#6272a4"  # Dim text, hints

    # Semantic accent colors
    PRIMARY = "#8be9fd"  # Table rows, gauge fill (Dracula cyan)
    SECONDARY = "#f1fa8c"  # Focused borders, selected rows (Dracula yellow)
    ACCENT = "#bd93f9"  # Tabs (Dracula purple)

    # Status colors
    SUCCESS = "#50fa7b"
    WARNING = "#ffb86c"
    ERROR = "#ff5555"

    # Banner
    LOGO = "#50fa7b"


class LightColors(str, Enum):
    """Palette used when the terminal has a light background."""

    FOREGROUND = "#282a36"
    MUTED = "#6c6f93"
    PRIMARY = "#0366d6"
    SECONDARY = "#a3219f"
    ACCENT = "#6f42c1"
    ERROR = "#d73a49"
    LOGO = "#22863a"


# Textual Theme
THEME = Theme(
    name="kubedash-dracula",
    dark=True,
    primary=Colors.ACCENT.value,
    secondary=Colors.SECONDARY.value,
    accent=Colors.PRIMARY.value,
    foreground=Colors.FOREGROUND.value,
    background=Colors.BACKGROUND.value,
    surface=Colors.BACKGROUND.value,
    panel=Colors.SURFACE.value,
    success=Colors.SUCCESS.value,
    warning=Colors.WARNING.value,
    error=Colors.ERROR.value,
    variables={
        "muted": Colors.MUTED.value,
    },
)
