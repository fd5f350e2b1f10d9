"""Semantic styles shared by the overview panels."""

from enum import Enum

from rich.style import Style

from kubedash.tui.theme.dracula import Colors, LightColors


class SemanticStyle(Enum):
    """The fixed set of looks a panel element can take."""

    DEFAULT = "default"
    PRIMARY = "primary"
    SECONDARY = "secondary"
    FAILURE = "failure"
    LOGO = "logo"
    HEADER = "header"
    HIGHLIGHT = "highlight"


def get_style(semantic: SemanticStyle, light_theme: bool = False) -> Style:
    """Resolve a semantic style to a Rich style for the current palette."""
    palette = LightColors if light_theme else Colors

    if semantic is SemanticStyle.DEFAULT:
        return Style(color=palette.FOREGROUND.value)
    if semantic is SemanticStyle.PRIMARY:
        return Style(color=palette.PRIMARY.value)
    if semantic is SemanticStyle.SECONDARY:
        return Style(color=palette.SECONDARY.value)
    if semantic is SemanticStyle.FAILURE:
        return Style(color=palette.ERROR.value)
    if semantic is SemanticStyle.LOGO:
        return Style(color=palette.LOGO.value)
    if semantic is SemanticStyle.HEADER:
        return Style(color=palette.FOREGROUND.value, bold=True, underline=True)
    return Style(reverse=True, bold=True)
