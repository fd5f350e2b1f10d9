"""Banner panel."""

from rich.console import RenderableType
from rich.text import Text

from kubedash._version import __version__
from kubedash.core.models import AppState
from kubedash.tui.theme import SemanticStyle, get_style
from kubedash.tui.widgets import Block

BANNER = """\
╻┏ ╻ ╻┏┓ ┏━╸╺┳┓┏━┓┏━┓╻ ╻
┣┻┓┃ ┃┣┻┓┣╸  ┃┃┣━┫┗━┓┣━┫
╹ ╹┗━┛┗━┛┗━╸╺┻┛╹ ╹┗━┛╹ ╹"""


def loading_indicator(is_loading: bool) -> str:
    return "..." if is_loading else ""


class LogoPanel:
    """Static banner with the version and a loading hint."""

    @staticmethod
    def text(state: AppState) -> Text:
        text = Text(f"{BANNER}\n v{__version__} with ♥ in Python {loading_indicator(state.is_loading)}")
        text.stylize(get_style(SemanticStyle.LOGO, state.light_theme))
        return text

    @staticmethod
    def render(state: AppState) -> RenderableType:
        return Block().wrap(LogoPanel.text(state))
