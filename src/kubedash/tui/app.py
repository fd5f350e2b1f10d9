"""Main TUI application."""

from textual.app import App

from ..core.models import AppState
from ..utils.config import DashboardConfig
from .keybindings import DEFAULT_KEYBINDINGS, KeyBindings
from .screens import OverviewScreen, StateProvider
from .theme import THEME


class KubedashApp(App):
    """kubedash TUI application."""

    CSS = """
    /* Hide scrollbars globally */
    * {
        scrollbar-size: 0 0;
    }

    /* Main container */
    #main-container {
        height: 1fr;
        width: 100%;
    }

    /* Overview content */
    #overview-content {
        height: 1fr;
        width: 100%;
        background: $surface;
        color: $text;
    }

    /* Status bar */
    #status-bar {
        height: 1;
        background: $surface;
        dock: bottom;
    }

    .key-binding {
        width: auto;
        margin: 0 1;
        color: $text-muted;
    }

    .key-binding:first-child {
        margin-left: 2;
    }
    """

    BINDINGS = DEFAULT_KEYBINDINGS.textual_bindings()

    def __init__(
        self,
        state_provider: StateProvider | None = None,
        config: DashboardConfig | None = None,
        keybindings: KeyBindings = DEFAULT_KEYBINDINGS,
    ):
        super().__init__()
        self.config = config or DashboardConfig()
        self.keybindings = keybindings
        self.state_provider = state_provider or self._empty_state

    def _empty_state(self) -> AppState:
        return AppState(
            is_loading=True,
            enhanced_graphics=self.config.enhanced_graphics,
            light_theme=self.config.light_theme,
        )

    def on_mount(self) -> None:
        """Set up the application."""
        self.title = "kubedash"
        self.register_theme(THEME)
        self.theme = THEME.name
        self.push_screen(OverviewScreen(self.state_provider, self.config, self.keybindings))


def run(state_provider: StateProvider | None = None, config: DashboardConfig | None = None) -> None:
    """Run the TUI application."""
    app = KubedashApp(state_provider, config)
    # Disable mouse support to allow terminal text selection
    app.run(mouse=False)
