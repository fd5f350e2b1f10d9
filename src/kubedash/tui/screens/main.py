"""Main screen for kubedash TUI."""

import logging
from collections.abc import Callable

from textual.app import ComposeResult
from textual.containers import Container
from textual.screen import Screen
from textual.widgets import Static

from ...core.models import AppState
from ...utils.config import DashboardConfig
from ..keybindings import DEFAULT_KEYBINDINGS, KeyBindings
from ..layout import CursorPosition
from ..tabs import OverviewTab
from ..widgets import StatusBar

logger = logging.getLogger(__name__)

StateProvider = Callable[[], AppState]


class OverviewScreen(Screen):
    """Re-renders the overview from the latest state snapshot on every tick."""

    def __init__(
        self,
        state_provider: StateProvider,
        config: DashboardConfig | None = None,
        keybindings: KeyBindings = DEFAULT_KEYBINDINGS,
    ):
        super().__init__()
        self.state_provider = state_provider
        self.config = config or DashboardConfig()
        self.keybindings = keybindings
        self.cursor: CursorPosition | None = None
        self.render_count = 0

    def compose(self) -> ComposeResult:
        with Container(id="main-container"):
            yield Static("", id="overview-content")
        yield StatusBar(self.keybindings)

    def on_mount(self) -> None:
        """Draw the first frame and start ticking."""
        self.refresh_overview()
        self.set_interval(self.config.tick_rate, self.refresh_overview)

    def refresh_overview(self) -> None:
        """Render one frame from the current snapshot."""
        state = self.state_provider()
        frame = OverviewTab.render(state, self.keybindings, self.config.layout)
        self.cursor = frame.cursor
        self.query_one("#overview-content", Static).update(frame.renderable)
        self.render_count += 1
