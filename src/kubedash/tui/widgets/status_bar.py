"""Status bar widget."""

from collections.abc import Iterator

from textual.containers import Horizontal
from textual.widgets import Static

from kubedash.tui.keybindings import DEFAULT_KEYBINDINGS, KeyBindings


class StatusBar(Horizontal):
    """Bottom status bar with key binding hints."""

    def __init__(self, keybindings: KeyBindings = DEFAULT_KEYBINDINGS) -> None:
        super().__init__(id="status-bar")
        self.keybindings = keybindings

    def compose(self) -> Iterator[Static]:
        for binding in self.keybindings.hints():
            yield Static(f"{binding.key}:{binding.description.lower()}", classes="key-binding")
