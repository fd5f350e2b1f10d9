"""Key binding labels.

The table is an immutable value built once; renderers that show key hints
receive it explicitly.
"""

from dataclasses import dataclass, field

from textual.binding import Binding


@dataclass(frozen=True)
class KeyBinding:
    """A single key with its help text."""

    key: str
    description: str
    action: str | None = None


@dataclass(frozen=True)
class KeyBindings:
    """Key bindings shown in panel titles and the hint bar."""

    quit: KeyBinding = field(default_factory=lambda: KeyBinding("q", "Quit", action="quit"))
    refresh: KeyBinding = field(default_factory=lambda: KeyBinding("r", "Refresh"))
    help: KeyBinding = field(default_factory=lambda: KeyBinding("?", "Help"))
    toggle_info: KeyBinding = field(default_factory=lambda: KeyBinding("i", "Toggle info panel"))
    jump_to_namespace: KeyBinding = field(default_factory=lambda: KeyBinding("n", "Select namespace block"))
    select_all_namespace: KeyBinding = field(default_factory=lambda: KeyBinding("a", "Select all namespaces"))
    jump_to_filter: KeyBinding = field(default_factory=lambda: KeyBinding("/", "Jump to filter"))
    toggle_filter: KeyBinding = field(default_factory=lambda: KeyBinding("f", "Toggle filter"))

    def hints(self) -> list[KeyBinding]:
        """Bindings listed in the hint bar, in display order."""
        return [
            self.quit,
            self.refresh,
            self.toggle_info,
            self.jump_to_namespace,
            self.jump_to_filter,
            self.toggle_filter,
            self.help,
        ]

    def textual_bindings(self) -> list[Binding]:
        """Textual bindings for keys the host application acts on."""
        return [
            Binding(binding.key, binding.action, binding.description)
            for binding in self.hints()
            if binding.action is not None
        ]


DEFAULT_KEYBINDINGS = KeyBindings()
