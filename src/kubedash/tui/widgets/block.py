"""Bordered block that panels draw into."""

from dataclasses import dataclass, replace

from rich import box
from rich.console import RenderableType
from rich.panel import Panel
from rich.style import Style
from rich.text import Text


@dataclass(frozen=True)
class Block:
    """Title and border style of a panel, applied when the content is known."""

    title: str = ""
    border_style: Style | str = "none"

    def with_border_style(self, style: Style | str) -> "Block":
        return replace(self, border_style=style)

    def wrap(self, renderable: RenderableType, style: Style | str = "none") -> Panel:
        """Put ``renderable`` inside the block's borders."""
        return Panel(
            renderable,
            title=Text(self.title.strip()) if self.title.strip() else None,
            title_align="left",
            border_style=self.border_style,
            style=style,
            box=box.ROUNDED,
            padding=(0, 1),
            expand=True,
        )


def layout_block_default(title: str) -> Block:
    """Block with the default (unfocused) border."""
    return Block(title=title)
