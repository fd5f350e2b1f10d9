"""Single-line gauge renderable."""

from rich.console import Console, ConsoleOptions, RenderResult
from rich.measure import Measurement
from rich.style import Style
from rich.text import Text

NORMAL_LINE = "─"
THICK_LINE = "━"


def get_gauge_line(enhanced_graphics: bool) -> str:
    """Thick lines need a font with good box-drawing support."""
    return THICK_LINE if enhanced_graphics else NORMAL_LINE


class LineGauge:
    """A titled gauge drawn as ``<label> ━━━━────`` across the available width."""

    def __init__(
        self,
        ratio: float,
        label: str,
        title: str = "",
        gauge_style: Style | str = "",
        unfilled_style: Style | str = "dim",
        line: str = NORMAL_LINE,
    ) -> None:
        if not 0.0 <= ratio <= 1.0:
            raise ValueError(f"Gauge ratio must be between 0 and 1, got {ratio}")
        self.ratio = ratio
        self.label = label
        self.title = title
        self.gauge_style = gauge_style
        self.unfilled_style = unfilled_style
        self.line = line

    def __rich_console__(self, console: Console, options: ConsoleOptions) -> RenderResult:
        width = options.max_width
        if self.title:
            yield Text(self.title, no_wrap=True, overflow="crop")

        bar_width = max(0, width - len(self.label) - 1)
        filled = int(bar_width * self.ratio)

        gauge = Text(no_wrap=True, overflow="crop")
        gauge.append(self.label)
        gauge.append(" ")
        gauge.append(self.line * filled, style=self.gauge_style)
        gauge.append(self.line * (bar_width - filled), style=self.unfilled_style)
        yield gauge

    def __rich_measure__(self, console: Console, options: ConsoleOptions) -> Measurement:
        return Measurement(len(self.label) + 1, options.max_width)
