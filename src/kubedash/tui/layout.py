"""Region planning for the overview screen.

A plan is a list of regions with either a fixed size or a minimum size. Plans
are turned into Rich layouts, which resolve the actual cell sizes at render time.
"""

import logging
from dataclasses import dataclass

from rich.layout import Layout

from kubedash.core.models import UiToggles
from kubedash.utils.config import LayoutConfig

logger = logging.getLogger(__name__)

STATUS = "status"
FILTER = "filter"
RESOURCE_TABS = "resource_tabs"

NAMESPACES = "namespaces"
CONTEXT_INFO = "context_info"
CLI_INFO = "cli_info"
LOGO = "logo"


@dataclass(frozen=True)
class Region:
    """One slot of a plan: fixed ``size`` cells, or flexible with ``minimum_size``."""

    name: str
    size: int | None = None
    minimum_size: int = 1

    @property
    def is_fixed(self) -> bool:
        return self.size is not None


@dataclass(frozen=True)
class CursorPosition:
    """Terminal cursor cell, relative to some region's top-left corner."""

    x: int
    y: int

    def offset(self, dx: int = 0, dy: int = 0) -> "CursorPosition":
        return CursorPosition(self.x + dx, self.y + dy)


def plan_overview(toggles: UiToggles, config: LayoutConfig) -> list[Region]:
    """Vertical plan: status bar, filter bar, then the resource tabs taking the rest."""
    regions: list[Region] = []
    if toggles.show_info_bar:
        regions.append(Region(STATUS, size=config.status_bar_height))
    if toggles.show_filter:
        regions.append(Region(FILTER, size=config.filter_bar_height))
    regions.append(Region(RESOURCE_TABS, minimum_size=config.resource_tabs_min_height))
    logger.debug("Overview plan: %s", [r.name for r in regions])
    return regions


def plan_status(config: LayoutConfig) -> list[Region]:
    """Horizontal plan of the status bar, left to right."""
    return [
        Region(NAMESPACES, size=config.namespaces_width),
        Region(CONTEXT_INFO, minimum_size=config.context_min_width),
        Region(CLI_INFO, size=config.cli_width),
        Region(LOGO, size=config.logo_width),
    ]


def region_offset(regions: list[Region], name: str) -> int:
    """Cells before region ``name`` along the split axis.

    Only fixed regions may precede it; flexible regions always come last in a plan.
    """
    offset = 0
    for region in regions:
        if region.name == name:
            return offset
        if region.size is None:
            raise ValueError(f"Region {name!r} follows flexible region {region.name!r}")
        offset += region.size
    raise KeyError(name)


def to_layout(region: Region) -> Layout:
    return Layout(name=region.name, size=region.size, minimum_size=region.minimum_size)


def vertical_layout(regions: list[Region], layout: Layout | None = None) -> Layout:
    """Split ``layout`` (or a new root layout) top to bottom."""
    layout = layout if layout is not None else Layout(name="root")
    layout.split_column(*(to_layout(r) for r in regions))
    return layout


def horizontal_layout(regions: list[Region], layout: Layout | None = None) -> Layout:
    """Split ``layout`` (or a new root layout) left to right."""
    layout = layout if layout is not None else Layout(name="root")
    layout.split_row(*(to_layout(r) for r in regions))
    return layout
