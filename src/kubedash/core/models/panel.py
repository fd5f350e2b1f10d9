"""Populated/empty state of a list-backed panel."""

from collections.abc import Sequence
from dataclasses import dataclass
from typing import Generic, TypeVar

T = TypeVar("T")


@dataclass(frozen=True)
class Populated(Generic[T]):
    """Panel has rows to draw."""

    items: tuple[T, ...]


@dataclass(frozen=True)
class Empty:
    """Panel has nothing to draw and shows a placeholder instead."""

    is_loading: bool = False


PanelState = Populated[T] | Empty


def resolve_panel_state(items: Sequence[T], is_loading: bool) -> "PanelState[T]":
    """Decide once per render whether a panel draws a table or a placeholder.

    Only emptiness of ``items`` decides; ``is_loading`` picks the placeholder variant.
    """
    if items:
        return Populated(tuple(items))
    return Empty(is_loading=is_loading)
