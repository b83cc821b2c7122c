"""Content height for a vertically-unbounded canvas."""

from __future__ import annotations

from collections.abc import Iterable
from typing import Protocol

DEFAULT_BOTTOM_MARGIN_UNITS: float = 5


class PlacedBox(Protocol):
    """Anything with a vertical extent in grid units."""

    @property
    def y(self) -> float: ...

    @property
    def height(self) -> float: ...


def content_height(
    placements: Iterable[PlacedBox],
    bottom_margin: float = DEFAULT_BOTTOM_MARGIN_UNITS,
) -> float:
    """Return lowest bottom edge plus margin, or 0 for an empty canvas."""
    bottoms = [box.y + box.height for box in placements]
    if not bottoms:
        return 0
    return max(0, max(bottoms)) + bottom_margin
