"""Grid-unit geometry primitives."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class GridSize:
    """Width/height pair in grid units."""

    width: float
    height: float


@dataclass(frozen=True, slots=True)
class GridRect:
    """Axis-aligned rectangle placed on a canvas."""

    x: float
    y: float
    width: float
    height: float

    @property
    def right(self) -> float:
        return self.x + self.width

    @property
    def bottom(self) -> float:
        return self.y + self.height
