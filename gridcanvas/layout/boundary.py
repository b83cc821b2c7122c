"""Boundary constraints for placing components on a fixed-width grid canvas.

The canvas has a fixed horizontal extent and grows downward without limit, so
only the x axis is clamped on the right. Size is resolved before position
because the right-edge correction depends on the resolved width.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass

from gridcanvas.api.catalog import ComponentDefinition
from gridcanvas.layout.geometry import GridSize

logger = logging.getLogger(__name__)

CANVAS_WIDTH_UNITS: float = 50


@dataclass(frozen=True, slots=True)
class ResolvedSize:
    """Component size after canvas and min/max clamping."""

    width: float
    height: float
    was_adjusted: bool


@dataclass(frozen=True, slots=True)
class PositionResult:
    """Component bounding box after edge clamping."""

    x: float
    y: float
    width: float
    height: float
    position_adjusted: bool


@dataclass(frozen=True, slots=True)
class ResolvedPlacement:
    """Final bounding box for a placeable component."""

    x: float
    y: float
    width: float
    height: float
    position_adjusted: bool
    size_adjusted: bool


def _min_width(min_size: GridSize | None) -> float:
    return 0 if min_size is None else min_size.width


def _max_width(max_size: GridSize | None) -> float:
    return math.inf if max_size is None else max_size.width


def can_fit(min_width: float, canvas_width: float) -> bool:
    """Return whether a minimum width fits the canvas (exact fit counts)."""
    return min_width <= canvas_width


def definition_fits(
    definition: ComponentDefinition,
    canvas_width: float = CANVAS_WIDTH_UNITS,
) -> bool:
    """Return whether a definition's minimum width fits the canvas."""
    return can_fit(_min_width(definition.min_size), canvas_width)


def resolve_size(
    default_size: GridSize,
    min_size: GridSize | None,
    max_size: GridSize | None,
    canvas_width: float,
) -> ResolvedSize:
    """Clamp the default width to the canvas and to min/max.

    The canvas and the maximum both lower the width before the minimum raises
    it, so an explicit minimum wins over both. Height is never changed.
    """
    width = min(default_size.width, canvas_width)
    width = min(width, _max_width(max_size))
    width = max(width, _min_width(min_size))
    return ResolvedSize(
        width=width,
        height=default_size.height,
        was_adjusted=width != default_size.width,
    )


def resolve_position(
    x: float,
    y: float,
    width: float,
    height: float,
    canvas_width: float,
) -> PositionResult:
    """Clamp a proposed anchor so the box stays within [0, canvas_width] horizontally.

    The left edge is corrected before the right edge. A box wider than the
    canvas therefore ends at a negative x; callers reject those beforehand.
    """
    new_x = x
    if new_x < 0:
        new_x = 0
    if new_x + width > canvas_width:
        new_x = canvas_width - width
    new_y = y if y >= 0 else 0
    return PositionResult(
        x=new_x,
        y=new_y,
        width=width,
        height=height,
        position_adjusted=new_x != x or new_y != y,
    )


def apply_boundary_constraints(
    definition: ComponentDefinition,
    x: float,
    y: float,
    canvas_width: float = CANVAS_WIDTH_UNITS,
) -> ResolvedPlacement | None:
    """Resolve size then position for a drop, or return None when it can never fit."""
    if not definition_fits(definition, canvas_width):
        logger.warning(
            "placement_rejected component=%s min_width=%s canvas_width=%s",
            definition.display_name,
            _min_width(definition.min_size),
            canvas_width,
            extra={
                "component_type": definition.type,
                "min_width": _min_width(definition.min_size),
                "canvas_width": canvas_width,
            },
        )
        return None
    size = resolve_size(
        definition.default_size,
        definition.min_size,
        definition.max_size,
        canvas_width,
    )
    position = resolve_position(x, y, size.width, size.height, canvas_width)
    return ResolvedPlacement(
        x=position.x,
        y=position.y,
        width=position.width,
        height=position.height,
        position_adjusted=position.position_adjusted,
        size_adjusted=size.was_adjusted,
    )
