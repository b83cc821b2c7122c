"""Boundary-constraint resolution for components on a fixed-width grid canvas."""

from gridcanvas.api.catalog import ComponentDefinition, create_component_catalog
from gridcanvas.api.element_cache import create_element_cache
from gridcanvas.layout.boundary import (
    CANVAS_WIDTH_UNITS,
    PositionResult,
    ResolvedPlacement,
    ResolvedSize,
    apply_boundary_constraints,
    can_fit,
    definition_fits,
    resolve_position,
    resolve_size,
)
from gridcanvas.layout.canvas_height import content_height
from gridcanvas.layout.geometry import GridRect, GridSize

__all__ = [
    "CANVAS_WIDTH_UNITS",
    "ComponentDefinition",
    "GridRect",
    "GridSize",
    "PositionResult",
    "ResolvedPlacement",
    "ResolvedSize",
    "apply_boundary_constraints",
    "can_fit",
    "content_height",
    "create_component_catalog",
    "create_element_cache",
    "definition_fits",
    "resolve_position",
    "resolve_size",
]
