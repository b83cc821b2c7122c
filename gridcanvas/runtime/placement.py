"""Catalog-backed placement of components on a grid canvas."""

from __future__ import annotations

import logging
from collections.abc import Iterable

from gridcanvas.api.catalog import ComponentCatalog, ComponentDefinition
from gridcanvas.layout.boundary import (
    ResolvedPlacement,
    apply_boundary_constraints,
    definition_fits,
)
from gridcanvas.layout.canvas_height import PlacedBox, content_height
from gridcanvas.runtime.config import LayoutConfig, load_layout_config

logger = logging.getLogger(__name__)


class UnknownComponentError(KeyError):
    """Raised when placing a component type the catalog does not know."""


class PlacementService:
    """Resolves drops by component type against one canvas width."""

    def __init__(
        self,
        catalog: ComponentCatalog,
        config: LayoutConfig | None = None,
    ) -> None:
        self._catalog = catalog
        self._config = config if config is not None else load_layout_config()

    @property
    def canvas_width(self) -> float:
        return self._config.canvas_width

    def definition(self, component_type: str) -> ComponentDefinition:
        definition = self._catalog.get(component_type)
        if definition is None:
            raise UnknownComponentError(component_type)
        return definition

    def can_place(self, component_type: str) -> bool:
        """Return whether the type can be placed anywhere on this canvas."""
        return definition_fits(self.definition(component_type), self.canvas_width)

    def place(self, component_type: str, x: float, y: float) -> ResolvedPlacement | None:
        """Resolve a proposed anchor; None means the component must not be rendered."""
        placement = apply_boundary_constraints(
            self.definition(component_type), x, y, self.canvas_width
        )
        if placement is not None and (placement.position_adjusted or placement.size_adjusted):
            logger.debug(
                "placement_adjusted component=%s requested=(%s,%s) resolved=(%s,%s,%s,%s)",
                component_type,
                x,
                y,
                placement.x,
                placement.y,
                placement.width,
                placement.height,
                extra={
                    "component_type": component_type,
                    "position_adjusted": placement.position_adjusted,
                    "size_adjusted": placement.size_adjusted,
                },
            )
        return placement

    def canvas_height(self, placements: Iterable[PlacedBox]) -> float:
        return content_height(placements, self._config.bottom_margin)
