"""Component catalog primitives."""

from gridcanvas.api.catalog import ComponentDefinition
from gridcanvas.catalog.registry import RuntimeComponentCatalog as ComponentRegistry

__all__ = ["ComponentDefinition", "ComponentRegistry"]
