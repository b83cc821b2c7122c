"""Public gridcanvas API contracts."""

from gridcanvas.api.catalog import (
    CatalogListener,
    ComponentCatalog,
    ComponentDefinition,
    Subscription,
    create_component_catalog,
)
from gridcanvas.api.element_cache import (
    Element,
    ElementCache,
    ElementLookup,
    create_element_cache,
)

__all__ = [
    "CatalogListener",
    "ComponentCatalog",
    "ComponentDefinition",
    "Element",
    "ElementCache",
    "ElementLookup",
    "Subscription",
    "create_component_catalog",
    "create_element_cache",
]
