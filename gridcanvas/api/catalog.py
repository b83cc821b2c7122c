"""Public component-catalog API contracts."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Callable, Iterable
from dataclasses import dataclass

from gridcanvas.layout.geometry import GridSize

CatalogListener = Callable[[], None]


@dataclass(frozen=True, slots=True)
class ComponentDefinition:
    """Size preferences for one placeable component type.

    ``min_size`` and ``max_size`` are optional. An absent minimum puts no floor
    on the width and an absent maximum puts no ceiling on it.
    """

    type: str
    default_size: GridSize
    name: str = ""
    min_size: GridSize | None = None
    max_size: GridSize | None = None

    @property
    def display_name(self) -> str:
        return self.name or self.type


@dataclass(frozen=True, slots=True)
class Subscription:
    """Opaque change-listener token."""

    id: int


class ComponentCatalog(ABC):
    """Public contract for registering and looking up component definitions."""

    @abstractmethod
    def register(self, definition: ComponentDefinition) -> None:
        """Register or replace one definition."""

    @abstractmethod
    def register_all(self, definitions: Iterable[ComponentDefinition]) -> None:
        """Register many definitions with a single change notification."""

    @abstractmethod
    def get(self, component_type: str) -> ComponentDefinition | None:
        """Return definition for a type, if registered."""

    @abstractmethod
    def has(self, component_type: str) -> bool:
        """Return whether a type is registered."""

    @abstractmethod
    def types(self) -> tuple[str, ...]:
        """Return registered types in registration order."""

    @abstractmethod
    def definitions(self) -> tuple[ComponentDefinition, ...]:
        """Return registered definitions in registration order."""

    @abstractmethod
    def unregister(self, component_type: str) -> bool:
        """Remove one type and return whether it was present."""

    @abstractmethod
    def clear(self) -> None:
        """Remove every definition."""

    @abstractmethod
    def subscribe(self, listener: CatalogListener) -> Subscription:
        """Subscribe a zero-argument change listener."""

    @abstractmethod
    def unsubscribe(self, subscription: Subscription) -> None:
        """Remove a change listener."""

    @abstractmethod
    def __len__(self) -> int: ...


def create_component_catalog(
    definitions: Iterable[ComponentDefinition] = (),
) -> ComponentCatalog:
    """Create default component-catalog implementation."""
    from gridcanvas.catalog.registry import RuntimeComponentCatalog

    return RuntimeComponentCatalog(definitions)
