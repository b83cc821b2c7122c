"""Component catalog keyed by component type."""

from __future__ import annotations

from collections.abc import Iterable

from gridcanvas.api.catalog import (
    CatalogListener,
    ComponentCatalog,
    ComponentDefinition,
    Subscription,
)


def _require_type(definition: ComponentDefinition) -> str:
    component_type = definition.type
    if not isinstance(component_type, str) or not component_type.strip():
        raise ValueError("component definition must have a non-empty type")
    return component_type


class RuntimeComponentCatalog(ComponentCatalog):
    """In-memory catalog that notifies listeners when its contents change."""

    def __init__(self, definitions: Iterable[ComponentDefinition] = ()) -> None:
        self._definitions: dict[str, ComponentDefinition] = {}
        self._listeners: dict[int, CatalogListener] = {}
        self._next_id = 1
        for definition in definitions:
            self._definitions[_require_type(definition)] = definition

    def register(self, definition: ComponentDefinition) -> None:
        """Register or replace one definition."""
        self._definitions[_require_type(definition)] = definition
        self._notify()

    def register_all(self, definitions: Iterable[ComponentDefinition]) -> None:
        """Register many definitions with a single change notification."""
        staged = [(_require_type(definition), definition) for definition in definitions]
        for component_type, definition in staged:
            self._definitions[component_type] = definition
        self._notify()

    def get(self, component_type: str) -> ComponentDefinition | None:
        return self._definitions.get(component_type)

    def has(self, component_type: str) -> bool:
        return component_type in self._definitions

    def types(self) -> tuple[str, ...]:
        return tuple(self._definitions)

    def definitions(self) -> tuple[ComponentDefinition, ...]:
        return tuple(self._definitions.values())

    def unregister(self, component_type: str) -> bool:
        """Remove one type; listeners only hear about actual removals."""
        if self._definitions.pop(component_type, None) is None:
            return False
        self._notify()
        return True

    def clear(self) -> None:
        if not self._definitions:
            return
        self._definitions.clear()
        self._notify()

    def subscribe(self, listener: CatalogListener) -> Subscription:
        sub_id = self._next_id
        self._next_id += 1
        self._listeners[sub_id] = listener
        return Subscription(sub_id)

    def unsubscribe(self, subscription: Subscription) -> None:
        self._listeners.pop(subscription.id, None)

    def __len__(self) -> int:
        return len(self._definitions)

    def _notify(self) -> None:
        for listener in tuple(self._listeners.values()):
            listener()


ComponentRegistry = RuntimeComponentCatalog
