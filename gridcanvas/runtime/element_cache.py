"""Memoized canvas element lookups."""

from __future__ import annotations

from gridcanvas.api.element_cache import Element, ElementLookup


class RuntimeElementCache:
    """Caches elements returned by a lookup callable; misses are not cached."""

    def __init__(self, lookup: ElementLookup) -> None:
        self._lookup = lookup
        self._elements: dict[str, Element] = {}

    def get(self, element_id: str) -> Element | None:
        cached = self._elements.get(element_id)
        if cached is not None:
            return cached
        element = self._lookup(element_id)
        if element is not None:
            self._elements[element_id] = element
        return element

    def invalidate(self, element_id: str) -> None:
        self._elements.pop(element_id, None)

    def clear(self) -> None:
        self._elements.clear()

    def __contains__(self, element_id: object) -> bool:
        return element_id in self._elements

    def __len__(self) -> int:
        return len(self._elements)


ElementCache = RuntimeElementCache
