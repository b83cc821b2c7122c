"""Public element-cache API contracts."""

from __future__ import annotations

from collections.abc import Callable
from typing import Protocol


class Element(Protocol):
    """Opaque canvas element boundary contract."""


ElementLookup = Callable[[str], Element | None]


class ElementCache(Protocol):
    """Keyed memoization of canvas element lookups."""

    def get(self, element_id: str) -> Element | None:
        """Return cached element, looking it up on first access."""

    def invalidate(self, element_id: str) -> None:
        """Forget one cached element."""

    def clear(self) -> None:
        """Forget every cached element."""


def create_element_cache(lookup: ElementLookup) -> ElementCache:
    """Create default element-cache implementation."""
    from gridcanvas.runtime.element_cache import RuntimeElementCache

    return RuntimeElementCache(lookup)
