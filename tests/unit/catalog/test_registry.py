from __future__ import annotations

import pytest

from gridcanvas.api.catalog import ComponentDefinition, create_component_catalog
from gridcanvas.catalog import ComponentRegistry
from gridcanvas.layout.geometry import GridSize


def _definition(component_type: str, width: float = 20) -> ComponentDefinition:
    return ComponentDefinition(type=component_type, default_size=GridSize(width, 10))


def test_register_get_and_replace() -> None:
    catalog = ComponentRegistry()
    catalog.register(_definition("header"))
    catalog.register(_definition("header", width=30))

    definition = catalog.get("header")
    assert definition is not None
    assert definition.default_size.width == 30
    assert catalog.has("header")
    assert not catalog.has("footer")
    assert catalog.get("footer") is None
    assert len(catalog) == 1


def test_initial_definitions_keep_registration_order() -> None:
    catalog = create_component_catalog([_definition("b"), _definition("a"), _definition("c")])
    assert catalog.types() == ("b", "a", "c")
    assert [d.type for d in catalog.definitions()] == ["b", "a", "c"]


@pytest.mark.parametrize("bad_type", ["", "   "])
def test_register_rejects_blank_type(bad_type: str) -> None:
    catalog = ComponentRegistry()
    with pytest.raises(ValueError):
        catalog.register(_definition(bad_type))
    with pytest.raises(ValueError):
        ComponentRegistry([_definition(bad_type)])


def test_register_all_notifies_once_and_is_atomic_on_bad_entry() -> None:
    catalog = ComponentRegistry()
    calls: list[str] = []
    catalog.subscribe(lambda: calls.append("changed"))

    catalog.register_all([_definition("a"), _definition("b")])
    assert calls == ["changed"]
    assert catalog.types() == ("a", "b")

    with pytest.raises(ValueError):
        catalog.register_all([_definition("c"), _definition("")])
    assert not catalog.has("c")
    assert calls == ["changed"]


def test_unregister_and_clear_only_notify_on_change() -> None:
    catalog = ComponentRegistry([_definition("a")])
    calls: list[str] = []
    catalog.subscribe(lambda: calls.append("changed"))

    assert catalog.unregister("missing") is False
    assert calls == []
    assert catalog.unregister("a") is True
    assert calls == ["changed"]

    catalog.clear()
    assert calls == ["changed"]
    catalog.register(_definition("b"))
    catalog.clear()
    assert calls == ["changed", "changed", "changed"]
    assert len(catalog) == 0


def test_unsubscribe_stops_notifications() -> None:
    catalog = ComponentRegistry()
    calls: list[int] = []
    first = catalog.subscribe(lambda: calls.append(1))
    catalog.subscribe(lambda: calls.append(2))

    catalog.register(_definition("a"))
    catalog.unsubscribe(first)
    catalog.unsubscribe(first)
    catalog.register(_definition("b"))

    assert calls == [1, 2, 2]


def test_display_name_falls_back_to_type() -> None:
    assert _definition("hero").display_name == "hero"
    named = ComponentDefinition(type="hero", name="Hero Banner", default_size=GridSize(50, 8))
    assert named.display_name == "Hero Banner"
