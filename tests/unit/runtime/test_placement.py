from __future__ import annotations

import logging

import pytest

from gridcanvas.api.catalog import ComponentDefinition, create_component_catalog
from gridcanvas.layout.geometry import GridRect, GridSize
from gridcanvas.runtime.config import LayoutConfig
from gridcanvas.runtime.placement import PlacementService, UnknownComponentError


@pytest.fixture
def catalog():
    return create_component_catalog(
        [
            ComponentDefinition(type="button", name="Button", default_size=GridSize(10, 3)),
            ComponentDefinition(
                type="banner",
                name="Banner",
                default_size=GridSize(60, 10),
                min_size=GridSize(20, 5),
            ),
            ComponentDefinition(
                type="table",
                name="Table",
                default_size=GridSize(40, 20),
                min_size=GridSize(35, 10),
            ),
        ]
    )


def test_place_uses_configured_canvas_width(catalog) -> None:
    service = PlacementService(catalog, LayoutConfig(canvas_width=30))
    placement = service.place("banner", 12, 4)
    assert placement is not None
    assert (placement.x, placement.y, placement.width, placement.height) == (0, 4, 30, 10)
    assert placement.size_adjusted is True
    assert placement.position_adjusted is True


def test_place_returns_none_when_minimum_exceeds_canvas(catalog) -> None:
    service = PlacementService(catalog, LayoutConfig(canvas_width=30))
    assert service.can_place("table") is False
    assert service.place("table", 0, 0) is None
    assert service.can_place("button") is True


def test_place_unknown_type_raises(catalog) -> None:
    service = PlacementService(catalog, LayoutConfig())
    with pytest.raises(UnknownComponentError):
        service.place("carousel", 0, 0)
    with pytest.raises(KeyError):
        service.can_place("carousel")


def test_service_loads_env_config_by_default(monkeypatch, catalog) -> None:
    monkeypatch.setenv("GRIDCANVAS_CANVAS_WIDTH", "12")
    service = PlacementService(catalog)
    assert service.canvas_width == 12
    placement = service.place("button", 8, 0)
    assert placement is not None
    assert placement.x == 2


def test_place_logs_adjustments_at_debug(caplog, catalog) -> None:
    service = PlacementService(catalog, LayoutConfig())
    with caplog.at_level(logging.DEBUG, logger="gridcanvas.runtime.placement"):
        service.place("button", 0, 0)
        assert caplog.records == []
        service.place("button", 45, 0)
    assert len(caplog.records) == 1
    assert caplog.records[0].component_type == "button"


def test_canvas_height_uses_configured_margin(catalog) -> None:
    service = PlacementService(catalog, LayoutConfig(bottom_margin=1))
    assert service.canvas_height([]) == 0
    assert service.canvas_height([GridRect(0, 4, 10, 3), GridRect(0, 0, 10, 2)]) == 8
