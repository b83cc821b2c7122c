"""Runtime services around the boundary-constraint core."""

from gridcanvas.runtime.config import LayoutConfig, load_layout_config
from gridcanvas.runtime.element_cache import RuntimeElementCache
from gridcanvas.runtime.logging import (
    LoggingConfig,
    configure_logging,
    setup_logging,
    shutdown_logging,
)
from gridcanvas.runtime.placement import PlacementService, UnknownComponentError

__all__ = [
    "LayoutConfig",
    "LoggingConfig",
    "PlacementService",
    "RuntimeElementCache",
    "UnknownComponentError",
    "configure_logging",
    "load_layout_config",
    "setup_logging",
    "shutdown_logging",
]
