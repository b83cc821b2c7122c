"""Layout configuration sourced from environment."""

from __future__ import annotations

import math
import os
from dataclasses import dataclass

from gridcanvas.layout.boundary import CANVAS_WIDTH_UNITS
from gridcanvas.layout.canvas_height import DEFAULT_BOTTOM_MARGIN_UNITS


def _float(name: str, default: float) -> float:
    raw = os.getenv(name)
    if raw is None:
        return default
    try:
        value = float(raw)
    except ValueError:
        return default
    if not math.isfinite(value):
        return default
    return value


def _str(name: str, default: str) -> str:
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.strip() or default


@dataclass(frozen=True, slots=True)
class LayoutConfig:
    """Immutable placement configuration."""

    canvas_width: float = CANVAS_WIDTH_UNITS
    bottom_margin: float = DEFAULT_BOTTOM_MARGIN_UNITS


@dataclass(frozen=True, slots=True)
class LogConfig:
    """Immutable logging settings resolved from env vars."""

    level_name: str
    console_format: str
    file_path: str | None


def resolve_log_level_name(default: str = "INFO") -> str:
    """Resolve log level with package-prefixed override."""
    value = os.getenv("GRIDCANVAS_LOG_LEVEL")
    if value is None:
        value = os.getenv("LOG_LEVEL", default)
    return value.strip().upper()


def load_layout_config() -> LayoutConfig:
    """Load immutable layout configuration from env vars."""
    canvas_width = _float("GRIDCANVAS_CANVAS_WIDTH", CANVAS_WIDTH_UNITS)
    if canvas_width <= 0:
        canvas_width = CANVAS_WIDTH_UNITS
    return LayoutConfig(
        canvas_width=canvas_width,
        bottom_margin=max(0.0, _float("GRIDCANVAS_BOTTOM_MARGIN", DEFAULT_BOTTOM_MARGIN_UNITS)),
    )


def load_log_config() -> LogConfig:
    console_format = _str("GRIDCANVAS_LOG_FORMAT", "text").lower()
    if console_format not in {"text", "json"}:
        console_format = "text"
    file_path = os.getenv("GRIDCANVAS_LOG_FILE", "").strip()
    return LogConfig(
        level_name=resolve_log_level_name(),
        console_format=console_format,
        file_path=file_path or None,
    )
