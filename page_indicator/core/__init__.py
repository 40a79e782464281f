"""Core windowing logic and value types.

Platform-agnostic: nothing in this package knows how dots are drawn or
animated.
"""

from page_indicator.core.colors import DEFAULT_DOT_COLOR, DEFAULT_SELECTED_COLOR, Color
from page_indicator.core.config import IndicatorConfigError, IndicatorSettings
from page_indicator.core.geometry import (
    FALLOFF_SCALES,
    DotPlacement,
    DotSlot,
    LayoutTransition,
    Point,
    Size,
)
from page_indicator.core.logging import configure_logging, get_logger
from page_indicator.core.window import WindowController

__all__ = [
    # Colors
    "Color",
    "DEFAULT_DOT_COLOR",
    "DEFAULT_SELECTED_COLOR",
    # Configuration
    "IndicatorConfigError",
    "IndicatorSettings",
    # Geometry
    "FALLOFF_SCALES",
    "DotPlacement",
    "DotSlot",
    "LayoutTransition",
    "Point",
    "Size",
    # Logging
    "configure_logging",
    "get_logger",
    # Windowing
    "WindowController",
]
