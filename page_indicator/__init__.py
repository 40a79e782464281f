"""Scrolling page indicator.

Computes a bounded, scrolling row of page dots: which pages are visible,
where each dot sits and how large it is drawn.

Example:
    >>> from page_indicator import PageIndicator
    >>> indicator = PageIndicator(max_dots=7, center_dots=3)
    >>> indicator.pages = 10
    >>> indicator.resize(100, 10)
    >>> indicator.selected_page = 9
    >>> indicator.controller.page_offset
    3
"""

from page_indicator.core import (
    Color,
    DotPlacement,
    DotSlot,
    IndicatorConfigError,
    IndicatorSettings,
    LayoutTransition,
    Point,
    Size,
    WindowController,
    configure_logging,
    get_logger,
)
from page_indicator.indicator import PageIndicator

__version__ = "0.1.0"

__all__ = [
    "PageIndicator",
    "WindowController",
    # Geometry
    "DotPlacement",
    "DotSlot",
    "LayoutTransition",
    "Point",
    "Size",
    "Color",
    # Configuration
    "IndicatorConfigError",
    "IndicatorSettings",
    # Logging
    "configure_logging",
    "get_logger",
]
