"""Indicator settings loaded from environment variables.

Variables (all optional):
    PAGE_INDICATOR_MAX_DOTS          maximum visible dots (default 7)
    PAGE_INDICATOR_CENTER_DOTS       full-size center band (default 3)
    PAGE_INDICATOR_DOT_SIZE          dot diameter (default 6)
    PAGE_INDICATOR_SPACING           gap between dots (default 4)
    PAGE_INDICATOR_SLIDE_DURATION    seconds per window scroll (default 0.15)
    PAGE_INDICATOR_DOT_COLOR         unselected tint, hex (default #AAAAAA)
    PAGE_INDICATOR_SELECTED_COLOR    selected tint, hex (default #3DACF7)
    PAGE_INDICATOR_ANIMATION         "immediate" or "interpolated" (default)
    PAGE_INDICATOR_FRAME_RATE        frames per second (default 60)

Out-of-range numbers are not rejected here; the window controller clamps
them. Only values that cannot be parsed at all raise IndicatorConfigError.
"""

from collections.abc import Callable
from dataclasses import dataclass
from os import getenv
from typing import TypeVar

from page_indicator.core.colors import DEFAULT_DOT_COLOR, DEFAULT_SELECTED_COLOR, Color
from page_indicator.core.window import (
    DEFAULT_CENTER_DOTS,
    DEFAULT_DOT_SIZE,
    DEFAULT_MAX_DOTS,
    DEFAULT_SLIDE_DURATION,
    DEFAULT_SPACING,
)

T = TypeVar("T")

ENV_PREFIX = "PAGE_INDICATOR_"


class IndicatorConfigError(ValueError):
    """An environment variable holds a value that cannot be parsed.

    Attributes:
        variable: Name of the offending environment variable.
        value: The raw string found in the environment.
    """

    def __init__(self, variable: str, value: str, reason: str) -> None:
        super().__init__(f"Invalid {variable}={value!r}: {reason}")
        self.variable = variable
        self.value = value


@dataclass
class IndicatorSettings:
    """Configuration for a PageIndicator.

    Attributes:
        max_dots: Maximum number of dots visible at once.
        center_dots: Number of full-size dots around the selection.
        dot_size: Diameter of a full-size dot.
        spacing: Gap between neighbouring dots.
        slide_duration: Seconds a window scroll animation takes.
        dot_color: Tint of unselected dots.
        selected_color: Tint of the selected dot.
        animation: Animation driver kind passed to create_animation_driver.
        frame_rate: Frames per second for the interpolating driver.
    """

    max_dots: int = DEFAULT_MAX_DOTS
    center_dots: int = DEFAULT_CENTER_DOTS
    dot_size: float = DEFAULT_DOT_SIZE
    spacing: float = DEFAULT_SPACING
    slide_duration: float = DEFAULT_SLIDE_DURATION
    dot_color: Color = DEFAULT_DOT_COLOR
    selected_color: Color = DEFAULT_SELECTED_COLOR
    animation: str = "interpolated"
    frame_rate: float = 60.0

    @classmethod
    def from_env(cls) -> "IndicatorSettings":
        """Build settings from PAGE_INDICATOR_* environment variables.

        Returns:
            Settings with defaults for every unset variable.

        Raises:
            IndicatorConfigError: If a variable is set but cannot be parsed.
        """
        defaults = cls()
        return cls(
            max_dots=_read("MAX_DOTS", int, defaults.max_dots),
            center_dots=_read("CENTER_DOTS", int, defaults.center_dots),
            dot_size=_read("DOT_SIZE", float, defaults.dot_size),
            spacing=_read("SPACING", float, defaults.spacing),
            slide_duration=_read("SLIDE_DURATION", float, defaults.slide_duration),
            dot_color=_read("DOT_COLOR", Color.from_hex, defaults.dot_color),
            selected_color=_read(
                "SELECTED_COLOR", Color.from_hex, defaults.selected_color
            ),
            animation=getenv(f"{ENV_PREFIX}ANIMATION", defaults.animation).lower(),
            frame_rate=_read("FRAME_RATE", float, defaults.frame_rate),
        )


def _read(name: str, parse: Callable[[str], T], default: T) -> T:
    variable = f"{ENV_PREFIX}{name}"
    raw = getenv(variable)
    if raw is None or raw.strip() == "":
        return default
    try:
        return parse(raw.strip())
    except ValueError as ex:
        raise IndicatorConfigError(variable, raw, str(ex)) from ex
