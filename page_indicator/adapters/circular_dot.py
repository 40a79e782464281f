"""Default dot view: a filled circle."""

from dataclasses import dataclass, field

from page_indicator.core.colors import DEFAULT_DOT_COLOR, Color
from page_indicator.core.geometry import Point


@dataclass
class CircularDot:
    """Filled circle implementing the DotView protocol.

    Attributes:
        diameter: Current rendered size.
        center: Current center point.
        tint: Current fill color.
    """

    diameter: float
    center: Point = field(default_factory=lambda: Point(0.0, 0.0))
    tint: Color = DEFAULT_DOT_COLOR
