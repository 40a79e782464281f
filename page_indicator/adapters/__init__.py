"""Adapters implementing the indicator's ports.

Default dot views, animation drivers and a Pillow-based host renderer.
"""

from page_indicator.adapters.animation import (
    ImmediateAnimationDriver,
    InterpolatingAnimationDriver,
    ease_in_out,
    interpolate_slots,
)
from page_indicator.adapters.circular_dot import CircularDot
from page_indicator.adapters.factory import create_animation_driver
from page_indicator.adapters.pillow_canvas import (
    fit_to_content,
    render_indicator,
    render_png_bytes,
)

__all__ = [
    "CircularDot",
    "ImmediateAnimationDriver",
    "InterpolatingAnimationDriver",
    "create_animation_driver",
    "ease_in_out",
    "fit_to_content",
    "interpolate_slots",
    "render_indicator",
    "render_png_bytes",
]
