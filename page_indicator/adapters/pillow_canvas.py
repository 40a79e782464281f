"""Pillow host for rendering a PageIndicator to an image.

Acts as the indicator's host viewport: it reads the dot views the indicator
maintains and draws every visible one as a filled circle.
"""

from __future__ import annotations

import io
import math
from typing import TYPE_CHECKING

from PIL import Image, ImageDraw
from PIL.Image import Image as PILImage

from page_indicator.core.colors import Color

if TYPE_CHECKING:
    from page_indicator.indicator import PageIndicator

TRANSPARENT = Color(0.0, 0.0, 0.0, 0.0)


def fit_to_content(indicator: PageIndicator, padding: float = 0.0) -> None:
    """Resize the indicator's viewport to its intrinsic size plus padding.

    Args:
        indicator: The indicator to resize.
        padding: Extra space added on every side.
    """
    size = indicator.intrinsic_size
    indicator.resize(size.width + 2 * padding, size.height + 2 * padding)


def render_indicator(
    indicator: PageIndicator,
    background: Color = TRANSPARENT,
    pixel_scale: int = 1,
) -> PILImage:
    """Draw the indicator's dots onto a new RGBA image.

    The canvas matches the indicator's viewport, so resize() (or
    fit_to_content()) the indicator first.

    Args:
        indicator: The indicator to draw.
        background: Canvas fill color.
        pixel_scale: Pixels per viewport unit, for crisper small dots.

    Returns:
        An RGBA image at least 1x1 pixels.
    """
    pixel_scale = max(1, pixel_scale)
    viewport = indicator.viewport
    width = max(1, math.ceil(viewport.width * pixel_scale))
    height = max(1, math.ceil(viewport.height * pixel_scale))

    img = Image.new("RGBA", (width, height), background.to_rgba8())
    draw = ImageDraw.Draw(img)
    for view in indicator.views:
        if view.diameter <= 0:
            continue
        radius = view.diameter / 2 * pixel_scale
        cx = view.center.x * pixel_scale
        cy = view.center.y * pixel_scale
        draw.ellipse(
            (cx - radius, cy - radius, cx + radius, cy + radius),
            fill=view.tint.to_rgba8(),
        )
    return img


def render_png_bytes(
    indicator: PageIndicator,
    background: Color = TRANSPARENT,
    pixel_scale: int = 1,
) -> bytes:
    """Render the indicator and encode it as PNG."""
    buffer = io.BytesIO()
    render_indicator(indicator, background, pixel_scale).save(buffer, format="PNG")
    return buffer.getvalue()
