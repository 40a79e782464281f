"""Animation driver factory.

Supported kinds:
- "immediate": apply every layout change at once
- "interpolated": ease layout changes on the running asyncio loop

Example:
    driver = create_animation_driver("interpolated", frame_rate=30)
"""

from __future__ import annotations

from typing import Union

from page_indicator.adapters.animation import (
    DEFAULT_FRAME_RATE,
    ImmediateAnimationDriver,
    InterpolatingAnimationDriver,
)

DriverType = Union[ImmediateAnimationDriver, InterpolatingAnimationDriver]


def create_animation_driver(kind: str, frame_rate: float = DEFAULT_FRAME_RATE) -> DriverType:
    """Create an animation driver by name.

    Args:
        kind: "immediate" or "interpolated".
        frame_rate: Frames per second, only used by "interpolated".

    Returns:
        A driver implementing the AnimationDriver protocol.

    Raises:
        ValueError: If the kind is not supported.
    """
    if kind == "immediate":
        return ImmediateAnimationDriver()

    if kind == "interpolated":
        return InterpolatingAnimationDriver(frame_rate=frame_rate)

    raise ValueError(
        f"Unsupported animation driver: {kind!r}. "
        "Supported drivers: 'immediate', 'interpolated'"
    )
