"""Animation drivers that play layout transitions onto dot views.

Two implementations of the AnimationDriver protocol:
- ImmediateAnimationDriver: applies the final layout synchronously. Useful
  for tests, headless rendering and hosts that animate on their own.
- InterpolatingAnimationDriver: eases dot centers, scales and diameters from
  their current values to the target on an asyncio task.
"""

import asyncio
import math
from collections.abc import Callable, Sequence

from page_indicator.core.geometry import DotSlot, LayoutTransition, Point
from page_indicator.core.logging import get_logger
from page_indicator.ports.views import ApplySlots

logger = get_logger(__name__)

DEFAULT_FRAME_RATE = 60.0


def ease_in_out(progress: float) -> float:
    """Smoothstep easing: slow start, slow finish."""
    progress = max(0.0, min(1.0, progress))
    return progress * progress * (3 - 2 * progress)


def _lerp(start: float, end: float, progress: float) -> float:
    return start + (end - start) * progress


def interpolate_slots(
    start: Sequence[DotSlot], target: Sequence[DotSlot], progress: float
) -> tuple[DotSlot, ...]:
    """Blend two index-aligned slot sequences.

    Geometry is interpolated linearly; index and selection come from the
    target.

    Args:
        start: Slots at progress 0.
        target: Slots at progress 1.
        progress: Blend factor, usually already eased.

    Returns:
        The blended slots.
    """
    return tuple(
        DotSlot(
            index=end.index,
            center=Point(
                _lerp(begin.center.x, end.center.x, progress),
                _lerp(begin.center.y, end.center.y, progress),
            ),
            scale=_lerp(begin.scale, end.scale, progress),
            diameter=_lerp(begin.diameter, end.diameter, progress),
            selected=end.selected,
        )
        for begin, end in zip(start, target, strict=True)
    )


class ImmediateAnimationDriver:
    """Applies every transition's final slots at once."""

    def animate(self, transition: LayoutTransition, apply: ApplySlots) -> None:
        apply(transition.after)

    async def wait_idle(self) -> None:
        return None


class InterpolatingAnimationDriver:
    """Plays animated transitions frame by frame on the running event loop.

    A transition that arrives while another is playing cancels it and starts
    from the last frame applied, so the dots never jump back. Immediate
    transitions (zero duration, or a rebuilt slot sequence) are applied
    synchronously and also cancel any running animation.

    Without a running event loop there is nothing to schedule frames on, so
    the final layout is applied directly.

    Attributes:
        frame_rate: Frames per second used to split an animation.
    """

    def __init__(
        self,
        frame_rate: float = DEFAULT_FRAME_RATE,
        easing: Callable[[float], float] = ease_in_out,
    ) -> None:
        """Initialize the driver.

        Args:
            frame_rate: Frames per second. Clamped to at least 1.
            easing: Maps linear progress in [0, 1] to eased progress.
        """
        self.frame_rate = max(1.0, float(frame_rate))
        self._easing = easing
        self._task: asyncio.Task[None] | None = None
        self._current: tuple[DotSlot, ...] | None = None

    @property
    def running(self) -> bool:
        return self._task is not None and not self._task.done()

    def animate(self, transition: LayoutTransition, apply: ApplySlots) -> None:
        start = self._start_frame(transition)
        self._cancel()

        if not transition.animated:
            self._apply(transition.after, apply)
            return

        try:
            loop = asyncio.get_running_loop()
        except RuntimeError:
            logger.debug("animation_skipped_no_event_loop", slots=len(transition.after))
            self._apply(transition.after, apply)
            return

        self._task = loop.create_task(
            self._play(start, transition.after, transition.duration, apply)
        )

    async def wait_idle(self) -> None:
        """Wait for the running animation, following any restarts.

        Raises:
            Exception: Whatever the apply callback raised during playback.
        """
        while self._task is not None and not self._task.done():
            task = self._task
            await asyncio.wait({task})
            if not task.cancelled():
                task.result()

    def _start_frame(self, transition: LayoutTransition) -> tuple[DotSlot, ...]:
        current = self._current
        if current is not None and len(current) == len(transition.after):
            return current
        if len(transition.before) == len(transition.after):
            return transition.before
        return transition.after

    def _cancel(self) -> None:
        if self._task is not None and not self._task.done():
            self._task.cancel()
            logger.debug("animation_interrupted")
        self._task = None

    def _apply(self, slots: tuple[DotSlot, ...], apply: ApplySlots) -> None:
        self._current = slots
        apply(slots)

    async def _play(
        self,
        start: tuple[DotSlot, ...],
        target: tuple[DotSlot, ...],
        duration: float,
        apply: ApplySlots,
    ) -> None:
        frames = max(1, math.ceil(round(duration * self.frame_rate, 6)))
        interval = duration / frames
        for frame in range(1, frames):
            await asyncio.sleep(interval)
            progress = self._easing(frame / frames)
            self._apply(interpolate_slots(start, target, progress), apply)
        await asyncio.sleep(interval)
        self._apply(target, apply)
