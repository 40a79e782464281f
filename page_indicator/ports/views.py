"""Protocols for the collaborators a page indicator talks to.

The indicator never draws anything itself. It pushes centers, diameters and
tints onto dot views supplied by the caller (or the default CircularDot), and
hands layout changes to an animation driver that decides how they reach the
screen over time.
"""

from collections.abc import Callable, Sequence
from typing import Protocol

from page_indicator.core.colors import Color
from page_indicator.core.geometry import DotSlot, LayoutTransition, Point

# Callback an animation driver uses to push one frame of slots onto the views
ApplySlots = Callable[[Sequence[DotSlot]], None]


class DotView(Protocol):
    """A visual placeholder for one page's dot.

    Implementations must react to having these attributes assigned; the
    indicator does not call any other method on them.

    Attributes:
        center: Center of the dot in the host viewport's coordinates.
        diameter: Rendered size. Zero hides the dot.
        tint: Selected or unselected color.
    """

    center: Point
    diameter: float
    tint: Color


class DotViewProvider(Protocol):
    """Supplies custom dot views, one page index at a time.

    The indicator does not take ownership of the returned views beyond
    updating their attributes.
    """

    def view_for_dot(self, index: int) -> DotView | None:
        """Return the view for the dot at ``index``.

        Args:
            index: Page index, 0-based.

        Returns:
            A custom view, or None to use the default filled circle.
        """
        ...


class AnimationDriver(Protocol):
    """Consumes layout transitions and applies them over time."""

    def animate(self, transition: LayoutTransition, apply: ApplySlots) -> None:
        """Start applying ``transition`` through ``apply``.

        Fire-and-forget: a transition arriving while another is running
        replaces it, starting from whatever was applied last.

        Args:
            transition: The layout change to play.
            apply: Callback receiving each frame of slots.
        """
        ...

    async def wait_idle(self) -> None:
        """Wait until no animation is running."""
        ...
