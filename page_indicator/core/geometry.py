"""Value types shared by the window controller, the facade and the adapters.

Everything here is immutable so layouts can be compared, cached and handed
to animation drivers without defensive copies.
"""

from dataclasses import dataclass

# Scale per distance tier outside the center band. Beyond the last tier dots
# keep the smallest size until they fall out of the window entirely.
FALLOFF_SCALES: tuple[float, ...] = (1.0, 0.66, 0.33, 0.16)


@dataclass(frozen=True)
class Point:
    """A point in viewport coordinates."""

    x: float
    y: float


@dataclass(frozen=True)
class Size:
    """A width/height pair in viewport units."""

    width: float
    height: float

    @classmethod
    def zero(cls) -> "Size":
        return cls(0.0, 0.0)


@dataclass(frozen=True)
class DotPlacement:
    """Computed center and scale factor for one page's dot.

    Attributes:
        index: Page index this placement belongs to.
        center: Center point of the dot in viewport coordinates.
        scale: Scale factor in [0, 1]. Zero means the dot is outside the window.
    """

    index: int
    center: Point
    scale: float


@dataclass(frozen=True)
class DotSlot:
    """The state pushed onto one dot view.

    Attributes:
        index: Page index of the dot.
        center: Center point in viewport coordinates.
        scale: Scale factor in [0, 1].
        diameter: Rendered size, dot_size * scale.
        selected: Whether this dot represents the selected page.
    """

    index: int
    center: Point
    scale: float
    diameter: float
    selected: bool = False


@dataclass(frozen=True)
class LayoutTransition:
    """A change of dot layout, from one set of slots to another.

    Animation drivers consume these records. A zero duration means the new
    slots should be applied without interpolation.

    Attributes:
        before: Slots as they were before the command ran.
        after: Slots the command produced.
        duration: Seconds the change should take on screen.
        rebuilt: True when the slot sequence was recreated (page count changed).
    """

    before: tuple[DotSlot, ...]
    after: tuple[DotSlot, ...]
    duration: float = 0.0
    rebuilt: bool = False

    @property
    def animated(self) -> bool:
        return self.duration > 0 and not self.rebuilt

    @property
    def moved(self) -> bool:
        """True when any dot's center or diameter differs between before and after."""
        if self.rebuilt or len(self.before) != len(self.after):
            return True
        return any(
            old.center != new.center or old.diameter != new.diameter
            for old, new in zip(self.before, self.after)
        )
