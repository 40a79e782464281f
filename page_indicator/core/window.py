"""Windowing logic for the scrolling page indicator - platform agnostic.

The WindowController decides which pages are mapped into the visible row of
dots, where every dot sits and how large it is drawn. Commands (``set_*``,
``on_viewport_resized``) mutate state and return a LayoutTransition describing
what changed. Queries (``compute_positions``, ``compute_intrinsic_size``)
derive results from the current state without mutating it.

Example:
    controller = WindowController(max_dots=7, center_dots=3)
    controller.set_page_count(10)
    controller.on_viewport_resized(Size(120, 20))
    transition = controller.set_selected_index(4)
    if transition is not None and transition.animated:
        driver.animate(transition, apply_slots)
"""

from page_indicator.core.geometry import (
    FALLOFF_SCALES,
    DotPlacement,
    DotSlot,
    LayoutTransition,
    Point,
    Size,
)
from page_indicator.core.logging import get_logger

logger = get_logger(__name__)

DEFAULT_MAX_DOTS = 7
DEFAULT_CENTER_DOTS = 3
DEFAULT_DOT_SIZE = 6.0
DEFAULT_SPACING = 4.0
DEFAULT_SLIDE_DURATION = 0.15


class WindowController:
    """Owns the windowing state of one page indicator.

    Not thread-safe: all commands are expected to run on the host's UI or
    update thread.
    """

    def __init__(
        self,
        max_dots: int = DEFAULT_MAX_DOTS,
        center_dots: int = DEFAULT_CENTER_DOTS,
        dot_size: float = DEFAULT_DOT_SIZE,
        spacing: float = DEFAULT_SPACING,
        slide_duration: float = DEFAULT_SLIDE_DURATION,
    ) -> None:
        """Initialize an empty controller (zero pages).

        Args:
            max_dots: Maximum number of dots visible at once. Forced odd, >= 3.
            center_dots: Size of the full-size center band. Forced odd, >= 1,
                and capped at max_dots.
            dot_size: Diameter of a full-size dot. Clamped to >= 1.
            spacing: Gap between neighbouring dots. Clamped to >= 1.
            slide_duration: Seconds a window scroll takes. Clamped to >= 0.
        """
        self._page_count = 0
        self._selected_index = 0
        self._page_offset = 0
        self._center_offset = 0
        self._max_dots = DEFAULT_MAX_DOTS
        self._center_dots = DEFAULT_CENTER_DOTS
        self._dot_size = max(1.0, float(dot_size))
        self._spacing = max(1.0, float(spacing))
        self._slide_duration = max(0.0, float(slide_duration))
        self._viewport = Size.zero()
        self._intrinsic_size: Size | None = None
        self._slots: tuple[DotSlot, ...] = ()

        self.set_max_dots(max_dots)
        self.set_center_dots(center_dots)

    # ------------------------------------------------------------------
    # State
    # ------------------------------------------------------------------

    @property
    def page_count(self) -> int:
        return self._page_count

    @property
    def selected_index(self) -> int:
        """The selected page, clamped into the current page range."""
        return self._clamp_index(self._selected_index)

    @property
    def max_dots(self) -> int:
        return self._max_dots

    @property
    def center_dots(self) -> int:
        return self._center_dots

    @property
    def page_offset(self) -> int:
        return self._page_offset

    @property
    def center_offset(self) -> int:
        return self._center_offset

    @property
    def dot_size(self) -> float:
        return self._dot_size

    @property
    def spacing(self) -> float:
        return self._spacing

    @property
    def slide_duration(self) -> float:
        return self._slide_duration

    @property
    def viewport(self) -> Size:
        return self._viewport

    @property
    def slots(self) -> tuple[DotSlot, ...]:
        """Slots as of the last command, one per page."""
        return self._slots

    @property
    def intrinsic_size_valid(self) -> bool:
        """False after any change that affects compute_intrinsic_size()."""
        return self._intrinsic_size is not None

    # ------------------------------------------------------------------
    # Commands
    # ------------------------------------------------------------------

    def set_page_count(self, count: int) -> LayoutTransition | None:
        """Set the number of pages and rebuild the slot sequence.

        The stored selection is kept; reads clamp it to the new range.

        Args:
            count: New page count. Negative values become 0.

        Returns:
            An immediate transition flagged as rebuilt, or None if unchanged.
        """
        count = max(0, count)
        if count == self._page_count:
            return None

        before = self._slots
        self._page_count = count
        self._intrinsic_size = None
        self._slots = self._build_slots()
        logger.debug("page_count_changed", page_count=count)
        return LayoutTransition(before=before, after=self._slots, rebuilt=True)

    def set_selected_index(self, index: int) -> LayoutTransition | None:
        """Select a page, scrolling the window when the selection leaves the band.

        Args:
            index: Page to select. Clamped into [0, page_count - 1].

        Returns:
            A transition animated over slide_duration when the window scrolled,
            an immediate one when only the highlight moved, or None if the
            effective selection did not change.
        """
        previous = self.selected_index
        index = self._clamp_index(index)
        self._selected_index = index
        if index == previous:
            return None

        old_offset = self._page_offset
        self._update_offsets(previous, index)

        before = self._slots
        self._slots = self._build_slots()
        duration = self._slide_duration if self._page_offset != old_offset else 0.0
        return LayoutTransition(before=before, after=self._slots, duration=duration)

    def set_max_dots(self, max_dots: int) -> None:
        """Set the maximum number of visible dots.

        Values below 3 are raised to 3 and even values are bumped to the next
        odd number. If center_dots no longer fits it is capped as well. Only
        the intrinsic size is invalidated; offsets and slots are untouched.
        """
        value = max(3, max_dots)
        if value % 2 == 0:
            value += 1
            logger.warning("max_dots_not_odd", requested=max_dots, using=value)
        self._max_dots = value

        if self._center_dots > value:
            logger.warning(
                "center_dots_capped", requested=self._center_dots, using=value
            )
            self._center_dots = value

        self._intrinsic_size = None

    def set_center_dots(self, center_dots: int) -> None:
        """Set the size of the full-size center band.

        Values below 1 are raised to 1, values above max_dots are capped, and
        even values are bumped to the next odd number.
        """
        value = max(1, center_dots)
        if value > self._max_dots:
            value = self._max_dots
            logger.warning("center_dots_capped", requested=center_dots, using=value)
        if value % 2 == 0:
            value += 1
            logger.warning("center_dots_not_odd", requested=center_dots, using=value)
        self._center_dots = value
        self._intrinsic_size = None

    def set_geometry(
        self, dot_size: float | None = None, spacing: float | None = None
    ) -> LayoutTransition | None:
        """Change dot size and/or spacing and reposition every dot.

        Args:
            dot_size: New dot diameter, clamped to >= 1. None keeps the current.
            spacing: New gap between dots, clamped to >= 1. None keeps the current.

        Returns:
            An immediate transition, or None if neither value changed.
        """
        new_size = self._dot_size if dot_size is None else max(1.0, float(dot_size))
        new_spacing = self._spacing if spacing is None else max(1.0, float(spacing))
        if new_size == self._dot_size and new_spacing == self._spacing:
            return None

        self._dot_size = new_size
        self._spacing = new_spacing
        self._intrinsic_size = None
        return self._reposition()

    def set_slide_duration(self, seconds: float) -> None:
        self._slide_duration = max(0.0, float(seconds))

    def on_viewport_resized(self, size: Size) -> LayoutTransition | None:
        """Record a new viewport size reported by the host.

        Args:
            size: The host's current bounds.

        Returns:
            An immediate repositioning, or None if the size is unchanged.
        """
        if size == self._viewport:
            return None
        self._viewport = size
        return self._reposition()

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def compute_intrinsic_size(self) -> Size:
        """Size needed to show up to max_dots full-size dots.

        The result is cached until a command invalidates it.
        """
        if self._intrinsic_size is None:
            self._intrinsic_size = self._measure()
        return self._intrinsic_size

    def compute_positions(self) -> list[DotPlacement]:
        """Compute the center and scale of every page's dot.

        Returns:
            One placement per page, in page order. Empty when there are no pages.
        """
        if self._page_count <= 0:
            return []

        center_dots = min(self._center_dots, self._page_count)
        max_dots = min(self._max_dots, self._page_count)
        side_pages = (max_dots - center_dots) // 2
        step = self._dot_size + self._spacing
        half = self._dot_size / 2
        width = self._viewport.width

        horizontal_offset = max(
            0.0,
            (side_pages - self._page_offset) * step
            + (width - self._measure().width) / 2,
        )
        center_page = center_dots // 2 + self._page_offset
        y = self._viewport.height / 2

        placements = []
        for page in range(self._page_count):
            x = min(width - half, max(half, horizontal_offset + half + step * page))
            distance = abs(page - center_page)
            if distance > max_dots // 2:
                scale = 0.0
            else:
                tier = max(0, min(len(FALLOFF_SCALES) - 1, distance - center_dots // 2))
                scale = FALLOFF_SCALES[tier]
            placements.append(DotPlacement(index=page, center=Point(x, y), scale=scale))
        return placements

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    def _clamp_index(self, index: int) -> int:
        return max(0, min(index, self._page_count - 1))

    def _measure(self) -> Size:
        visible = min(self._max_dots, self._page_count)
        if visible <= 0:
            return Size(0.0, self._dot_size)
        width = visible * self._dot_size + (visible - 1) * self._spacing
        return Size(width, self._dot_size)

    def _update_offsets(self, previous: int, index: int) -> None:
        last_page = self._page_count - 1
        center_dots = min(self._center_dots, self._page_count)
        max_dots = min(self._max_dots, self._page_count)

        # Stepping across the ends of a circular sequence snaps the window
        # instead of sliding it over every page in between.
        if previous == last_page and index == 0:
            self._page_offset = 0
            self._center_offset = 0
            logger.debug("window_wrapped", direction="start")
        elif previous == 0 and index == last_page:
            self._page_offset = max(0, self._page_count - max_dots)
            self._center_offset = max_dots - center_dots
            logger.debug("window_wrapped", direction="end")
        else:
            relative = index - self._page_offset
            if 0 <= relative < center_dots:
                self._center_offset = relative
            else:
                self._page_offset = index - self._center_offset
                logger.debug(
                    "window_scrolled",
                    page_offset=self._page_offset,
                    center_offset=self._center_offset,
                )

    def _reposition(self) -> LayoutTransition:
        before = self._slots
        self._slots = self._build_slots()
        return LayoutTransition(before=before, after=self._slots)

    def _build_slots(self) -> tuple[DotSlot, ...]:
        selected = self.selected_index
        return tuple(
            DotSlot(
                index=placement.index,
                center=placement.center,
                scale=placement.scale,
                diameter=self._dot_size * placement.scale,
                selected=placement.index == selected,
            )
            for placement in self.compute_positions()
        )
