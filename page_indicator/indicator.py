"""PageIndicator: a scrolling row of page dots.

Glues a WindowController to a set of dot views. The controller decides where
every dot sits and how big it is; this class creates the views, tints them,
and hands layout changes to an animation driver.

Example:
    indicator = PageIndicator(max_dots=7, center_dots=3)
    indicator.pages = 12
    indicator.resize(120, 20)
    indicator.selected_page = 5
    for view in indicator.views:
        draw(view.center, view.diameter, view.tint)
"""

from collections.abc import Sequence

from page_indicator.adapters.animation import ImmediateAnimationDriver
from page_indicator.adapters.circular_dot import CircularDot
from page_indicator.adapters.factory import create_animation_driver
from page_indicator.core.colors import DEFAULT_DOT_COLOR, DEFAULT_SELECTED_COLOR, Color
from page_indicator.core.config import IndicatorSettings
from page_indicator.core.geometry import DotSlot, LayoutTransition, Size
from page_indicator.core.logging import get_logger
from page_indicator.core.window import (
    DEFAULT_CENTER_DOTS,
    DEFAULT_DOT_SIZE,
    DEFAULT_MAX_DOTS,
    DEFAULT_SLIDE_DURATION,
    DEFAULT_SPACING,
    WindowController,
)
from page_indicator.ports.views import AnimationDriver, DotView, DotViewProvider

logger = get_logger(__name__)


class PageIndicator:
    """A page indicator showing a bounded, scrolling window of dots.

    Every attribute can be changed at any time; invalid values are clamped
    by the underlying WindowController rather than rejected.
    """

    def __init__(
        self,
        max_dots: int = DEFAULT_MAX_DOTS,
        center_dots: int = DEFAULT_CENTER_DOTS,
        dot_size: float = DEFAULT_DOT_SIZE,
        spacing: float = DEFAULT_SPACING,
        slide_duration: float = DEFAULT_SLIDE_DURATION,
        dot_color: Color = DEFAULT_DOT_COLOR,
        selected_color: Color = DEFAULT_SELECTED_COLOR,
        provider: DotViewProvider | None = None,
        driver: AnimationDriver | None = None,
    ) -> None:
        """Initialize an indicator with zero pages.

        Args:
            max_dots: Maximum number of dots visible at once.
            center_dots: Number of full-size dots around the selection.
            dot_size: Diameter of a full-size dot.
            spacing: Gap between neighbouring dots.
            slide_duration: Seconds a window scroll takes.
            dot_color: Tint of unselected dots.
            selected_color: Tint of the selected dot.
            provider: Optional source of custom dot views.
            driver: Animation driver. Defaults to applying changes immediately.
        """
        self._controller = WindowController(
            max_dots=max_dots,
            center_dots=center_dots,
            dot_size=dot_size,
            spacing=spacing,
            slide_duration=slide_duration,
        )
        self._driver: AnimationDriver = driver or ImmediateAnimationDriver()
        self._provider = provider
        self._dot_color = dot_color
        self._selected_color = selected_color
        self._views: list[DotView] = []

    @classmethod
    def from_settings(
        cls,
        settings: IndicatorSettings | None = None,
        provider: DotViewProvider | None = None,
    ) -> "PageIndicator":
        """Build an indicator from settings, reading the environment if none given.

        Raises:
            IndicatorConfigError: If the environment holds unparsable values.
            ValueError: If settings name an unknown animation driver.
        """
        if settings is None:
            settings = IndicatorSettings.from_env()
        return cls(
            max_dots=settings.max_dots,
            center_dots=settings.center_dots,
            dot_size=settings.dot_size,
            spacing=settings.spacing,
            slide_duration=settings.slide_duration,
            dot_color=settings.dot_color,
            selected_color=settings.selected_color,
            provider=provider,
            driver=create_animation_driver(settings.animation, settings.frame_rate),
        )

    @property
    def controller(self) -> WindowController:
        return self._controller

    @property
    def views(self) -> tuple[DotView, ...]:
        return tuple(self._views)

    @property
    def viewport(self) -> Size:
        return self._controller.viewport

    @property
    def intrinsic_size(self) -> Size:
        return self._controller.compute_intrinsic_size()

    @property
    def pages(self) -> int:
        return self._controller.page_count

    @pages.setter
    def pages(self, value: int) -> None:
        transition = self._controller.set_page_count(value)
        if transition is None:
            return
        self._create_views()
        self._play(transition)

    @property
    def selected_page(self) -> int:
        return self._controller.selected_index

    @selected_page.setter
    def selected_page(self, value: int) -> None:
        transition = self._controller.set_selected_index(value)
        if transition is None:
            return
        # in-band moves keep every position; a slide in flight keeps playing
        if transition.moved:
            self._play(transition)
        self._update_colors()

    @property
    def max_dots(self) -> int:
        return self._controller.max_dots

    @max_dots.setter
    def max_dots(self, value: int) -> None:
        self._controller.set_max_dots(value)

    @property
    def center_dots(self) -> int:
        return self._controller.center_dots

    @center_dots.setter
    def center_dots(self, value: int) -> None:
        self._controller.set_center_dots(value)

    @property
    def slide_duration(self) -> float:
        return self._controller.slide_duration

    @slide_duration.setter
    def slide_duration(self, value: float) -> None:
        self._controller.set_slide_duration(value)

    @property
    def dot_size(self) -> float:
        return self._controller.dot_size

    @dot_size.setter
    def dot_size(self, value: float) -> None:
        transition = self._controller.set_geometry(dot_size=value)
        if transition is None:
            return
        for view in self._views:
            view.diameter = self._controller.dot_size
        self._play(transition)

    @property
    def spacing(self) -> float:
        return self._controller.spacing

    @spacing.setter
    def spacing(self, value: float) -> None:
        transition = self._controller.set_geometry(spacing=value)
        if transition is not None:
            self._play(transition)

    @property
    def dot_color(self) -> Color:
        return self._dot_color

    @dot_color.setter
    def dot_color(self, value: Color) -> None:
        self._dot_color = value
        self._update_colors()

    @property
    def selected_color(self) -> Color:
        return self._selected_color

    @selected_color.setter
    def selected_color(self, value: Color) -> None:
        self._selected_color = value
        self._update_colors()

    @property
    def provider(self) -> DotViewProvider | None:
        return self._provider

    @provider.setter
    def provider(self, value: DotViewProvider | None) -> None:
        self._provider = value
        self._create_views()
        self._apply_slots(self._controller.slots)

    def resize(self, width: float, height: float) -> None:
        """Tell the indicator its host viewport changed size."""
        transition = self._controller.on_viewport_resized(Size(width, height))
        if transition is not None:
            self._play(transition)

    def next_page(self, wrap: bool = False) -> None:
        """Select the following page, or the first one after the last if wrapping."""
        if self.pages == 0:
            return
        if self.selected_page == self.pages - 1:
            if wrap:
                self.selected_page = 0
            return
        self.selected_page += 1

    def previous_page(self, wrap: bool = False) -> None:
        """Select the preceding page, or the last one before the first if wrapping."""
        if self.pages == 0:
            return
        if self.selected_page == 0:
            if wrap:
                self.selected_page = self.pages - 1
            return
        self.selected_page -= 1

    async def wait_idle(self) -> None:
        """Wait until the animation driver has finished playing."""
        await self._driver.wait_idle()

    def _create_views(self) -> None:
        views: list[DotView] = []
        custom = 0
        for index in range(self._controller.page_count):
            view = self._provider.view_for_dot(index) if self._provider else None
            if view is None:
                view = CircularDot(diameter=self._controller.dot_size)
            else:
                custom += 1
            views.append(view)
        self._views = views
        self._update_colors()
        logger.debug("dot_views_created", count=len(views), custom=custom)

    def _play(self, transition: LayoutTransition) -> None:
        self._driver.animate(transition, self._apply_slots)

    def _apply_slots(self, slots: Sequence[DotSlot]) -> None:
        for view, slot in zip(self._views, slots):
            view.center = slot.center
            view.diameter = slot.diameter

    def _update_colors(self) -> None:
        selected = self._controller.selected_index
        for index, view in enumerate(self._views):
            view.tint = self._selected_color if index == selected else self._dot_color
