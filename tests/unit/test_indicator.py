"""Tests for the PageIndicator facade."""

import asyncio

import pytest

from page_indicator import PageIndicator
from page_indicator.adapters.animation import InterpolatingAnimationDriver
from page_indicator.adapters.circular_dot import CircularDot
from page_indicator.core.colors import DEFAULT_DOT_COLOR, DEFAULT_SELECTED_COLOR, Color
from page_indicator.core.config import IndicatorSettings
from page_indicator.core.geometry import Size
from tests.mocks import AlternatingProvider, RecordingAnimationDriver, RecordingDotView

RED = Color(1.0, 0.0, 0.0)
BLACK = Color(0.0, 0.0, 0.0)


def tints(indicator: PageIndicator) -> list[Color]:
    return [view.tint for view in indicator.views]


class TestViews:
    """Tests for dot view creation."""

    def test_creates_default_circles(self, indicator: PageIndicator) -> None:
        assert len(indicator.views) == 10
        assert all(isinstance(view, CircularDot) for view in indicator.views)

    def test_no_pages_no_views(self) -> None:
        assert PageIndicator().views == ()

    def test_recreates_views_when_page_count_changes(
        self, indicator: PageIndicator
    ) -> None:
        old = indicator.views
        indicator.pages = 4
        assert len(indicator.views) == 4
        assert not any(view is stale for view in indicator.views for stale in old)

    def test_provider_views_with_default_fallback(self) -> None:
        provider = AlternatingProvider()
        indicator = PageIndicator(provider=provider)
        indicator.pages = 4
        assert provider.requested == [0, 1, 2, 3]
        kinds = [type(view) for view in indicator.views]
        assert kinds == [RecordingDotView, CircularDot, RecordingDotView, CircularDot]

    def test_setting_provider_recreates_views(self, indicator: PageIndicator) -> None:
        indicator.resize(120, 10)
        provider = AlternatingProvider()
        indicator.provider = provider
        assert indicator.provider is provider
        assert indicator.views[0] is provider.created[0]
        # new views get the current layout and colors right away
        assert indicator.views[0].center == indicator.controller.slots[0].center
        assert indicator.views[0].tint == DEFAULT_SELECTED_COLOR

    def test_default_circle_starts_at_dot_size(self) -> None:
        indicator = PageIndicator(dot_size=10)
        indicator.pages = 1
        assert indicator.views[0].diameter == 10


class TestColors:
    """Tests for selected/unselected tinting."""

    def test_initial_tints(self, indicator: PageIndicator) -> None:
        assert tints(indicator) == [DEFAULT_SELECTED_COLOR] + [DEFAULT_DOT_COLOR] * 9

    def test_selection_moves_highlight(self, indicator: PageIndicator) -> None:
        indicator.selected_page = 3
        colors = tints(indicator)
        assert colors[3] == DEFAULT_SELECTED_COLOR
        assert colors.count(DEFAULT_SELECTED_COLOR) == 1

    def test_color_changes_apply_immediately(self, indicator: PageIndicator) -> None:
        indicator.dot_color = BLACK
        indicator.selected_color = RED
        assert indicator.dot_color == BLACK
        assert indicator.selected_color == RED
        assert tints(indicator) == [RED] + [BLACK] * 9

    def test_custom_views_receive_tints(self) -> None:
        provider = AlternatingProvider()
        indicator = PageIndicator(provider=provider)
        indicator.pages = 3
        indicator.selected_page = 2
        assert provider.created[1].tint_history[-1] == DEFAULT_SELECTED_COLOR
        assert provider.created[0].tint == DEFAULT_DOT_COLOR


class TestLayout:
    """Tests for positions pushed onto views."""

    def test_resize_positions_views(self, indicator: PageIndicator) -> None:
        for view, slot in zip(indicator.views, indicator.controller.slots):
            assert view.center == slot.center
            assert view.diameter == pytest.approx(slot.diameter)
        assert indicator.viewport == Size(100, 10)

    def test_scroll_is_animated(
        self, indicator: PageIndicator, driver: RecordingAnimationDriver
    ) -> None:
        indicator.selected_page = 1
        assert driver.animated == []
        indicator.selected_page = 5
        assert len(driver.animated) == 1
        assert driver.animated[0].duration == pytest.approx(indicator.slide_duration)

    def test_unchanged_selection_plays_nothing(
        self, indicator: PageIndicator, driver: RecordingAnimationDriver
    ) -> None:
        played = len(driver.transitions)
        indicator.selected_page = 0
        indicator.resize(100, 10)
        assert len(driver.transitions) == played

    def test_in_band_selection_only_recolors(
        self, indicator: PageIndicator, driver: RecordingAnimationDriver
    ) -> None:
        played = len(driver.transitions)
        indicator.selected_page = 2
        assert len(driver.transitions) == played
        assert indicator.views[2].tint == DEFAULT_SELECTED_COLOR

    def test_scroll_without_slide_applies_immediately(
        self, indicator: PageIndicator, driver: RecordingAnimationDriver
    ) -> None:
        indicator.slide_duration = 0
        indicator.selected_page = 5
        assert driver.transitions[-1].moved
        assert not driver.transitions[-1].animated
        assert indicator.views[5].center == indicator.controller.slots[5].center

    def test_dot_size_updates_diameters(self, indicator: PageIndicator) -> None:
        indicator.dot_size = 10
        assert indicator.dot_size == 10
        assert indicator.views[0].diameter == pytest.approx(10)
        assert indicator.views[4].diameter == pytest.approx(10 * 0.33)

    def test_spacing_repositions(self, indicator: PageIndicator) -> None:
        before = indicator.views[3].center
        indicator.spacing = 8
        assert indicator.spacing == 8
        assert indicator.views[3].center != before

    def test_dot_counts_update_intrinsic_size(self, indicator: PageIndicator) -> None:
        assert indicator.intrinsic_size == Size(66, 6)
        indicator.max_dots = 3
        indicator.center_dots = 1
        assert indicator.max_dots == 3
        assert indicator.center_dots == 1
        assert indicator.intrinsic_size == Size(26, 6)

    def test_slide_duration_is_clamped(self, indicator: PageIndicator) -> None:
        indicator.slide_duration = -2
        assert indicator.slide_duration == 0


class TestStepping:
    """Tests for next_page and previous_page."""

    def test_next_stops_at_end(self, indicator: PageIndicator) -> None:
        indicator.selected_page = 9
        indicator.next_page()
        assert indicator.selected_page == 9

    def test_next_wraps_to_start(self, indicator: PageIndicator) -> None:
        indicator.selected_page = 9
        indicator.next_page(wrap=True)
        assert indicator.selected_page == 0
        assert indicator.controller.page_offset == 0

    def test_previous_stops_at_start(self, indicator: PageIndicator) -> None:
        indicator.previous_page()
        assert indicator.selected_page == 0

    def test_previous_wraps_to_end(self, indicator: PageIndicator) -> None:
        indicator.previous_page(wrap=True)
        assert indicator.selected_page == 9
        assert indicator.controller.page_offset == 3

    def test_stepping_without_pages_is_noop(self) -> None:
        indicator = PageIndicator()
        indicator.next_page(wrap=True)
        indicator.previous_page(wrap=True)
        assert indicator.selected_page == 0


class TestFromSettings:
    """Tests for PageIndicator.from_settings."""

    def test_applies_settings(self) -> None:
        settings = IndicatorSettings(
            max_dots=9,
            center_dots=5,
            dot_size=8,
            spacing=2,
            slide_duration=0.5,
            dot_color=BLACK,
            selected_color=RED,
            animation="immediate",
        )
        indicator = PageIndicator.from_settings(settings)
        assert indicator.max_dots == 9
        assert indicator.center_dots == 5
        assert indicator.dot_size == 8
        assert indicator.spacing == 2
        assert indicator.slide_duration == 0.5
        assert indicator.dot_color == BLACK
        assert indicator.selected_color == RED

    def test_unknown_driver_raises(self) -> None:
        with pytest.raises(ValueError):
            PageIndicator.from_settings(IndicatorSettings(animation="bouncy"))


class TestAnimatedIndicator:
    """End-to-end tests with the interpolating driver."""

    @pytest.mark.asyncio
    async def test_views_settle_on_final_layout(self) -> None:
        indicator = PageIndicator(
            slide_duration=0.03, driver=InterpolatingAnimationDriver(frame_rate=100)
        )
        indicator.pages = 10
        indicator.resize(100, 10)

        indicator.selected_page = 9
        await indicator.wait_idle()

        for view, slot in zip(indicator.views, indicator.controller.slots):
            assert view.center == slot.center
            assert view.diameter == slot.diameter

    @pytest.mark.asyncio
    async def test_wait_idle_delegates_to_driver(
        self, indicator: PageIndicator, driver: RecordingAnimationDriver
    ) -> None:
        await indicator.wait_idle()
        assert driver.wait_count == 1

    def test_default_driver_applies_scrolls_at_once(self) -> None:
        indicator = PageIndicator()
        indicator.pages = 10
        indicator.resize(100, 10)
        indicator.selected_page = 9
        for view, slot in zip(indicator.views, indicator.controller.slots):
            assert view.center == slot.center
            assert view.diameter == slot.diameter

    @pytest.mark.asyncio
    async def test_in_band_selection_keeps_slide_running(self) -> None:
        driver = InterpolatingAnimationDriver(frame_rate=100)
        indicator = PageIndicator(slide_duration=0.5, driver=driver)
        indicator.pages = 10
        indicator.resize(100, 10)
        indicator.selected_page = 1
        indicator.selected_page = 2
        indicator.selected_page = 3  # leaves the band, window scrolls by one
        await asyncio.sleep(0.1)
        mid_flight = indicator.views[5].center

        indicator.selected_page = 2

        assert driver.running
        assert indicator.views[5].center == mid_flight
        assert indicator.views[2].tint == DEFAULT_SELECTED_COLOR
        await indicator.wait_idle()
        assert indicator.views[5].center == indicator.controller.slots[5].center
