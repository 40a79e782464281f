"""Shared pytest fixtures for page indicator tests."""

from collections.abc import Generator

import pytest
import structlog

from page_indicator import PageIndicator, Size, WindowController
from tests.mocks import RecordingAnimationDriver


@pytest.fixture(autouse=True)
def reset_structlog() -> Generator[None, None, None]:
    """Restore structlog defaults so capture_logs() sees every event."""
    structlog.reset_defaults()
    yield
    structlog.reset_defaults()


@pytest.fixture
def controller() -> WindowController:
    """Ten pages, 7 visible dots, 3 in the center band, 100x10 viewport.

    With dot size 6 and spacing 4 the intrinsic width is 66, so the row is
    centered with 17 units of slack on each side.
    """
    controller = WindowController(max_dots=7, center_dots=3, dot_size=6, spacing=4)
    controller.set_page_count(10)
    controller.on_viewport_resized(Size(100, 10))
    return controller


@pytest.fixture
def driver() -> RecordingAnimationDriver:
    return RecordingAnimationDriver()


@pytest.fixture
def indicator(driver: RecordingAnimationDriver) -> PageIndicator:
    """Indicator with ten pages on a 100x10 viewport and a recording driver."""
    indicator = PageIndicator(driver=driver)
    indicator.pages = 10
    indicator.resize(100, 10)
    return indicator
