"""Test doubles for the indicator's ports."""

from tests.mocks.views import (
    AlternatingProvider,
    RecordingAnimationDriver,
    RecordingDotView,
)

__all__ = [
    "AlternatingProvider",
    "RecordingAnimationDriver",
    "RecordingDotView",
]
