"""Ports (interfaces) between the indicator and its hosts.

Protocol definitions for the collaborators the indicator drives but does
not implement: dot views, dot view providers and animation drivers.
"""

from page_indicator.ports.views import (
    AnimationDriver,
    ApplySlots,
    DotView,
    DotViewProvider,
)

__all__ = [
    "AnimationDriver",
    "ApplySlots",
    "DotView",
    "DotViewProvider",
]
