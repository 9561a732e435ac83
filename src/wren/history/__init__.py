"""History — locations, sources, and the navigation controller."""

from wren.history.history import History, create_history, get_default_history, navigate
from wren.history.location import Location, get_location
from wren.history.source import (
    HistorySource,
    MemorySource,
    ServerSource,
    WindowSource,
    can_use_dom,
    get_source,
)
from wren.history.transition import Transition

__all__ = [
    "History",
    "HistorySource",
    "Location",
    "MemorySource",
    "ServerSource",
    "Transition",
    "WindowSource",
    "can_use_dom",
    "create_history",
    "get_default_history",
    "get_location",
    "get_source",
    "navigate",
]
