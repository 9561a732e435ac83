"""Location snapshots.

A ``Location`` is read from a source after every change and never
mutated; holders of an older snapshot keep seeing a consistent value.
"""

from collections.abc import Mapping
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from wren.history.source import HistorySource

INITIAL_KEY = "initial"


@dataclass(frozen=True, slots=True)
class Location:
    """The current history entry.

    ``key`` identifies the entry; the first entry of a session is
    ``"initial"``.
    """

    pathname: str
    search: str = ""
    state: Any = None
    key: str = INITIAL_KEY

    @property
    def href(self) -> str:
        return self.pathname + self.search


def split_uri(uri: str) -> tuple[str, str]:
    """Split ``"/a?b=c"`` into ``("/a", "?b=c")``."""
    pathname, sep, query = uri.partition("?")
    return pathname, (f"?{query}" if sep and query else "")


def get_location(source: "HistorySource") -> Location:
    state = source.history.state
    key = None
    if isinstance(state, Mapping):
        key = state.get("key")
    raw = source.location
    return Location(
        pathname=raw.pathname,
        search=raw.search or "",
        state=state,
        key=str(key) if key else INITIAL_KEY,
    )
