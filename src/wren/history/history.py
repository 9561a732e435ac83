"""History — navigation state on top of a history source.

Owns the current ``Location``, turns navigation requests into
push/replace writes, tracks whether a transition is in flight, and
notifies listeners. Not thread-safe: one owner issues navigations
serially.
"""

import functools
import logging
import time
from collections.abc import Mapping
from typing import Any

from wren._internal.types import Listener, Unsubscribe
from wren.config import RouterConfig
from wren.errors import HistoryWriteError
from wren.history.location import Location, get_location
from wren.history.source import HistorySource, MemorySource, get_source
from wren.history.transition import Transition

logger = logging.getLogger("wren.history")


class History:
    """Navigation controller wrapping a ``HistorySource``.

    Usage::

        history = History(MemorySource())
        unlisten = history.listen(lambda: render(history.location))
        transition = history.navigate("/users/42")
        # ... once the new location is on screen:
        history._on_transition_complete()

    While a transition is in flight every ``navigate()`` replaces the
    current entry instead of pushing a new one.
    """

    __slots__ = ("_last_key", "_listeners", "_location", "_source", "_transition", "_transitioning")

    def __init__(self, source: HistorySource) -> None:
        self._source = source
        self._listeners: list[Listener] = []
        self._location = get_location(source)
        self._transitioning = False
        self._transition: Transition | None = None
        self._last_key = 0

    @property
    def source(self) -> HistorySource:
        return self._source

    @property
    def location(self) -> Location:
        return self._location

    @property
    def transitioning(self) -> bool:
        return self._transitioning

    def navigate(
        self,
        to: str,
        *,
        state: Mapping[str, Any] | None = None,
        replace: bool = False,
    ) -> Transition:
        """Write *to* to the source and return the transition.

        The state is copied and stamped with a fresh ``"key"``. Raises
        ``NavigationError`` if the source cannot navigate at all.
        """
        entry_state = {**(state or {}), "key": self._next_key()}
        write_replace = self._transitioning or replace

        try:
            if write_replace:
                self._source.history.replace_state(entry_state, None, to)
            else:
                self._source.history.push_state(entry_state, None, to)
        except HistoryWriteError:
            logger.warning(
                "History write to %r rejected, falling back to full navigation",
                to,
                exc_info=True,
            )
            if replace:
                self._source.replace(to)
            else:
                self._source.assign(to)

        logger.debug("navigate %s %r", "replace" if write_replace else "push", to)

        self._location = get_location(self._source)
        self._transitioning = True
        transition = self._transition = Transition()
        self._notify()
        return transition

    def _on_transition_complete(self) -> None:
        """Mark the in-flight transition as applied and resolve it."""
        self._transitioning = False
        if self._transition is not None:
            self._transition._resolve()

    def listen(self, listener: Listener) -> Unsubscribe:
        """Call *listener* after every navigation and backend change.

        Returns a function that stops listening.
        """
        self._listeners.append(listener)

        def on_popstate(event: Any = None) -> None:
            self._location = get_location(self._source)
            logger.debug("popstate %r", self._location.href)
            listener()

        self._source.add_event_listener("popstate", on_popstate)

        def unlisten() -> None:
            self._source.remove_event_listener("popstate", on_popstate)
            self._listeners = [fn for fn in self._listeners if fn is not listener]

        return unlisten

    def _notify(self) -> None:
        # Snapshot: listeners may unsubscribe while we iterate
        for listener in list(self._listeners):
            listener()

    def _next_key(self) -> str:
        key = max(time.time_ns(), self._last_key + 1)
        self._last_key = key
        return str(key)


def create_history(
    source: HistorySource | None = None,
    *,
    config: RouterConfig | None = None,
) -> History:
    """Build a ``History``; without a source, use an in-memory stack."""
    if source is None:
        source = MemorySource((config or RouterConfig()).initial_pathname)
    return History(source)


@functools.cache
def get_default_history() -> History:
    """Return the process-wide ``History``.

    Built once, on first call, from ``get_source()``: a browser window
    when one is available, otherwise an in-memory stack. It lives for the
    rest of the process.
    """
    return History(get_source())


def navigate(
    to: str,
    *,
    state: Mapping[str, Any] | None = None,
    replace: bool = False,
) -> Transition:
    """Navigate the default history. See ``History.navigate``."""
    return get_default_history().navigate(to, state=state, replace=replace)
