"""History sources — the backends a ``History`` writes to.

A source looks like a browser ``window``::

    source.location                      # has .pathname and .search
    source.add_event_listener("popstate", fn)
    source.remove_event_listener("popstate", fn)
    source.assign(uri) / source.replace(uri)
    source.history.push_state(state, title, uri)
    source.history.replace_state(state, title, uri)
    source.history.state

Three sources ship with wren:

- ``MemorySource`` keeps the entry stack in memory (tests, non-browser hosts).
- ``WindowSource`` wraps a real browser window (e.g. ``js.window`` under Pyodide).
- ``ServerSource`` is a fixed location for server-side rendering; it
  cannot navigate.
"""

import importlib
import logging
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any, Protocol

from wren._internal.types import EventHandler
from wren.errors import HistoryWriteError, NavigationError
from wren.history.location import split_uri

logger = logging.getLogger("wren.history")


# -- Protocols --


class RawLocation(Protocol):
    pathname: str
    search: str


class SourceHistory(Protocol):
    @property
    def state(self) -> Any: ...

    def push_state(self, state: Any, title: str | None, uri: str) -> None: ...

    def replace_state(self, state: Any, title: str | None, uri: str) -> None: ...


class HistorySource(Protocol):
    """What ``History`` needs from a backend."""

    @property
    def location(self) -> RawLocation: ...

    @property
    def history(self) -> SourceHistory: ...

    def add_event_listener(self, name: str, fn: EventHandler) -> None: ...

    def remove_event_listener(self, name: str, fn: EventHandler) -> None: ...

    def assign(self, uri: str) -> None: ...

    def replace(self, uri: str) -> None: ...


# -- Memory --


@dataclass(frozen=True, slots=True)
class Entry:
    """One entry of an in-memory history stack."""

    pathname: str
    search: str = ""

    @classmethod
    def from_uri(cls, uri: str) -> "Entry":
        pathname, search = split_uri(uri)
        return cls(pathname=pathname, search=search)


class MemoryHistory:
    """The ``history`` half of a ``MemorySource``."""

    __slots__ = ("_entries", "_index", "_source", "_states")

    def __init__(self, source: "MemorySource", initial: Entry) -> None:
        self._source = source
        self._entries: list[Entry] = [initial]
        self._states: list[Any] = [None]
        self._index = 0

    @property
    def entries(self) -> list[Entry]:
        return list(self._entries)

    @property
    def index(self) -> int:
        return self._index

    @property
    def state(self) -> Any:
        return self._states[self._index]

    @property
    def current(self) -> Entry:
        return self._entries[self._index]

    def push_state(self, state: Any, title: str | None, uri: str) -> None:
        """Append an entry after the current one and move to it.

        Entries ahead of the current index (left over from ``back()``) are
        dropped, as a browser does.
        """
        del self._entries[self._index + 1 :]
        del self._states[self._index + 1 :]
        self._entries.append(Entry.from_uri(uri))
        self._states.append(state)
        self._index += 1

    def replace_state(self, state: Any, title: str | None, uri: str) -> None:
        self._entries[self._index] = Entry.from_uri(uri)
        self._states[self._index] = state

    def go(self, delta: int) -> None:
        """Move *delta* entries and fire ``popstate`` if the index changed."""
        index = max(0, min(len(self._entries) - 1, self._index + delta))
        if index == self._index:
            return
        self._index = index
        self._source.dispatch_event("popstate")

    def back(self) -> None:
        self.go(-1)

    def forward(self) -> None:
        self.go(1)


class MemorySource:
    """An in-memory source that starts with a single entry.

    Usage::

        source = MemorySource("/start")
        source.history.push_state({"key": "1"}, None, "/next?tab=2")
        source.location        # Entry(pathname="/next", search="?tab=2")
        source.history.back()  # fires "popstate"
    """

    __slots__ = ("_history", "_listeners")

    def __init__(self, initial_pathname: str = "/") -> None:
        self._history = MemoryHistory(self, Entry.from_uri(initial_pathname))
        self._listeners: dict[str, list[EventHandler]] = {}

    @property
    def location(self) -> Entry:
        return self._history.current

    @property
    def history(self) -> MemoryHistory:
        return self._history

    def add_event_listener(self, name: str, fn: EventHandler) -> None:
        self._listeners.setdefault(name, []).append(fn)

    def remove_event_listener(self, name: str, fn: EventHandler) -> None:
        handlers = self._listeners.get(name, [])
        if fn in handlers:
            handlers.remove(fn)

    def dispatch_event(self, name: str) -> None:
        # Snapshot: handlers may unsubscribe while we iterate
        for fn in list(self._listeners.get(name, ())):
            fn(None)

    def assign(self, uri: str) -> None:
        self._history.push_state(None, None, uri)

    def replace(self, uri: str) -> None:
        self._history.replace_state(None, None, uri)


# -- Browser window --


def _identity(value: Any) -> Any:
    return value


class WindowHistory:
    """Adapts ``window.history`` to the ``SourceHistory`` protocol."""

    __slots__ = ("_history", "_to_js", "_to_py")

    def __init__(
        self,
        history: Any,
        to_js: Callable[[Any], Any],
        to_py: Callable[[Any], Any],
    ) -> None:
        self._history = history
        self._to_js = to_js
        self._to_py = to_py

    @property
    def state(self) -> Any:
        state = self._history.state
        return None if state is None else self._to_py(state)

    def push_state(self, state: Any, title: str | None, uri: str) -> None:
        self._write(self._history.pushState, state, title, uri)

    def replace_state(self, state: Any, title: str | None, uri: str) -> None:
        self._write(self._history.replaceState, state, title, uri)

    def _write(self, method: Callable[..., Any], state: Any, title: str | None, uri: str) -> None:
        try:
            method(self._to_js(state), title, uri)
        except Exception as exc:
            # Hosts raise their own exception types (e.g. a JS SecurityError
            # after too many pushState calls).
            msg = f"History write to {uri!r} was rejected: {exc}"
            raise HistoryWriteError(msg) from exc


class WindowSource:
    """Wraps a browser-like ``window`` object.

    Under Pyodide pass the conversion helpers so state dicts cross the
    JS boundary::

        from pyodide.ffi import create_proxy, to_js
        source = WindowSource(js.window, to_js=to_js, create_proxy=create_proxy)

    ``get_source()`` does this for you.
    """

    __slots__ = ("_create_proxy", "_history", "_proxies", "_window")

    def __init__(
        self,
        window: Any,
        *,
        to_js: Callable[[Any], Any] | None = None,
        to_py: Callable[[Any], Any] | None = None,
        create_proxy: Callable[[Any], Any] | None = None,
    ) -> None:
        self._window = window
        self._create_proxy = create_proxy or _identity
        self._proxies: dict[tuple[str, EventHandler], Any] = {}
        self._history = WindowHistory(
            window.history,
            to_js or _identity,
            to_py or _to_py,
        )

    @property
    def location(self) -> RawLocation:
        return self._window.location

    @property
    def history(self) -> WindowHistory:
        return self._history

    def add_event_listener(self, name: str, fn: EventHandler) -> None:
        proxy = self._create_proxy(fn)
        self._proxies[(name, fn)] = proxy
        self._window.addEventListener(name, proxy)

    def remove_event_listener(self, name: str, fn: EventHandler) -> None:
        proxy = self._proxies.pop((name, fn), None)
        if proxy is None:
            return
        self._window.removeEventListener(name, proxy)
        destroy = getattr(proxy, "destroy", None)
        if destroy is not None:
            destroy()

    def assign(self, uri: str) -> None:
        self._window.location.assign(uri)

    def replace(self, uri: str) -> None:
        self._window.location.replace(uri)


def _to_py(value: Any) -> Any:
    convert = getattr(value, "to_py", None)
    return convert() if convert is not None else value


# -- Server --


class ServerSource:
    """A fixed location for server-side rendering.

    Reading works; every write raises ``NavigationError``.
    """

    __slots__ = ("_location",)

    def __init__(self, url: str) -> None:
        self._location = Entry.from_uri(url)

    @property
    def location(self) -> Entry:
        return self._location

    @property
    def history(self) -> "ServerSource":
        return self

    @property
    def state(self) -> None:
        return None

    def push_state(self, state: Any, title: str | None, uri: str) -> None:
        self._refuse(uri)

    def replace_state(self, state: Any, title: str | None, uri: str) -> None:
        self._refuse(uri)

    def add_event_listener(self, name: str, fn: EventHandler) -> None:
        pass

    def remove_event_listener(self, name: str, fn: EventHandler) -> None:
        pass

    def assign(self, uri: str) -> None:
        self._refuse(uri)

    def replace(self, uri: str) -> None:
        self._refuse(uri)

    def _refuse(self, uri: str) -> None:
        msg = f"Can't navigate to {uri!r} on the server."
        raise NavigationError(msg)


# -- Host detection --


def _browser_window() -> Any | None:
    try:
        js = importlib.import_module("js")
    except ImportError:
        return None
    window = getattr(js, "window", None)
    if window is None or getattr(window, "document", None) is None:
        return None
    return window


def can_use_dom() -> bool:
    """True when running inside a browser host (e.g. Pyodide)."""
    return _browser_window() is not None


def get_source() -> HistorySource:
    """Return a ``WindowSource`` in a browser host, else a ``MemorySource``."""
    window = _browser_window()
    if window is None:
        logger.debug("No browser window found, using in-memory history")
        return MemorySource()
    ffi = importlib.import_module("pyodide.ffi")
    return WindowSource(window, to_js=_state_to_js(ffi), create_proxy=ffi.create_proxy)


def _state_to_js(ffi: Any) -> Callable[[Any], Any]:
    object_from_entries = importlib.import_module("js").Object.fromEntries

    def convert(state: Any) -> Any:
        return ffi.to_js(state, dict_converter=object_from_entries)

    return convert
