"""Transition — the completion signal returned by ``History.navigate``.

A transition resolves at most once, when the consuming layer reports the
new location as applied. It can be created from synchronous code: the
``anyio.Event`` used for awaiting is created lazily inside the first
awaiting task.
"""

from collections.abc import Callable, Generator
from typing import Any

import anyio


class Transition:
    """Single-resolution, awaitable navigation completion.

    Usage::

        transition = history.navigate("/next")
        ...
        await transition          # returns once _on_transition_complete() runs
    """

    __slots__ = ("_callbacks", "_done", "_event")

    def __init__(self) -> None:
        self._done = False
        self._event: anyio.Event | None = None  # Created lazily on first wait
        self._callbacks: list[Callable[[Transition], Any]] = []

    @property
    def done(self) -> bool:
        return self._done

    def add_done_callback(self, fn: Callable[["Transition"], Any]) -> None:
        """Call *fn* with this transition once it resolves (now, if it has)."""
        if self._done:
            fn(self)
        else:
            self._callbacks.append(fn)

    async def wait(self) -> None:
        if self._done:
            return
        if self._event is None:
            self._event = anyio.Event()
        await self._event.wait()

    def __await__(self) -> Generator[Any, None, None]:
        return self.wait().__await__()

    def _resolve(self) -> None:
        if self._done:
            return
        self._done = True
        if self._event is not None:
            self._event.set()
        callbacks, self._callbacks = self._callbacks, []
        for fn in callbacks:
            fn(self)

    def __repr__(self) -> str:
        return f"<Transition {'done' if self._done else 'pending'}>"
