"""Shared type aliases used across wren modules."""

from collections.abc import Callable
from typing import Any, TypeAlias

# History listener — called with no arguments after the location changes
Listener: TypeAlias = Callable[[], None]

# Returned by ``History.listen``; detaches the listener when called
Unsubscribe: TypeAlias = Callable[[], None]

# Backend event handler (e.g. "popstate"); receives the host's event object
EventHandler: TypeAlias = Callable[..., Any]
