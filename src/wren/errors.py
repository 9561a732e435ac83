"""Wren exception hierarchy.

Shared across the routing core, the router facade, and history so every
module raises and catches the same types.
"""


class WrenError(Exception):
    """Base for all wren-specific errors."""


class ConfigurationError(WrenError):
    """Raised when a route declaration is structurally invalid.

    Raised while routes are declared, before any matching happens. Not
    meant to be caught and retried; fix the declaration.
    """


class ReservedNameError(ConfigurationError):
    """A dynamic segment uses a reserved parameter name (``uri`` or ``path``).

    Raised by the matcher when it reaches the offending segment.
    """

    def __init__(self, name: str, pattern: str) -> None:
        self.name = name
        self.pattern = pattern
        super().__init__(
            f"Dynamic segment {name!r} is a reserved name. "
            f"Use a different name in pattern {pattern!r}."
        )


class NavigationError(WrenError):
    """Navigation was requested on a location that cannot navigate.

    The server-side source raises this for every write.
    """


class HistoryWriteError(WrenError):
    """The backend rejected a push/replace write.

    Some hosts cap the number of history writes. ``History.navigate``
    recovers from this by falling back to a full navigation.
    """
