"""Wren — client-side URI routing and navigation history.

Picks the best route for a uri regardless of declaration order, extracts
its parameters, and navigates through a history that works the same over
a browser window or an in-memory stack.

Basic usage::

    from wren import Route, pick

    routes = [Route("/"), Route("/users/:id"), Route("/users/me")]
    pick(routes, "/users/me").route.pattern     # "/users/me"
    pick(routes, "/users/42").params            # {"id": "42"}

Navigation::

    from wren import History, MemorySource

    history = History(MemorySource())
    transition = history.navigate("/users/42")
    history._on_transition_complete()
    await transition
"""

__version__ = "0.1.0"
__all__ = [
    "ConfigurationError",
    "History",
    "HistoryWriteError",
    "Location",
    "MemorySource",
    "NavigationError",
    "Redirect",
    "Render",
    "ReservedNameError",
    "Route",
    "RouteMatch",
    "Router",
    "RouterConfig",
    "ServerSource",
    "Transition",
    "WindowSource",
    "WrenError",
    "create_history",
    "get_default_history",
    "insert_params",
    "match",
    "navigate",
    "pick",
    "resolve",
    "validate_redirect",
]


def __getattr__(name: str) -> object:
    """Lazy imports for public API.

    Keeps ``import wren`` fast while providing a clean top-level API.
    """
    if name in ("Route", "RouteMatch"):
        from wren.routing import route as _route

        return getattr(_route, name)

    if name in ("pick", "match"):
        from wren.routing import matcher as _matcher

        return getattr(_matcher, name)

    if name in ("resolve", "insert_params", "validate_redirect"):
        from wren.routing import paths as _paths

        return getattr(_paths, name)

    if name in ("Router", "Render", "Redirect"):
        from wren.routing import router as _router

        return getattr(_router, name)

    if name == "RouterConfig":
        from wren.config import RouterConfig

        return RouterConfig

    if name in (
        "History",
        "Location",
        "MemorySource",
        "ServerSource",
        "Transition",
        "WindowSource",
        "create_history",
        "get_default_history",
        "navigate",
    ):
        from wren import history as _history

        return getattr(_history, name)

    if name in (
        "ConfigurationError",
        "HistoryWriteError",
        "NavigationError",
        "ReservedNameError",
        "WrenError",
    ):
        from wren import errors as _errors

        return getattr(_errors, name)

    msg = f"module {__name__!r} has no attribute {name!r}"
    raise AttributeError(msg)
