"""Route, RankedRoute and RouteMatch frozen dataclasses."""

from dataclasses import InitVar, dataclass
from typing import Any

from wren.errors import ConfigurationError
from wren.routing.paths import validate_redirect


@dataclass(frozen=True, slots=True)
class Route:
    """A frozen route declaration.

    Pattern:   ``Route("/users/:id", payload=view)``
    Default:   ``Route(is_default=True, payload=not_found)``
    Redirect:  ``Route("/old/:id", redirect_to="/new/:id")``

    A redirect declared under a basepath passes the source it was declared
    with as ``redirect_from``; the dynamic-segment check then runs against
    that instead of the joined pattern, so segments contributed by the
    basepath don't count::

        Route("/users/:id/old", redirect_to="/new", redirect_from="old")

    The matcher only reads routes; whoever declares them owns them.
    """

    pattern: str | None = None
    is_default: bool = False
    payload: Any = None
    redirect_to: str | None = None
    redirect_from: InitVar[str | None] = None

    def __post_init__(self, redirect_from: str | None) -> None:
        if self.redirect_to is not None or (not self.pattern and not self.is_default):
            _check_declaration(self, self.pattern if redirect_from is None else redirect_from)

    @property
    def is_redirect(self) -> bool:
        return self.redirect_to is not None


def _check_declaration(route: Route, source: str | None) -> None:
    if route.redirect_to is None:
        msg = (
            "Routes must have a pattern or be marked default. "
            f"None found on route with payload {route.payload!r}."
        )
        raise ConfigurationError(msg)

    if not route.pattern or not source or not route.redirect_to:
        msg = (
            f"Redirect from={source!r} to={route.redirect_to!r} "
            "requires both a source and a destination pattern."
        )
        raise ConfigurationError(msg)

    if not validate_redirect(source, route.redirect_to):
        msg = (
            f"Redirect from={source!r} to={route.redirect_to!r} has "
            "mismatched dynamic segments. Both patterns must declare exactly "
            "the same dynamic segments."
        )
        raise ConfigurationError(msg)


@dataclass(frozen=True, slots=True)
class RankedRoute:
    """A route with its score and declaration index for one matching pass."""

    route: Route
    score: int
    index: int


@dataclass(frozen=True, slots=True)
class RouteMatch:
    """Result of a successful match.

    ``params`` holds one entry per dynamic segment, plus ``"*"`` for a
    splat. ``uri`` is the absolute portion of the input that the route
    consumed.
    """

    route: Route
    params: dict[str, str]
    uri: str
