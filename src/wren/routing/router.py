"""Route table with declaration-time checks and explicit match outcomes.

Routes are declared during setup, relative to the router's basepath, and
frozen with ``freeze()``. Nothing is precompiled: matching re-ranks on
every call.

A matched redirect route is reported as a ``Redirect`` value rather than
raised, so the caller decides when to navigate.
"""

import logging
from collections.abc import Callable, Mapping
from dataclasses import dataclass, replace
from typing import Any, TypeAlias

from wren.config import RouterConfig
from wren.history.history import History
from wren.history.transition import Transition
from wren.routing.matcher import match, pick
from wren.routing.paths import insert_params, resolve
from wren.routing.route import Route, RouteMatch
from wren.routing.segments import SPLAT, strip_slashes

logger = logging.getLogger("wren.routing")


@dataclass(frozen=True, slots=True)
class Render:
    """Render the matched route.

    ``basepath`` is where routes of a nested router under this match
    start.
    """

    match: RouteMatch
    basepath: str

    @property
    def payload(self) -> Any:
        return self.match.route.payload


@dataclass(frozen=True, slots=True)
class Redirect:
    """Navigate elsewhere instead of rendering."""

    to: str
    replace: bool = True


Outcome: TypeAlias = Render | Redirect


def join_paths(basepath: str, path: str) -> str:
    """Join a route path onto a basepath.

    ``"/"`` stands for the basepath itself::

        join_paths("/", "users")        -> "/users"
        join_paths("/app/", "/users/")  -> "/app/users"
        join_paths("/app", "/")         -> "/app"
    """
    if path == "/":
        return basepath
    return "/" + "/".join(p for p in (strip_slashes(basepath), strip_slashes(path)) if p)


class Router:
    """Declared routes plus match-time outcome selection.

    Usage::

        router = Router()
        router.add("/", home)
        router.add("/users/:id", user, nested=True)
        router.redirect("/people/:id", "/users/:id")
        router.add(payload=not_found, default=True)
        router.freeze()

        outcome = router.route("/people/42")   # Redirect(to="/users/42")
    """

    __slots__ = ("_config", "_frozen", "_routes")

    def __init__(self, config: RouterConfig | None = None) -> None:
        self._config = config or RouterConfig()
        self._routes: list[Route] = []
        self._frozen = False

    @property
    def config(self) -> RouterConfig:
        return self._config

    @property
    def basepath(self) -> str:
        return self._config.basepath

    @property
    def routes(self) -> list[Route]:
        """Declared routes, in declaration order."""
        return list(self._routes)

    def add(
        self,
        pattern: str | None = None,
        payload: Any = None,
        *,
        default: bool = False,
        nested: bool = False,
    ) -> Route:
        """Declare a route. Must be called before freeze().

        ``nested=True`` lets a child router match below this pattern by
        appending ``/*``. Raises ``ConfigurationError`` when the route has
        neither a pattern nor ``default=True``.
        """
        self._check_open()
        if default:
            route = Route(is_default=True, payload=payload)
        else:
            full = join_paths(self.basepath, pattern) if pattern else pattern
            if full and nested:
                full = join_paths(full, SPLAT)
            route = Route(pattern=full, payload=payload)
        self._routes.append(route)
        return route

    def redirect(self, from_: str, to: str, *, payload: Any = None) -> Route:
        """Declare a redirect from *from_* (relative to the basepath) to *to*.

        Raises ``ConfigurationError`` if either side is missing or *from_*
        and *to* do not declare the same dynamic segments. Segments that come
        from the basepath are not part of that comparison.
        """
        self._check_open()
        source = join_paths(self.basepath, from_) if from_ else from_
        route = Route(pattern=source, payload=payload, redirect_to=to, redirect_from=from_)
        self._routes.append(route)
        return route

    def freeze(self) -> None:
        """Stop accepting declarations. No more routes can be added."""
        self._frozen = True

    def route(self, uri: str) -> Outcome | None:
        """Pick the outcome for *uri*, or ``None`` if nothing matched."""
        result = pick(self._routes, uri, reserved_names=self._config.reserved_names)
        if result is None:
            logger.debug(
                "Nothing matched %r under basepath %r (%d routes)",
                uri,
                self.basepath,
                len(self._routes),
            )
            return None

        route = result.route
        if route.redirect_to is not None:
            return Redirect(to=insert_params(route.redirect_to, result.params))

        if route.is_default or route.pattern is None:
            basepath = self.basepath
        else:
            basepath = _child_basepath(route.pattern)
        return Render(match=result, basepath=basepath)

    def nested(self, render: Render) -> "Router":
        """Return an empty child router rooted at *render*'s basepath."""
        return Router(replace(self._config, basepath=render.basepath, primary=False))

    def _check_open(self) -> None:
        if self._frozen:
            msg = "Cannot add routes to a frozen router."
            raise RuntimeError(msg)


def _child_basepath(pattern: str) -> str:
    if pattern.endswith(SPLAT):
        pattern = pattern[: -len(SPLAT)]
    return "/" + strip_slashes(pattern)


def navigate_from(match: RouteMatch, history: History) -> Callable[..., Transition]:
    """Return a ``navigate`` that resolves relative targets against *match*.

    ``navigate_from(m, history)("edit")`` under ``m.uri == "/users/42"``
    navigates to ``/users/42/edit``.
    """

    def navigate(
        to: str,
        *,
        state: Mapping[str, Any] | None = None,
        replace: bool = False,
    ) -> Transition:
        return history.navigate(resolve(to, match.uri), state=state, replace=replace)

    return navigate


def match_relative(path: str, baseuri: str, pathname: str) -> RouteMatch | None:
    """Resolve *path* against *baseuri* and match it against *pathname*."""
    return match(resolve(path, baseuri), pathname)
