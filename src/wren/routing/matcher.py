"""Ranked, order-independent URI matching.

Routes are ranked with ``rank_routes`` on every call and walked in order;
the first route that does not miss wins. There is no backtracking and no
cache.
"""

from collections.abc import Iterable, Sequence
from urllib.parse import unquote

from wren.errors import ReservedNameError
from wren.routing.rank import rank_routes
from wren.routing.route import Route, RouteMatch
from wren.routing.segments import is_splat, param_name, segmentize

RESERVED_NAMES: tuple[str, ...] = ("uri", "path")


def pick(
    routes: Iterable[Route],
    uri: str,
    *,
    reserved_names: Sequence[str] = RESERVED_NAMES,
) -> RouteMatch | None:
    """Pick the best route for *uri*.

    Returns the first non-missing route in ranked order, else the first
    default route (with empty params), else ``None``.

    Raises ``ReservedNameError`` when a dynamic segment that has to be
    captured is named in *reserved_names*. Root uris never capture, so the
    check does not run for them.
    """
    uri_pathname = uri.split("?", 1)[0]
    uri_segments = segmentize(uri_pathname)
    is_root_uri = uri_segments[0] == ""

    default: RouteMatch | None = None

    for ranked in rank_routes(routes):
        route = ranked.route

        if route.is_default:
            if default is None:
                default = RouteMatch(route=route, params={}, uri=uri)
            continue

        assert route.pattern is not None
        result = _match_route(route, route.pattern, uri_segments, is_root_uri, reserved_names)
        if result is not None:
            return result

    return default


def _match_route(
    route: Route,
    pattern: str,
    uri_segments: list[str],
    is_root_uri: bool,
    reserved_names: Sequence[str],
) -> RouteMatch | None:
    route_segments = segmentize(pattern)
    params: dict[str, str] = {}
    end = max(len(uri_segments), len(route_segments))
    index = 0

    while index < end:
        route_segment = route_segments[index] if index < len(route_segments) else None

        if route_segment is not None and is_splat(route_segment):
            # /files/* against /files/documents/work -> "documents/work"
            params["*"] = "/".join(unquote(s) for s in uri_segments[index:])
            break

        if index >= len(uri_segments):
            # uri is shorter than the route
            return None

        uri_segment = uri_segments[index]
        name = param_name(route_segment) if route_segment is not None else None

        if name is not None and not is_root_uri:
            if name in reserved_names:
                raise ReservedNameError(name, pattern)
            params[name] = unquote(uri_segment)
        elif route_segment != uri_segment:
            return None

        index += 1

    return RouteMatch(route=route, params=params, uri="/" + "/".join(uri_segments[:index]))


def match(pattern: str, uri: str) -> RouteMatch | None:
    """Match a single ad-hoc *pattern* against *uri*.

    An empty pattern is the root, same as ``"/"``.
    """
    return pick([Route(pattern=pattern or "/")], uri)
