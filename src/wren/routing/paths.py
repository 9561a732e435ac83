"""Relative path resolution, parameter insertion, and redirect validation.

Every path is resolved as though it were a directory, never a file.
Relative URIs in a browser are awkward because you can be "in a
directory" or "at a file"::

    browser_resolve("foo", "/bar/")  ->  /bar/foo
    browser_resolve("foo", "/bar")   ->  /foo

A shell has no such distinction: you can only ``cd`` from a directory.
Resolving the same way means a link only needs to say ``"deeper"`` to go
one level below the current uri.
"""

from collections.abc import Mapping

from wren.routing.segments import is_dynamic, param_name, segmentize, starts_with


def add_query(pathname: str, query: str | None) -> str:
    return f"{pathname}?{query}" if query else pathname


def _split_query(uri: str) -> tuple[str, str | None]:
    pathname, sep, query = uri.partition("?")
    return pathname, (query if sep else None)


def resolve(to: str, base: str) -> str:
    """Resolve *to* against *base* and return an absolute path.

    Examples::

        resolve("/foo/bar", "/baz/qux")   -> "/foo/bar"
        resolve("?a=b", "/users?b=c")     -> "/users?a=b"
        resolve("profile", "/users/789")  -> "/users/789/profile"
        resolve("./", "/users/123")       -> "/users/123"
        resolve("../", "/users/123")      -> "/users"
        resolve("../..", "/users/123")    -> "/"
        resolve("../../one", "/a/b/c/d")  -> "/a/b/one"
        resolve(".././one", "/a/b/c/d")   -> "/a/b/c/one"
    """
    if starts_with(to, "/"):
        return to

    to_pathname, to_query = _split_query(to)
    base_pathname, _ = _split_query(base)

    to_segments = segmentize(to_pathname)
    base_segments = segmentize(base_pathname)

    # Query only: keep the base pathname
    if to_segments[0] == "":
        return add_query(base_pathname, to_query)

    if not starts_with(to_segments[0], "."):
        pathname = "/".join(base_segments + to_segments)
        prefix = "" if base_pathname == "/" else "/"
        return add_query(prefix + pathname, to_query)

    segments: list[str] = []
    for segment in base_segments + to_segments:
        if segment == "..":
            if segments:
                segments.pop()
        elif segment not in (".", ""):
            segments.append(segment)

    return add_query("/" + "/".join(segments), to_query)


def insert_params(template: str, params: Mapping[str, str]) -> str:
    """Substitute *params* into the dynamic segments of *template*.

    ``insert_params("/users/:id/*", {"id": "7"})`` -> ``"/users/7/*"``

    Raises ``KeyError`` if *params* has no value for a dynamic segment.
    """
    parts: list[str] = []
    for segment in segmentize(template):
        name = param_name(segment)
        if name is None:
            parts.append(segment)
            continue
        try:
            parts.append(params[name])
        except KeyError:
            msg = f"No value for parameter {name!r} in {template!r}"
            raise KeyError(msg) from None
    return "/" + "/".join(parts)


def validate_redirect(from_: str, to: str) -> bool:
    """Return True if both patterns declare exactly the same dynamic segments."""
    from_dynamic = sorted(s for s in segmentize(from_) if is_dynamic(s))
    to_dynamic = sorted(s for s in segmentize(to) if is_dynamic(s))
    return from_dynamic == to_dynamic
