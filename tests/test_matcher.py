"""Tests for wren.routing.matcher — pick() and match()."""

import itertools

import pytest

from wren.errors import ReservedNameError
from wren.routing.matcher import match, pick
from wren.routing.route import Route
from wren.testing import assert_matches, assert_no_match


def _routes(*patterns: str) -> list[Route]:
    return [Route(p) for p in patterns]


class TestPickStatic:
    def test_root(self) -> None:
        assert_matches(pick(_routes("/"), "/"), "/", params={}, uri="/")

    def test_simple_path(self) -> None:
        assert_matches(pick(_routes("/", "/users"), "/users"), "/users", uri="/users")

    def test_trailing_slash_ignored(self) -> None:
        assert_matches(pick(_routes("/users"), "/users/"), "/users", uri="/users")

    def test_uri_longer_than_route_misses(self) -> None:
        assert_no_match(pick(_routes("/users"), "/users/42"))

    def test_uri_shorter_than_route_misses(self) -> None:
        assert_no_match(pick(_routes("/users/:id"), "/users"))

    def test_different_literal_misses(self) -> None:
        assert_no_match(pick(_routes("/users/:id/profile"), "/users/123/settings"))


class TestPickParams:
    def test_dynamic(self) -> None:
        result = pick(_routes("/users/:id"), "/users/42")
        assert_matches(result, "/users/:id", params={"id": "42"}, uri="/users/42")

    def test_multiple(self) -> None:
        result = pick(_routes("/users/:userId/posts/:postId"), "/users/1/posts/9")
        assert_matches(result, "/users/:userId/posts/:postId", params={"userId": "1", "postId": "9"})

    def test_values_are_decoded(self) -> None:
        result = pick(_routes("/tags/:tag"), "/tags/caf%C3%A9%20bar")
        assert_matches(result, "/tags/:tag", params={"tag": "café bar"})

    def test_query_is_ignored(self) -> None:
        result = pick(_routes("/users/:id"), "/users/42?tab=posts")
        assert_matches(result, "/users/:id", params={"id": "42"}, uri="/users/42")

    def test_static_beats_dynamic(self) -> None:
        for routes in (_routes("/users/:id", "/users/me"), _routes("/users/me", "/users/:id")):
            assert_matches(pick(routes, "/users/me"), "/users/me", params={})

    def test_dynamic_still_matches_other_values(self) -> None:
        routes = _routes("/users/me", "/users/:id")
        assert_matches(pick(routes, "/users/you"), "/users/:id", params={"id": "you"})


class TestPickSplat:
    def test_captures_rest(self) -> None:
        routes = [Route("/"), Route("/users/:id"), Route("/users/:id/*"), Route(is_default=True)]
        result = pick(routes, "/users/42/settings/profile")
        assert_matches(
            result,
            "/users/:id/*",
            params={"id": "42", "*": "settings/profile"},
            uri="/users/42",
        )

    def test_splat_decodes_each_segment(self) -> None:
        result = pick(_routes("/files/*"), "/files/my%20docs/a%2Fb")
        assert result is not None
        assert result.params["*"] == "my docs/a/b"

    def test_splat_with_nothing_left(self) -> None:
        result = pick(_routes("/files/*"), "/files")
        assert_matches(result, "/files/*", params={"*": ""}, uri="/files")

    def test_static_beats_splat(self) -> None:
        result = pick(_routes("/files/*", "/files/readme"), "/files/readme")
        assert_matches(result, "/files/readme")

    def test_root_splat_catches_everything(self) -> None:
        result = pick(_routes("/*"), "/a/b")
        assert_matches(result, "/*", params={"*": "a/b"}, uri="/")


class TestPickDefault:
    def test_default_when_nothing_matches(self) -> None:
        routes = [Route("/a"), Route(is_default=True, payload="not-found")]
        result = pick(routes, "/b?x=1")
        assert_matches(result, None, params={}, uri="/b?x=1")
        assert result is not None
        assert result.route.payload == "not-found"

    def test_default_not_used_when_something_matches(self) -> None:
        routes = [Route(is_default=True), Route("/a")]
        assert_matches(pick(routes, "/a"), "/a")

    def test_first_default_wins(self) -> None:
        routes = [Route(is_default=True, payload=1), Route(is_default=True, payload=2)]
        result = pick(routes, "/nowhere")
        assert result is not None
        assert result.route.payload == 1

    def test_no_default_no_match(self) -> None:
        assert pick(_routes("/a", "/b"), "/c") is None

    def test_no_routes(self) -> None:
        assert pick([], "/") is None


class TestReservedNames:
    @pytest.mark.parametrize("name", ["uri", "path"])
    def test_reserved_name_raises(self, name: str) -> None:
        with pytest.raises(ReservedNameError) as exc_info:
            pick(_routes(f"/:{name}"), "/something")
        assert exc_info.value.name == name
        assert f"/:{name}" in str(exc_info.value)

    def test_root_uri_skips_check(self) -> None:
        routes = [Route("/:uri"), Route(is_default=True)]
        assert_matches(pick(routes, "/"), None)

    def test_root_uri_compares_dynamic_segment_literally(self) -> None:
        assert_no_match(pick(_routes("/:id"), "/"))

    def test_unreached_segment_does_not_raise(self) -> None:
        assert_no_match(pick(_routes("/users/:path"), "/posts/1"))

    def test_custom_reserved_names(self) -> None:
        with pytest.raises(ReservedNameError):
            pick(_routes("/:slug"), "/x", reserved_names=("slug",))
        assert_matches(pick(_routes("/:uri"), "/x", reserved_names=()), "/:uri", params={"uri": "x"})


class TestOrderIndependence:
    PATTERNS = ("/", "/users", "/users/:id", "/users/me", "/users/:id/*", "/files/*")

    @pytest.mark.parametrize(
        "uri",
        ["/", "/users", "/users/me", "/users/42", "/users/42/a/b", "/files/x/y", "/nope/x"],
    )
    def test_every_permutation_agrees(self, uri: str) -> None:
        base = [*_routes(*self.PATTERNS), Route(is_default=True)]
        expected = pick(base, uri)
        assert expected is not None
        for perm in itertools.permutations(base):
            result = pick(perm, uri)
            assert result is not None
            assert result.route is expected.route
            assert result.params == expected.params
            assert result.uri == expected.uri


class TestMatch:
    def test_match(self) -> None:
        result = match("/users/:id", "/users/7")
        assert_matches(result, "/users/:id", params={"id": "7"}, uri="/users/7")

    def test_no_match(self) -> None:
        assert match("/users/:id", "/posts/7") is None

    def test_relative_pattern(self) -> None:
        assert_matches(match("users/:id", "/users/7"), "users/:id", params={"id": "7"})

    def test_empty_pattern_is_root(self) -> None:
        assert_matches(match("", "/"), "/", params={}, uri="/")
        assert match("", "/users") is None
