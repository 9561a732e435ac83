"""Tests for wren.routing.rank — route scoring and ordering."""

from wren.routing.rank import rank_route, rank_routes, score_pattern
from wren.routing.route import Route


def _patterns(ranked: list) -> list[str | None]:
    return [r.route.pattern for r in ranked]


class TestScorePattern:
    def test_root(self) -> None:
        assert score_pattern("/") == 5

    def test_static(self) -> None:
        assert score_pattern("/users") == 7

    def test_dynamic(self) -> None:
        assert score_pattern("/users/:id") == 13

    def test_static_beats_dynamic(self) -> None:
        assert score_pattern("/users/me") > score_pattern("/users/:id")

    def test_splat_ranks_below_shallower_static(self) -> None:
        assert score_pattern("/files/*") == 6
        assert score_pattern("/files/*") < score_pattern("/files")

    def test_dynamic_beats_splat(self) -> None:
        assert score_pattern("/users/:id") > score_pattern("/users/*")

    def test_splat_beats_root(self) -> None:
        assert score_pattern("/users/*") > score_pattern("/")


class TestRankRoute:
    def test_default_scores_zero(self) -> None:
        ranked = rank_route(Route(is_default=True), 3)
        assert ranked.score == 0
        assert ranked.index == 3

    def test_pattern(self) -> None:
        route = Route("/users/:id")
        ranked = rank_route(route, 0)
        assert ranked.route is route
        assert ranked.score == 13


class TestRankRoutes:
    def test_descending_score(self) -> None:
        routes = [Route("/"), Route("/users/:id"), Route("/users/me"), Route("/users/*")]
        assert _patterns(rank_routes(routes)) == ["/users/me", "/users/:id", "/users/*", "/"]

    def test_default_last(self) -> None:
        routes = [Route(is_default=True), Route("/")]
        ranked = rank_routes(routes)
        assert ranked[-1].route.is_default

    def test_ties_keep_declaration_order(self) -> None:
        routes = [Route("/b/:id"), Route("/:section/a"), Route("/a/:id")]
        ranked = rank_routes(routes)
        assert [r.score for r in ranked] == [13, 13, 13]
        assert [r.index for r in ranked] == [0, 1, 2]

    def test_empty(self) -> None:
        assert rank_routes([]) == []

    def test_accepts_generator(self) -> None:
        ranked = rank_routes(Route(p) for p in ("/", "/a"))
        assert _patterns(ranked) == ["/a", "/"]
