"""Route scoring.

Every segment earns ``SEGMENT_POINTS``, then a bonus by kind so that::

    static > dynamic > splat > root

A splat gives back more than its segment points, so ``/files/*`` ranks
below ``/files`` even though it has more segments. Routes can be declared
in any order; the ranking decides.
"""

from collections.abc import Iterable

from wren.routing.route import RankedRoute, Route
from wren.routing.segments import SegmentKind, classify, segmentize

SEGMENT_POINTS = 4
STATIC_POINTS = 3
DYNAMIC_POINTS = 2
SPLAT_PENALTY = 1
ROOT_POINTS = 1

_KIND_POINTS: dict[SegmentKind, int] = {
    SegmentKind.ROOT: ROOT_POINTS,
    SegmentKind.DYNAMIC: DYNAMIC_POINTS,
    SegmentKind.SPLAT: -(SEGMENT_POINTS + SPLAT_PENALTY),
    SegmentKind.STATIC: STATIC_POINTS,
}


def score_pattern(pattern: str) -> int:
    return sum(SEGMENT_POINTS + _KIND_POINTS[classify(s)] for s in segmentize(pattern))


def rank_route(route: Route, index: int) -> RankedRoute:
    """Score a single route. Default routes always score 0."""
    if route.is_default or route.pattern is None:
        score = 0
    else:
        score = score_pattern(route.pattern)
    return RankedRoute(route=route, score=score, index=index)


def rank_routes(routes: Iterable[Route]) -> list[RankedRoute]:
    """Rank routes by score (highest first), ties in declaration order."""
    ranked = [rank_route(route, i) for i, route in enumerate(routes)]
    ranked.sort(key=lambda r: (-r.score, r.index))
    return ranked
