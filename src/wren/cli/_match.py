"""``wren match`` and ``wren rank`` — inspect how routes compete.

Patterns are given on the command line in any order; the output shows
what the matcher does with them.
"""

import argparse
import sys

from wren.errors import ConfigurationError
from wren.routing.matcher import pick
from wren.routing.rank import rank_routes
from wren.routing.route import Route


def _build_routes(patterns: list[str], *, default: bool = False) -> list[Route]:
    routes = [Route(pattern=p) for p in patterns]
    if default:
        routes.append(Route(is_default=True))
    return routes


def run_match(args: argparse.Namespace) -> None:
    """Print the winning route, its params, and the matched uri.

    Exits with status 1 when nothing matches or a pattern is invalid.
    """
    try:
        result = pick(_build_routes(args.patterns, default=args.default), args.uri)
    except ConfigurationError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        raise SystemExit(1) from exc

    if result is None:
        print("No match.", file=sys.stderr)
        raise SystemExit(1)

    pattern = "(default)" if result.route.is_default else result.route.pattern
    print(f"pattern  {pattern}")
    print(f"uri      {result.uri}")
    for name, value in result.params.items():
        print(f"param    {name}={value}")


def run_rank(args: argparse.Namespace) -> None:
    """Print patterns highest score first."""
    ranked = rank_routes(_build_routes(args.patterns))

    width = max(len(r.route.pattern or "") for r in ranked)
    width = max(width, 7)  # "PATTERN" header
    fmt = f"{{:>5}}  {{:>5}}  {{:<{width}}}"
    print(fmt.format("SCORE", "INDEX", "PATTERN"))
    print("-" * (width + 14))
    for r in ranked:
        print(fmt.format(r.score, r.index, r.route.pattern))
