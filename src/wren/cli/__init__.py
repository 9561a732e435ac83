"""Wren CLI — inspect route ranking, matching, and path resolution.

Entry point registered as ``wren`` in ``pyproject.toml``::

    [project.scripts]
    wren = "wren.cli:main"
"""

import argparse
import logging
import sys


def main(argv: list[str] | None = None) -> None:
    """CLI entry point for the ``wren`` command."""
    parser = argparse.ArgumentParser(
        prog="wren",
        description="Wren — client-side URI routing and navigation history.",
    )
    parser.add_argument(
        "--log-level",
        default="warning",
        choices=["debug", "info", "warning", "error"],
        help="Logging level (default: warning)",
    )
    subparsers = parser.add_subparsers(dest="command")

    # -- wren match -------------------------------------------------------
    match_parser = subparsers.add_parser("match", help="Pick the best route for a uri")
    match_parser.add_argument("uri", help="Uri to match (e.g. /users/42?tab=1)")
    match_parser.add_argument("patterns", nargs="+", metavar="pattern", help="Route patterns")
    match_parser.add_argument(
        "--default",
        action="store_true",
        help="Add a default route used when nothing else matches",
    )

    # -- wren rank --------------------------------------------------------
    rank_parser = subparsers.add_parser("rank", help="Show routes in ranked order")
    rank_parser.add_argument("patterns", nargs="+", metavar="pattern", help="Route patterns")

    # -- wren resolve -----------------------------------------------------
    resolve_parser = subparsers.add_parser("resolve", help="Resolve a relative path")
    resolve_parser.add_argument("to", help="Target path (e.g. ../edit)")
    resolve_parser.add_argument("base", help="Base uri (e.g. /users/42)")

    args = parser.parse_args(argv)

    logging.basicConfig(
        level=args.log_level.upper(),
        format="%(levelname)s %(name)s: %(message)s",
    )

    if args.command is None:
        parser.print_help()
        sys.exit(0)

    if args.command == "match":
        from wren.cli._match import run_match

        run_match(args)
    elif args.command == "rank":
        from wren.cli._match import run_rank

        run_rank(args)
    elif args.command == "resolve":
        from wren.cli._resolve import run_resolve

        run_resolve(args)
