"""``wren resolve`` — resolve a relative path against a base uri."""

import argparse

from wren.routing.paths import resolve


def run_resolve(args: argparse.Namespace) -> None:
    print(resolve(args.to, args.base))
