"""Command-line entry point: read a query, search and print a table."""

from __future__ import annotations

import sys
from collections.abc import Mapping, Sequence
from typing import TextIO

from savvyshopper.config import api_key
from savvyshopper.domain import AuthError, NetworkError, NoResultsError, Retailer, ShopperError
from savvyshopper.price import Searcher, search_prices
from savvyshopper.render import table

RED = "\033[31m"
YELLOW = "\033[33m"
RESET = "\033[0m"


def _prompt(out: TextIO) -> str:
    out.write("Enter product: ")
    out.flush()
    line = sys.stdin.readline()
    if not line:
        raise ValueError("failed to read input: EOF")
    words = line.split()
    if not words:
        raise ValueError("failed to read input: unexpected newline")
    if len(words) > 1:
        raise ValueError("failed to read input: expected newline")
    return words[0]


def run(
    args: Sequence[str],
    out: TextIO,
    searchers: Mapping[Retailer | str, Searcher] | None = None,
) -> None:
    """Search for the first argument (or a prompted word) and print the offers."""
    query = args[0] if args else _prompt(out)

    try:
        api_key()
    except AuthError as error:
        out.write(f"{RED}Error: {error}{RESET}\n")
        raise

    try:
        offers = search_prices(query, searchers)
    except NoResultsError:
        out.write(f"{YELLOW}No results found.{RESET}\n")
        raise
    except NetworkError as error:
        out.write(f"{RED}Network error: {error}{RESET}\n")
        raise
    except ShopperError as error:
        out.write(f"{RED}Error: {error}{RESET}\n")
        raise

    table(out, offers)


def main(argv: Sequence[str] | None = None) -> int:
    """Run the command and return its exit status."""
    args = sys.argv[1:] if argv is None else argv
    try:
        run(args, sys.stdout)
    except (ShopperError, ValueError):
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())