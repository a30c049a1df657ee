"""Plain-text table output for offers."""

from __future__ import annotations

from collections.abc import Iterable
from typing import TextIO

from savvyshopper.domain import Offer

TITLE_LIMIT = 60
PADDING = 2
HEADER = ("Title", "Price", "Retailer", "URL")


def table(out: TextIO, offers: Iterable[Offer]) -> None:
    """Write offers to out as space-aligned columns under a header row."""
    rows = [HEADER]
    rows.extend(
        (offer.title[:TITLE_LIMIT], f"${offer.price:.2f}", str(offer.retailer), offer.url)
        for offer in offers
    )
    aligned_columns = list(zip(*rows))[:-1]
    widths = [max(map(len, column)) + PADDING for column in aligned_columns]
    for row in rows:
        cells = "".join(cell.ljust(width) for cell, width in zip(row, widths))
        out.write(f"{cells}{row[-1]}\n")