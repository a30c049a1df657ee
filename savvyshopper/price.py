"""Price search against retailer APIs, run concurrently and merged."""

from __future__ import annotations

import json
import time
import urllib.error
import urllib.request
from collections.abc import Callable, Mapping
from concurrent.futures import ThreadPoolExecutor, wait
from dataclasses import dataclass, replace
from typing import Any, Protocol, TypeVar

from savvyshopper.domain import (
    AuthError,
    NetworkError,
    NoResultsError,
    Offer,
    Retailer,
)

T = TypeVar("T")

MAX_RESULTS_PER_RETAILER = 3
MAX_TOTAL_RESULTS = 6
SEARCH_TIMEOUT = 2.0
REQUEST_TIMEOUT = 10.0
DEFAULT_ENDPOINTS = {
    Retailer.AMAZON: "https://api.zinc.io/v1/search/amazon",
    Retailer.WALMART: "https://api.zinc.io/v1/search/walmart",
}


class Searcher(Protocol):
    """Anything that can look up offers for a query."""

    def search(self, query: str) -> list[Offer]:
        """Return the offers found for the query."""


@dataclass(frozen=True)
class ZincSearcher:
    """Searches one retailer through a Zinc-style JSON endpoint."""

    endpoint: str
    retailer: Retailer

    def search(self, query: str) -> list[Offer]:
        payload = build_payload(query, self.retailer)
        return make_request(self.endpoint, payload, self.retailer)


def amazon_searcher(endpoint: str) -> ZincSearcher:
    """Return a searcher for Amazon at the given endpoint."""
    return ZincSearcher(endpoint, Retailer.AMAZON)


def walmart_searcher(endpoint: str) -> ZincSearcher:
    """Return a searcher for Walmart at the given endpoint."""
    return ZincSearcher(endpoint, Retailer.WALMART)


def build_payload(query: str, retailer: Retailer | str) -> bytes:
    """Encode the JSON request body for a search."""
    payload = {
        "search_term": query,
        "retailer": str(retailer),
        "max_results": MAX_RESULTS_PER_RETAILER,
    }
    return json.dumps(payload, separators=(",", ":"), ensure_ascii=False).encode("utf-8")


def retry_with_backoff(
    fn: Callable[[], T], max_retries: int = 3, base_delay: float = 0.1
) -> T:
    """Call fn until it succeeds, waiting base_delay * 2**attempt between tries."""
    if max_retries < 1:
        raise ValueError("max_retries must be at least 1")
    for attempt in range(max_retries):
        try:
            return fn()
        except Exception:
            if attempt == max_retries - 1:
                raise
            time.sleep(base_delay * 2**attempt)
    raise AssertionError("unreachable")


def _text(value: Any) -> str:
    if value is None:
        return ""
    if not isinstance(value, str):
        raise TypeError("expected a string")
    return value


def _price(value: Any) -> float:
    if value is None:
        return 0.0
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise TypeError("expected a number for price")
    return float(value)


def _parse_offers(body: bytes, retailer: Retailer | str) -> list[Offer]:
    document = json.loads(body)
    if document is None:
        return []
    if not isinstance(document, dict):
        raise TypeError("expected a JSON object")
    results = document.get("results")
    if results is None:
        return []
    if not isinstance(results, list):
        raise TypeError("expected a list of results")
    offers = []
    for item in results:
        item = item or {}
        if not isinstance(item, dict):
            raise TypeError("expected each result to be an object")
        offers.append(
            Offer(
                title=_text(item.get("title")),
                price=_price(item.get("price")),
                url=_text(item.get("url")),
                retailer=retailer,
            )
        )
    return offers


def make_request(
    endpoint: str,
    payload: bytes,
    retailer: Retailer | str,
) -> list[Offer]:
    """POST the payload to the endpoint and return the offers in the reply."""
    try:
        request = urllib.request.Request(
            endpoint,
            data=payload,
            method="POST",
            headers={"Content-Type": "application/json"},
        )
    except ValueError as error:
        raise NetworkError(f"failed to create request: {error}") from error

    def send() -> tuple[int, bytes]:
        try:
            with urllib.request.urlopen(request, timeout=REQUEST_TIMEOUT) as response:
                return response.status, response.read()
        except urllib.error.HTTPError as error:
            with error:
                return error.code, error.read()

    try:
        status, body = retry_with_backoff(send, 3, 0.1)
    except Exception as error:
        raise NetworkError(f"failed to send request: {error}") from error

    if status == 401:
        raise AuthError("unauthorized request")
    if status != 200:
        raise NetworkError(f"unexpected status code: {status}")

    try:
        return _parse_offers(body, retailer)
    except (ValueError, TypeError) as error:
        raise NetworkError(f"failed to parse response: {error}") from error


def _default_searchers() -> dict[Retailer | str, Searcher]:
    return {
        Retailer.AMAZON: amazon_searcher(DEFAULT_ENDPOINTS[Retailer.AMAZON]),
        Retailer.WALMART: walmart_searcher(DEFAULT_ENDPOINTS[Retailer.WALMART]),
    }


def search_prices(
    query: str,
    searchers: Mapping[Retailer | str, Searcher] | None = None,
) -> list[Offer]:
    """Query every retailer concurrently and return the cheapest-first offers.

    Each retailer contributes at most three offers and at most six are kept.
    Raises NetworkError on timeout or a negative price, the first network or
    authentication error when nothing was found, and NoResultsError otherwise.
    """
    if searchers is None:
        searchers = _default_searchers()

    executor = ThreadPoolExecutor(max_workers=max(1, len(searchers)))
    try:
        futures = {
            retailer: executor.submit(searcher.search, query)
            for retailer, searcher in searchers.items()
        }
        _, pending = wait(futures.values(), timeout=SEARCH_TIMEOUT)
    finally:
        executor.shutdown(wait=False, cancel_futures=True)
    if pending:
        raise NetworkError("search timed out")

    offers: list[Offer] = []
    first_error: Exception | None = None
    for retailer, future in futures.items():
        error = future.exception()
        if error is not None:
            if first_error is None and isinstance(error, (NetworkError, AuthError)):
                first_error = error
            continue
        found = [replace(offer, retailer=retailer) for offer in future.result() or []]
        offers.extend(found[:MAX_RESULTS_PER_RETAILER])

    if not offers:
        if first_error is not None:
            raise first_error
        raise NoResultsError()

    ranked = sorted(offers[:MAX_TOTAL_RESULTS], key=lambda offer: offer.price)
    if any(offer.price < 0 for offer in ranked):
        raise NetworkError("negative price found")
    return ranked