"""Access to the API key and to offline mock offers."""

from __future__ import annotations

import json
import os
from typing import Any

from savvyshopper.domain import AuthError, Offer, Retailer

ENV_VAR = "ZINC_API_KEY"
MOCK_SENTINEL = "mock-api-key-for-testing"
MOCK_RESULT = "mock-data"
MOCK_DATA_FILE = "mock_data.json"


def api_key() -> str:
    """Return the API key from the environment; raise AuthError if it is unset."""
    value = os.environ.get(ENV_VAR, "")
    if not value:
        raise AuthError()
    if value == MOCK_SENTINEL:
        return MOCK_RESULT
    return value


def _field(item: dict[str, Any], name: str) -> Any:
    if name in item:
        return item[name]
    lowered = name.lower()
    for key, value in item.items():
        if key.lower() == lowered:
            return value
    return None


def _text(value: Any, name: str) -> str:
    if value is None:
        return ""
    if not isinstance(value, str):
        raise ValueError(f"field {name!r} must be a string")
    return value


def _offer_from_json(item: Any) -> Offer:
    if item is None:
        return Offer(title="", price=0.0)
    if not isinstance(item, dict):
        raise ValueError("each offer must be an object")
    price = _field(item, "Price")
    if price is None:
        price = 0.0
    elif isinstance(price, bool) or not isinstance(price, (int, float)):
        raise ValueError("field 'Price' must be a number")
    retailer_name = _text(_field(item, "Retailer"), "Retailer")
    try:
        retailer: Retailer | str = Retailer(retailer_name)
    except ValueError:
        retailer = retailer_name
    return Offer(
        title=_text(_field(item, "Title"), "Title"),
        price=float(price),
        url=_text(_field(item, "URL"), "URL"),
        retailer=retailer,
    )


def mock_data(path: str | os.PathLike[str] = MOCK_DATA_FILE) -> list[Offer]:
    """Load offers from a JSON document of the form {"offers": [...]}."""
    with open(path, encoding="utf-8") as handle:
        document = json.load(handle)
    if document is None:
        return []
    if not isinstance(document, dict):
        raise ValueError("mock data must be a JSON object")
    offers = _field(document, "offers")
    if offers is None:
        return []
    if not isinstance(offers, list):
        raise ValueError("'offers' must be a list")
    return [_offer_from_json(item) for item in offers]