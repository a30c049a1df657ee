"""Core types shared across the package: retailers, offers and errors."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class ShopperError(Exception):
    """Base class for errors reported while searching for offers."""

    summary = "shopper error"

    def __init__(self, detail: str | None = None) -> None:
        self.detail = detail
        message = f"{self.summary}: {detail}" if detail else self.summary
        super().__init__(message)


class NetworkError(ShopperError):
    """A retailer could not be reached or answered with something unusable."""

    summary = "network error"


class AuthError(ShopperError):
    """The API key is missing or was rejected."""

    summary = "authentication error"


class NoResultsError(ShopperError):
    """No retailer returned any offer."""

    summary = "no offers found"


class Retailer(str, Enum):
    """A supported retailer."""

    AMAZON = "Amazon"
    WALMART = "Walmart"

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class Offer:
    """A single product offer from a retailer."""

    title: str
    price: float
    url: str = ""
    retailer: Retailer | str = ""