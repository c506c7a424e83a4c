"""
Shipping quote port interface.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol


@dataclass(frozen=True)
class ShippingQuote:
    """Quote for shipping to one destination."""

    cost: float
    estimated_days: int


class ShippingQuotePort(Protocol):
    """Port for shipping quote lookups."""

    def get_shipping_quote(self, destination: str) -> ShippingQuote | None:
        """
        Quote shipping to a destination.

        Returns:
            ShippingQuote, or None when the destination cannot be served
        """
        ...
