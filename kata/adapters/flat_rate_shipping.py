"""
Flat rate shipping adapter.

One fixed quote per destination; destinations outside the table get no
quote.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from kata.core.ports.shipping import ShippingQuote

logger = logging.getLogger(__name__)


@dataclass
class FlatRateShippingAdapter:
    quotes: dict[str, ShippingQuote] = field(default_factory=dict)

    def get_shipping_quote(self, destination: str) -> ShippingQuote | None:
        quote = self.quotes.get(destination)
        if quote is None:
            logger.info(f"No shipping quote for destination={destination}")
        return quote
