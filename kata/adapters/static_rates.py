"""
Static exchange rate adapter.

Serves rates from a fixed table (rules.yaml `currency.rates`).
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from kata.core.ports.currency import UnsupportedCurrencyError

logger = logging.getLogger(__name__)


@dataclass
class StaticExchangeRateAdapter:
    """ExchangeRatePort backed by an in-memory table."""

    rates: dict[str, float] = field(default_factory=dict)

    def get_exchange_rate(self, currency: str) -> float:
        rate = self.rates.get(currency.upper())
        if rate is None:
            raise UnsupportedCurrencyError(currency)
        logger.debug(f"StaticExchangeRateAdapter: currency={currency}, rate={rate}")
        return rate

    def set_rate(self, currency: str, rate: float) -> None:
        self.rates[currency.upper()] = rate
