"""
Exchange rate port interface.

Looks up the multiplier that converts a store-currency price into a
target currency.
"""

from __future__ import annotations

from typing import Protocol


class ExchangeRatePort(Protocol):
    """Port for currency rate lookups."""

    def get_exchange_rate(self, currency: str) -> float:
        """
        Get the rate for converting into `currency`.

        Args:
            currency: ISO 4217 code, e.g. "AUD"

        Returns:
            Multiplier applied to store-currency prices
        """
        ...


class UnsupportedCurrencyError(ValueError):
    """Raised when no rate is known for a currency."""

    def __init__(self, currency: str) -> None:
        self.currency = currency
        super().__init__(f"No exchange rate for currency: {currency}")
