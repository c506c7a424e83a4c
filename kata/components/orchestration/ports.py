"""
Orchestration component ports.

The collaborators this component calls. It never constructs them;
callers pass concrete adapters (or test doubles) in.
"""

from kata.core.ports.analytics import AnalyticsPort
from kata.core.ports.currency import ExchangeRatePort
from kata.core.ports.email import EmailPort
from kata.core.ports.payment import PaymentPort
from kata.core.ports.security import SecurityCodePort
from kata.core.ports.shipping import ShippingQuotePort

__all__ = [
    "AnalyticsPort",
    "EmailPort",
    "ExchangeRatePort",
    "PaymentPort",
    "SecurityCodePort",
    "ShippingQuotePort",
]
