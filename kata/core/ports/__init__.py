# testing-kata - Ports (Protocol Interfaces)
# Abstract interfaces for collaborators; no implementations here

from kata.core.ports.analytics import AnalyticsPort
from kata.core.ports.currency import ExchangeRatePort, UnsupportedCurrencyError
from kata.core.ports.email import (
    EmailError,
    EmailPort,
    EmailSendError,
    EmailValidationError,
)
from kata.core.ports.payment import (
    ChargeResult,
    ChargeStatus,
    PaymentCredential,
    PaymentPort,
)
from kata.core.ports.security import SecurityCodePort
from kata.core.ports.shipping import ShippingQuote, ShippingQuotePort

__all__ = [
    # Analytics
    "AnalyticsPort",
    # Currency
    "ExchangeRatePort",
    "UnsupportedCurrencyError",
    # Email
    "EmailError",
    "EmailPort",
    "EmailSendError",
    "EmailValidationError",
    # Payment
    "ChargeResult",
    "ChargeStatus",
    "PaymentCredential",
    "PaymentPort",
    # Security
    "SecurityCodePort",
    # Shipping
    "ShippingQuote",
    "ShippingQuotePort",
]
