"""
Orchestration component models.
"""

from __future__ import annotations

from dataclasses import dataclass

from kata.core.ports.payment import PaymentCredential

PAYMENT_ERROR = "payment_error"
HOME_PAGE_PATH = "/home"


@dataclass(frozen=True)
class Order:
    total_amount: float


@dataclass(frozen=True)
class SubmitOrderOutput:
    success: bool
    error: str | None = None


# --- Inputs ---


@dataclass(frozen=True)
class PriceInCurrencyInput:
    price: float
    target_currency: str


@dataclass(frozen=True)
class ShippingInfoInput:
    destination: str


@dataclass(frozen=True)
class RenderPageInput:
    pass


@dataclass(frozen=True)
class SubmitOrderInput:
    order: Order
    credential: PaymentCredential


@dataclass(frozen=True)
class LoginInput:
    email: str
