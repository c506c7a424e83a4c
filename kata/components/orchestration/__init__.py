"""
Orchestration component - currency, shipping, analytics, checkout and login
wrappers over injected collaborators.
"""

from .component import (
    SHIPPING_UNAVAILABLE,
    get_price_in_currency,
    get_shipping_info,
    login,
    render_page,
    run,
    submit_order,
)
from .models import (
    HOME_PAGE_PATH,
    PAYMENT_ERROR,
    LoginInput,
    Order,
    PriceInCurrencyInput,
    RenderPageInput,
    ShippingInfoInput,
    SubmitOrderInput,
    SubmitOrderOutput,
)
from .ports import (
    AnalyticsPort,
    EmailPort,
    ExchangeRatePort,
    PaymentPort,
    SecurityCodePort,
    ShippingQuotePort,
)

__all__ = [
    # Entry points
    "get_price_in_currency",
    "get_shipping_info",
    "login",
    "render_page",
    "run",
    "submit_order",
    # Constants
    "HOME_PAGE_PATH",
    "PAYMENT_ERROR",
    "SHIPPING_UNAVAILABLE",
    # Models
    "LoginInput",
    "Order",
    "PriceInCurrencyInput",
    "RenderPageInput",
    "ShippingInfoInput",
    "SubmitOrderInput",
    "SubmitOrderOutput",
    # Ports
    "AnalyticsPort",
    "EmailPort",
    "ExchangeRatePort",
    "PaymentPort",
    "SecurityCodePort",
    "ShippingQuotePort",
]
