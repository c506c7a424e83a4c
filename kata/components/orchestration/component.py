"""
Orchestration component.

Thin wrappers that call injected collaborators and translate their
results into caller-facing outcomes. No state is kept between calls and
collaborator exceptions propagate unchanged; retry policy belongs to the
caller.
"""

from __future__ import annotations

import logging

from kata.core.ports.payment import PaymentCredential

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

logger = logging.getLogger(__name__)

SHIPPING_UNAVAILABLE = "Shipping unavailable"


def _format_cost(cost: float) -> str:
    # whole amounts print without cents: $10, $12.50
    if float(cost).is_integer():
        return str(int(cost))
    return f"{cost:.2f}"


def get_price_in_currency(
    price: float, target_currency: str, exchange_rate: ExchangeRatePort
) -> float:
    rate = exchange_rate.get_exchange_rate(target_currency)
    return price * rate


def get_shipping_info(destination: str, shipping: ShippingQuotePort) -> str:
    """
    Describe shipping to a destination.

    Returns:
        "Shipping unavailable" when no quote exists, otherwise
        "Shipping cost: $<cost> (<n> days)"
    """
    quote = shipping.get_shipping_quote(destination)
    if quote is None:
        return SHIPPING_UNAVAILABLE
    return f"Shipping cost: ${_format_cost(quote.cost)} ({quote.estimated_days} days)"


async def render_page(analytics: AnalyticsPort) -> str:
    content = "<div>content</div>"
    analytics.track_page_view(HOME_PAGE_PATH)
    return content


async def submit_order(
    order: Order, credential: PaymentCredential, payment: PaymentPort
) -> SubmitOrderOutput:
    """
    Charge the order total to the credential.

    Any status other than "success" is reported as a payment_error.
    """
    result = await payment.charge(credential, order.total_amount)

    if result.status != "success":
        logger.warning(
            f"Charge declined: card={credential.masked}, "
            f"amount={order.total_amount}, status={result.status}"
        )
        return SubmitOrderOutput(success=False, error=PAYMENT_ERROR)

    return SubmitOrderOutput(success=True)


async def login(
    email: str, security: SecurityCodePort, email_sender: EmailPort
) -> None:
    """Send a freshly generated one-time code to `email`."""
    code = security.generate_code()
    await email_sender.send_email(email, str(code))


# --- Run Function (Atomic Component Pattern) ---


async def run(
    inp: PriceInCurrencyInput
    | ShippingInfoInput
    | RenderPageInput
    | SubmitOrderInput
    | LoginInput,
    *,
    exchange_rate: ExchangeRatePort | None = None,
    shipping: ShippingQuotePort | None = None,
    analytics: AnalyticsPort | None = None,
    payment: PaymentPort | None = None,
    security: SecurityCodePort | None = None,
    email_sender: EmailPort | None = None,
) -> float | str | SubmitOrderOutput | None:
    """
    Run an orchestration operation based on input type.

    Only the ports the operation needs have to be supplied.
    """
    if isinstance(inp, PriceInCurrencyInput):
        if exchange_rate is None:
            raise ValueError("ExchangeRatePort is required for currency operations")
        return get_price_in_currency(inp.price, inp.target_currency, exchange_rate)

    elif isinstance(inp, ShippingInfoInput):
        if shipping is None:
            raise ValueError("ShippingQuotePort is required for shipping operations")
        return get_shipping_info(inp.destination, shipping)

    elif isinstance(inp, RenderPageInput):
        if analytics is None:
            raise ValueError("AnalyticsPort is required for render operations")
        return await render_page(analytics)

    elif isinstance(inp, SubmitOrderInput):
        if payment is None:
            raise ValueError("PaymentPort is required for order operations")
        return await submit_order(inp.order, inp.credential, payment)

    elif isinstance(inp, LoginInput):
        if security is None or email_sender is None:
            raise ValueError(
                "SecurityCodePort and EmailPort are required for login operations"
            )
        return await login(inp.email, security, email_sender)

    raise TypeError(f"Unknown input type: {type(inp)}")
