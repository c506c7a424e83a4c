from __future__ import annotations

from dataclasses import dataclass

from kata.adapters.dev_email import DevEmailAdapter
from kata.adapters.flat_rate_shipping import FlatRateShippingAdapter
from kata.adapters.memory_analytics import InMemoryAnalyticsAdapter
from kata.adapters.payment_stub import PaymentStubAdapter
from kata.adapters.security_codes import SecureCodeGenerator
from kata.adapters.static_rates import StaticExchangeRateAdapter
from kata.components.validation import ValidationConfig, load_config_from_rules
from kata.core.ports import (
    AnalyticsPort,
    EmailPort,
    ExchangeRatePort,
    PaymentPort,
    SecurityCodePort,
    ShippingQuote,
    ShippingQuotePort,
)
from kata.rules.models import Rules


@dataclass
class StorefrontContext:
    validation_config: ValidationConfig
    exchange_rate: ExchangeRatePort
    shipping: ShippingQuotePort
    analytics: AnalyticsPort
    payment: PaymentPort
    email_sender: EmailPort
    security: SecurityCodePort
    rules: Rules

    @classmethod
    def create(cls, rules: Rules) -> StorefrontContext:
        # Adapters
        exchange_rate = StaticExchangeRateAdapter(
            rates={code.upper(): rate for code, rate in rules.currency.rates.items()}
        )
        shipping = FlatRateShippingAdapter(
            quotes={
                destination: ShippingQuote(
                    cost=rate.cost, estimated_days=rate.estimated_days
                )
                for destination, rate in rules.shipping.items()
            }
        )

        return cls(
            validation_config=load_config_from_rules(rules),
            exchange_rate=exchange_rate,
            shipping=shipping,
            analytics=InMemoryAnalyticsAdapter(),
            payment=PaymentStubAdapter(),
            email_sender=DevEmailAdapter(),
            security=SecureCodeGenerator(digits=rules.security.login_code_digits),
            rules=rules,
        )
