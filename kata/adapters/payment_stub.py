"""
Payment stub adapter (dev/tests).

Stub implementation of PaymentPort that approves every positive charge.
Declines can be configured globally or per card for testing.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from kata.core.ports.payment import (
    ChargeResult,
    ChargeStatus,
    PaymentCredential,
    PaymentPort,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ChargeRecord:
    """Record of a charge attempt for test assertions."""

    card_last4: str
    amount: float
    status: ChargeStatus


@dataclass
class PaymentStubAdapter:
    """
    Stub payment adapter for dev/tests.

    Approves every charge with a positive amount. Can be configured to
    decline everything or specific card numbers.

    This adapter satisfies the PaymentPort protocol.
    """

    charges: list[ChargeRecord] = field(default_factory=list)

    # Override outcome for testing purposes
    _override_status: ChargeStatus | None = None
    _declined_cards: set[str] | None = None

    async def charge(
        self, credential: PaymentCredential, amount: float
    ) -> ChargeResult:
        """
        Record and resolve a charge.

        Args:
            credential: Card to charge
            amount: Amount to charge

        Returns:
            ChargeResult ("success" unless amount is not positive or a
            decline override applies)
        """
        result = self._resolve(credential, amount)

        self.charges.append(
            ChargeRecord(
                card_last4=credential.credit_card_number[-4:],
                amount=amount,
                status=result.status,
            )
        )

        logger.debug(
            f"PaymentStubAdapter.charge: "
            f"card={credential.masked}, amount={amount}, status={result.status}"
        )

        return result

    def _resolve(self, credential: PaymentCredential, amount: float) -> ChargeResult:
        """Get charge outcome, checking overrides."""
        if amount <= 0:
            return ChargeResult.failed("Amount must be positive")

        # Check per-card decline
        if self._declined_cards and credential.credit_card_number in self._declined_cards:
            return ChargeResult.failed("Card declined")

        # Check global override
        if self._override_status == "failed":
            return ChargeResult.failed("Declined by override")

        return ChargeResult.success()

    # --- Testing Helpers ---

    def set_override_status(self, status: ChargeStatus | None) -> None:
        """Set global charge outcome for testing."""
        self._override_status = status

    def decline_card(self, credit_card_number: str) -> None:
        """Decline every charge to a specific card (testing)."""
        if self._declined_cards is None:
            self._declined_cards = set()
        self._declined_cards.add(credit_card_number)

    def clear_overrides(self) -> None:
        """Clear all overrides."""
        self._override_status = None
        self._declined_cards = None

    @property
    def total_charged(self) -> float:
        """Sum of successful charges."""
        return sum(c.amount for c in self.charges if c.status == "success")


def _verify_protocol_compliance() -> None:
    """Verify PaymentStubAdapter satisfies PaymentPort protocol."""
    adapter: PaymentPort = PaymentStubAdapter()
    _ = adapter.charge


_verify_protocol_compliance()
