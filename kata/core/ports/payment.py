"""
Payment port interface.

External interface for charging a customer's card during checkout.

Implementations:
- PaymentStubAdapter: Approves every charge unless told otherwise (dev/tests)
- Real card processors (future)
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Literal, Protocol

# --- Types ---

ChargeStatus = Literal["success", "failed"]


# --- Models ---


@dataclass(frozen=True)
class PaymentCredential:
    """
    Card details handed to the payment collaborator.

    The card number is masked in repr so credentials never end up in logs.
    """

    credit_card_number: str

    def __repr__(self) -> str:
        return f"PaymentCredential(credit_card_number='{self.masked}')"

    @property
    def masked(self) -> str:
        """Card number with everything but the last four digits hidden."""
        tail = self.credit_card_number[-4:]
        return "*" * max(0, len(self.credit_card_number) - 4) + tail


@dataclass(frozen=True)
class ChargeResult:
    """Outcome of a charge attempt."""

    status: ChargeStatus
    reason: str | None = None

    @classmethod
    def success(cls) -> ChargeResult:
        return cls(status="success")

    @classmethod
    def failed(cls, reason: str | None = None) -> ChargeResult:
        return cls(status="failed", reason=reason)

    @property
    def is_success(self) -> bool:
        return self.status == "success"


# --- Port Interface ---


class PaymentPort(Protocol):
    """Port for charging payment credentials."""

    async def charge(
        self, credential: PaymentCredential, amount: float
    ) -> ChargeResult:
        """
        Charge `amount` to the given credential.

        Args:
            credential: Card to charge
            amount: Amount in the store currency

        Returns:
            ChargeResult with "success" or "failed" status.
            Timeouts and transport errors are the adapter's concern.
        """
        ...
