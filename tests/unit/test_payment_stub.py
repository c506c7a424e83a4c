"""
Unit tests for payment stub adapter.

Tests:
- PaymentStubAdapter approves positive charges by default
- Declines via global and per-card overrides
"""

import pytest

from kata.adapters.payment_stub import ChargeRecord, PaymentStubAdapter
from kata.core.ports.payment import ChargeResult, PaymentCredential, PaymentPort

CARD = PaymentCredential(credit_card_number="4242424242424242")


class TestPaymentStubAdapter:
    def test_satisfies_payment_port_protocol(self) -> None:
        """PaymentStubAdapter satisfies PaymentPort protocol."""
        adapter: PaymentPort = PaymentStubAdapter()
        assert isinstance(adapter, PaymentStubAdapter)

    @pytest.mark.asyncio
    async def test_charge_succeeds_by_default(self) -> None:
        adapter = PaymentStubAdapter()
        result = await adapter.charge(CARD, 25.0)
        assert isinstance(result, ChargeResult)
        assert result.status == "success"
        assert result.is_success is True

    @pytest.mark.asyncio
    @pytest.mark.parametrize("amount", [0, -5])
    async def test_non_positive_amount_fails(self, amount: float) -> None:
        adapter = PaymentStubAdapter()
        result = await adapter.charge(CARD, amount)
        assert result.status == "failed"
        assert result.reason == "Amount must be positive"

    @pytest.mark.asyncio
    async def test_records_charges_without_full_card_number(self) -> None:
        adapter = PaymentStubAdapter()

        await adapter.charge(CARD, 10)

        assert adapter.charges == [
            ChargeRecord(card_last4="4242", amount=10, status="success")
        ]

    @pytest.mark.asyncio
    async def test_total_charged_counts_successes_only(self) -> None:
        adapter = PaymentStubAdapter()
        await adapter.charge(CARD, 10)
        await adapter.charge(CARD, -1)
        await adapter.charge(CARD, 5)
        assert adapter.total_charged == 15


class TestPaymentStubAdapterOverrides:
    @pytest.mark.asyncio
    async def test_global_override_declines(self) -> None:
        adapter = PaymentStubAdapter()
        adapter.set_override_status("failed")

        result = await adapter.charge(CARD, 10)

        assert result.status == "failed"

    @pytest.mark.asyncio
    async def test_per_card_decline(self) -> None:
        adapter = PaymentStubAdapter()
        adapter.decline_card("4000000000000002")

        declined = await adapter.charge(PaymentCredential("4000000000000002"), 10)
        approved = await adapter.charge(CARD, 10)

        assert declined.status == "failed"
        assert declined.reason == "Card declined"
        assert approved.status == "success"

    @pytest.mark.asyncio
    async def test_clear_overrides(self) -> None:
        adapter = PaymentStubAdapter()
        adapter.set_override_status("failed")
        adapter.decline_card(CARD.credit_card_number)

        adapter.clear_overrides()

        assert (await adapter.charge(CARD, 10)).status == "success"


class TestPaymentCredential:
    def test_repr_masks_card_number(self) -> None:
        assert "4242424242424242" not in repr(CARD)
        assert repr(CARD).endswith("4242')")

    def test_masked(self) -> None:
        assert CARD.masked == "************4242"

    def test_short_number_is_not_padded(self) -> None:
        assert PaymentCredential("123").masked == "123"
