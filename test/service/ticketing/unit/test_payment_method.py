"""
Unit tests for payment methods
"""

from datetime import datetime, timedelta

import pytest

from ticket_sales.service.ticketing.domain.value_object.payment_method import (
    CardPayment,
    CashPayment,
    PaymentMethod,
    VoucherPayment,
)


def _card(expires_at: datetime) -> CardPayment:
    return CardPayment(
        card_number='4111111111111111', cvv='123', expires_at=expires_at, is_credit=True
    )


class TestCardPayment:
    @pytest.mark.unit
    def test_matching_cvv_and_valid_expiry(self):
        card = _card(datetime.now() + timedelta(days=30))

        assert card.verify(secret='123') is True

    @pytest.mark.unit
    def test_wrong_cvv_is_declined(self):
        card = _card(datetime.now() + timedelta(days=30))

        assert card.verify(secret='321') is False

    @pytest.mark.unit
    def test_expired_card_is_declined(self):
        card = _card(datetime.now() - timedelta(days=1))

        assert card.verify(secret='123') is False

    @pytest.mark.unit
    def test_card_details_masked(self):
        card = _card(datetime.now() + timedelta(days=30))

        assert card.masked_number == '****1111'
        assert '4111111111111111' not in repr(card)
        assert 'cvv' not in repr(card)


class TestOtherPayments:
    @pytest.mark.unit
    def test_cash_always_verifies(self):
        assert CashPayment().verify(secret='') is True

    @pytest.mark.unit
    def test_voucher_requires_matching_code(self):
        voucher = VoucherPayment(code='FREE-2030')

        assert voucher.verify(secret='FREE-2030') is True
        assert voucher.verify(secret='free-2030') is False

    @pytest.mark.unit
    def test_expired_voucher_is_declined(self):
        voucher = VoucherPayment(code='OLD', expires_at=datetime.now() - timedelta(days=1))

        assert voucher.verify(secret='OLD') is False


class TestPaymentMethodContract:
    @pytest.mark.unit
    def test_base_payment_method_is_abstract(self):
        with pytest.raises(TypeError):
            PaymentMethod()  # type: ignore[abstract]

    @pytest.mark.unit
    @pytest.mark.parametrize(
        ('payment', 'name'),
        [
            (CashPayment(), 'cash'),
            (VoucherPayment(code='X'), 'voucher'),
            (_card(datetime.now() + timedelta(days=1)), 'card'),
        ],
    )
    def test_each_variant_has_a_name(self, payment, name):
        assert payment.name == name
