"""Ticketing Domain Value Objects"""

from ticket_sales.service.ticketing.domain.value_object.payment_method import (
    CardPayment,
    CashPayment,
    PaymentMethod,
    VoucherPayment,
)
from ticket_sales.service.ticketing.domain.value_object.purchase import Purchase

__all__ = ['CardPayment', 'CashPayment', 'PaymentMethod', 'Purchase', 'VoucherPayment']
