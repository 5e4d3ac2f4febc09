"""
Payment methods.

Each variant carries its own verification contract behind the same
``verify(secret)`` call, so the checkout flow never inspects which kind of
payment it was handed.
"""

from abc import ABC, abstractmethod
from datetime import datetime
from typing import ClassVar, Optional

import attrs
from pydantic import SecretStr

from ticket_sales.platform.logging.loguru_io import Logger


def _to_secret(value: str | SecretStr) -> SecretStr:
    return value if isinstance(value, SecretStr) else SecretStr(value)


def _now_like(moment: datetime) -> datetime:
    return datetime.now(tz=moment.tzinfo)


class PaymentMethod(ABC):
    name: ClassVar[str]

    @abstractmethod
    def verify(self, secret: str) -> bool:
        """Return True when ``secret`` authorizes a charge on this payment method."""
        ...


@attrs.frozen
class CardPayment(PaymentMethod):
    name: ClassVar[str] = 'card'

    card_number: str = attrs.field(repr=False)
    cvv: SecretStr = attrs.field(converter=_to_secret, repr=False)
    expires_at: datetime = attrs.field(validator=attrs.validators.instance_of(datetime))
    is_credit: bool = True

    @property
    def masked_number(self) -> str:
        return f'****{self.card_number[-4:]}'

    @Logger.io
    def verify(self, secret: str) -> bool:
        if secret != self.cvv.get_secret_value():
            return False
        return self.expires_at > _now_like(self.expires_at)


@attrs.frozen
class CashPayment(PaymentMethod):
    name: ClassVar[str] = 'cash'

    @Logger.io
    def verify(self, secret: str) -> bool:
        return True


@attrs.frozen
class VoucherPayment(PaymentMethod):
    name: ClassVar[str] = 'voucher'

    code: SecretStr = attrs.field(converter=_to_secret, repr=False)
    expires_at: Optional[datetime] = None

    @Logger.io
    def verify(self, secret: str) -> bool:
        if secret != self.code.get_secret_value():
            return False
        return self.expires_at is None or self.expires_at > _now_like(self.expires_at)
