from datetime import datetime, timezone
from uuid import UUID

import attrs
from uuid_utils import uuid7

from ticket_sales.service.ticketing.domain.entity.account_entity import Account
from ticket_sales.service.ticketing.domain.entity.ticket_entity import Ticket
from ticket_sales.service.ticketing.domain.value_object.payment_method import PaymentMethod


@attrs.frozen
class Purchase:
    """Receipt tying an account, the ticket it bought and how it paid."""

    account: Account
    ticket: Ticket
    payment: PaymentMethod
    id: UUID = attrs.field(factory=lambda: UUID(str(uuid7())))
    created_at: datetime = attrs.field(factory=lambda: datetime.now(timezone.utc))
