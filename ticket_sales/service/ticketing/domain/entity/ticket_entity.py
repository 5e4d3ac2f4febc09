from datetime import datetime, timezone
from typing import Optional
from uuid import UUID

import attrs
from uuid_utils import uuid7

from ticket_sales.platform.logging.loguru_io import Logger
from ticket_sales.service.ticketing.domain.entity.event_entity import Event, now_like


def _new_ticket_id() -> UUID:
    return UUID(str(uuid7()))


@attrs.define(eq=False)
class Ticket:
    event: Event = attrs.field(on_setattr=attrs.setters.frozen)
    price: float = attrs.field(on_setattr=attrs.setters.frozen)
    seat: str = attrs.field(on_setattr=attrs.setters.frozen)
    is_active: bool = True
    buyer_login: Optional[str] = attrs.field(default=None, on_setattr=attrs.setters.frozen)
    id: UUID = attrs.field(factory=_new_ticket_id, on_setattr=attrs.setters.frozen)
    issued_at: datetime = attrs.field(factory=lambda: datetime.now(timezone.utc))

    @classmethod
    @Logger.io
    def issue(
        cls, *, event: Event, price: float, seat: str, buyer_login: Optional[str] = None
    ) -> 'Ticket':
        return cls(event=event, price=price, seat=seat, buyer_login=buyer_login)

    @Logger.io
    def cancel(self) -> bool:
        """Deactivate the ticket; refused once inactive or when the event date is not ahead."""
        if self.is_active and self.event.date > now_like(self.event.date):
            self.is_active = False
            return True
        return False

    @Logger.io
    def reactivate(self) -> None:
        # Touches only the ticket; TicketSalesController.reactivate_ticket keeps the seat pool in step
        if not self.is_active:
            self.is_active = True
