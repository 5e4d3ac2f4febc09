"""
Ticket sales coordination.

TicketSalesController is the single entry point over the event, account and
purchase stores: it registers accounts and events, allocates seats, issues
and cancels tickets, and records payment receipts. Every public operation runs
under one re-entrant lock so that seat allocation stays consistent when the
controller is shared between threads.
"""

from datetime import datetime
from threading import RLock
from typing import List

from ticket_sales.platform.config.core_setting import Settings
from ticket_sales.platform.exception.exceptions import (
    AccountNotFoundError,
    AuthenticationError,
    DuplicateAccountError,
    DuplicateEventError,
    EventNotFoundError,
    PaymentDeclinedError,
    PermissionDeniedError,
    SeatUnavailableError,
)
from ticket_sales.platform.logging.loguru_io import Logger
from ticket_sales.service.ticketing.app.interface.i_account_repo import IAccountRepo
from ticket_sales.service.ticketing.app.interface.i_event_repo import IEventRepo
from ticket_sales.service.ticketing.app.interface.i_purchase_repo import IPurchaseRepo
from ticket_sales.service.ticketing.domain.entity.account_entity import Account
from ticket_sales.service.ticketing.domain.entity.event_entity import Event
from ticket_sales.service.ticketing.domain.entity.ticket_entity import Ticket
from ticket_sales.service.ticketing.domain.value_object.payment_method import PaymentMethod
from ticket_sales.service.ticketing.domain.value_object.purchase import Purchase


class TicketSalesController:
    def __init__(
        self,
        *,
        event_repo: IEventRepo,
        account_repo: IAccountRepo,
        purchase_repo: IPurchaseRepo,
        settings: Settings,
    ) -> None:
        self.event_repo = event_repo
        self.account_repo = account_repo
        self.purchase_repo = purchase_repo
        self.settings = settings
        self._lock = RLock()

    # ------------------------------------------------------------------
    # Accounts
    # ------------------------------------------------------------------

    @Logger.io
    def register_account(
        self,
        *,
        login: str,
        password: str,
        name: str,
        national_id: str,
        email: str,
        is_admin: bool = False,
    ) -> Account:
        with self._lock:
            if self.account_repo.exists_by_login(login):
                raise DuplicateAccountError(login)

            account = Account.create(
                login=login,
                password=password,
                name=name,
                national_id=national_id,
                email=email,
                is_admin=is_admin,
            )
            self.account_repo.add(account)

        Logger.base.info(f'👤 [REGISTER_ACCOUNT] {login} registered (admin={is_admin})')
        return account

    @Logger.io
    def authenticate(self, *, login: str, password: str) -> Account:
        with self._lock:
            account = self.account_repo.get_by_login(login)
        if not account or not account.check_credentials(login, password):
            raise AuthenticationError('LOGIN_BAD_CREDENTIALS')
        return account

    @Logger.io
    def get_account(self, login: str) -> Account:
        with self._lock:
            account = self.account_repo.get_by_login(login)
        if not account:
            raise AccountNotFoundError(login)
        return account

    # ------------------------------------------------------------------
    # Events
    # ------------------------------------------------------------------

    @Logger.io
    def register_event(
        self, *, account: Account, name: str, description: str, date: datetime
    ) -> Event:
        if not account.is_admin:
            raise PermissionDeniedError('Only administrators can register events')

        with self._lock:
            if self.event_repo.exists_by_name(name):
                raise DuplicateEventError(name)

            event = Event.create(name=name, description=description, date=date)
            self.event_repo.add(event)

        Logger.base.info(
            f'🎪 [REGISTER_EVENT] {name} on {date.isoformat()} (active={event.is_active})'
        )
        return event

    @Logger.io
    def add_seat(self, *, event_name: str, seat: str) -> None:
        with self._lock:
            event = self.event_repo.get_by_name(event_name)
            if not event:
                Logger.base.debug(f'💺 [ADD_SEAT] No event named {event_name}, seat {seat} ignored')
                return
            event.add_seat(seat)

    @Logger.io
    def get_event(self, name: str) -> Event:
        with self._lock:
            event = self.event_repo.get_by_name(name)
        if not event:
            raise EventNotFoundError(name)
        return event

    @Logger.io
    def list_events(self) -> List[Event]:
        with self._lock:
            return self.event_repo.list_all()

    @Logger.io
    def list_available_events(self) -> List[Event]:
        with self._lock:
            events = [event for event in self.event_repo.list_all() if event.is_active]
        Logger.base.info(f'🌟 [LIST_AVAILABLE] Found {len(events)} available events')
        return events

    # ------------------------------------------------------------------
    # Tickets
    # ------------------------------------------------------------------

    @Logger.io
    def purchase_ticket(self, *, account: Account, event_name: str, seat: str) -> Ticket:
        # The event's is_active flag is informational only and does not block a sale
        with self._lock:
            event = self.event_repo.get_by_name(event_name)
            if not event:
                raise EventNotFoundError(event_name)
            if not event.has_seat(seat):
                raise SeatUnavailableError(event_name, seat)

            ticket = Ticket.issue(
                event=event,
                price=self.settings.TICKET_PRICE,
                seat=seat,
                buyer_login=account.login,
            )
            event.remove_seat(seat)
            account.add_ticket(ticket)

        Logger.base.info(
            f'🎫 [PURCHASE] {account.login} bought seat {seat} for {event_name} at {ticket.price}'
        )
        return ticket

    @Logger.io
    def checkout(
        self,
        *,
        account: Account,
        event_name: str,
        seat: str,
        payment: PaymentMethod,
        secret: str,
    ) -> Purchase:
        with self._lock:
            if not payment.verify(secret=secret):
                raise PaymentDeclinedError(payment.name)

            ticket = self.purchase_ticket(account=account, event_name=event_name, seat=seat)
            purchase = self.purchase_repo.add(
                Purchase(account=account, ticket=ticket, payment=payment)
            )

        Logger.base.info(f'💳 [CHECKOUT] {account.login} paid by {payment.name} ({purchase.id})')
        return purchase

    @Logger.io
    def cancel_purchase(self, *, account: Account, ticket: Ticket) -> bool:
        with self._lock:
            if not account.remove_ticket(ticket):
                return False

            # The seat goes back even when the ticket refuses to cancel (event already past)
            cancelled = ticket.cancel()
            ticket.event.add_seat(ticket.seat)

        Logger.base.info(
            f'↩️ [CANCEL] {account.login} released seat {ticket.seat} '
            f'of {ticket.event.name} (ticket_cancelled={cancelled})'
        )
        return True

    @Logger.io
    def reactivate_ticket(self, *, account: Account, ticket: Ticket) -> bool:
        with self._lock:
            event = ticket.event
            if ticket.buyer_login != account.login:
                return False
            if ticket.is_active or account.owns(ticket):
                return False
            if event.has_started() or not event.has_seat(ticket.seat):
                return False

            event.remove_seat(ticket.seat)
            ticket.reactivate()
            account.add_ticket(ticket)

        Logger.base.info(
            f'🔁 [REACTIVATE] {account.login} reclaimed seat {ticket.seat} of {event.name}'
        )
        return True

    @Logger.io
    def list_purchased_tickets(self, account: Account) -> List[Ticket]:
        with self._lock:
            return list(account.tickets)

    @Logger.io
    def list_purchases(self, account: Account) -> List[Purchase]:
        with self._lock:
            return self.purchase_repo.list_by_login(account.login)
