from typing import List, Tuple

import attrs
from pydantic import SecretStr

from ticket_sales.platform.logging.loguru_io import Logger
from ticket_sales.service.ticketing.domain.entity.ticket_entity import Ticket


def _to_secret(value: str | SecretStr) -> SecretStr:
    return value if isinstance(value, SecretStr) else SecretStr(value)


@attrs.define
class Account:
    """
    A registered identity, optionally with administrative privilege.

    Two accounts are equal when login, national id and email match; the
    remaining state (name, password, owned tickets) does not take part.
    """

    login: str = attrs.field(
        validator=attrs.validators.instance_of(str), on_setattr=attrs.setters.frozen
    )
    password: SecretStr = attrs.field(converter=_to_secret, eq=False, repr=False)
    name: str = attrs.field(eq=False)
    national_id: str
    email: str
    is_admin: bool = attrs.field(default=False, eq=False, on_setattr=attrs.setters.frozen)
    _tickets: List[Ticket] = attrs.field(init=False, factory=list, eq=False, repr=False)

    @classmethod
    @Logger.io
    def create(
        cls,
        *,
        login: str,
        password: str,
        name: str,
        national_id: str,
        email: str,
        is_admin: bool = False,
    ) -> 'Account':
        return cls(
            login=login,
            password=password,
            name=name,
            national_id=national_id,
            email=email,
            is_admin=is_admin,
        )

    @property
    def tickets(self) -> Tuple[Ticket, ...]:
        return tuple(self._tickets)

    def check_credentials(self, login: str, password: str) -> bool:
        return self.login == login and self.password.get_secret_value() == password

    @Logger.io
    def change_password(self, new_password: str) -> None:
        self.password = _to_secret(new_password)

    def owns(self, ticket: Ticket) -> bool:
        return ticket in self._tickets

    def add_ticket(self, ticket: Ticket) -> None:
        self._tickets.append(ticket)

    def remove_ticket(self, ticket: Ticket) -> bool:
        if ticket not in self._tickets:
            return False
        self._tickets.remove(ticket)
        return True
