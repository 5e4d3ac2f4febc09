from datetime import datetime
from typing import Any, List, Tuple

import attrs

from ticket_sales.platform.exception.exceptions import DomainError
from ticket_sales.platform.logging.loguru_io import Logger


def now_like(moment: datetime) -> datetime:
    """Current time with the same tz-awareness as ``moment`` so the two compare."""
    return datetime.now(tz=moment.tzinfo)


def validate_name(_instance: Any, _attribute: Any, value: str) -> None:
    if not value or not value.strip():
        raise DomainError('Event name is required')


@attrs.define(eq=False)
class Event:
    name: str = attrs.field(
        validator=[attrs.validators.instance_of(str), validate_name],
        on_setattr=attrs.setters.frozen,
    )
    description: str = attrs.field(validator=attrs.validators.instance_of(str))
    date: datetime = attrs.field(
        validator=attrs.validators.instance_of(datetime), on_setattr=attrs.setters.frozen
    )
    # Fixed at construction: an event dated in the past never becomes active again
    is_active: bool = attrs.field(init=False, on_setattr=attrs.setters.frozen)
    _available_seats: List[str] = attrs.field(init=False, factory=list)

    def __attrs_post_init__(self) -> None:
        object.__setattr__(self, 'is_active', self.date >= now_like(self.date))

    @classmethod
    @Logger.io
    def create(cls, *, name: str, description: str, date: datetime) -> 'Event':
        return cls(name=name, description=description, date=date)

    @property
    def available_seats(self) -> Tuple[str, ...]:
        return tuple(self._available_seats)

    def has_seat(self, seat: str) -> bool:
        return seat in self._available_seats

    def has_started(self) -> bool:
        return self.date <= now_like(self.date)

    @Logger.io
    def add_seat(self, seat: str) -> None:
        if seat not in self._available_seats:
            self._available_seats.append(seat)

    @Logger.io
    def remove_seat(self, seat: str) -> None:
        if seat in self._available_seats:
            self._available_seats.remove(seat)
