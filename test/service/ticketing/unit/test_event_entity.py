"""
Unit tests for the Event entity

Covers the construction-time active flag and seat pool idempotence.
"""

from datetime import datetime, timedelta, timezone

import attrs
import pytest

from ticket_sales.platform.exception.exceptions import DomainError
from ticket_sales.service.ticketing.domain.entity.event_entity import Event


class TestEventActiveFlag:
    @pytest.mark.unit
    def test_future_event_is_active(self, next_year):
        event = Event.create(name='Concert', description='Live', date=next_year)

        assert event.is_active is True

    @pytest.mark.unit
    def test_past_event_is_inactive(self, yesterday):
        event = Event.create(name='OldShow', description='Over', date=yesterday)

        assert event.is_active is False

    @pytest.mark.unit
    def test_timezone_aware_dates_are_supported(self):
        event = Event.create(
            name='Aware',
            description='UTC dated',
            date=datetime.now(timezone.utc) + timedelta(hours=1),
        )

        assert event.is_active is True

    @pytest.mark.unit
    def test_active_flag_cannot_be_reassigned(self, next_year):
        event = Event.create(name='Concert', description='Live', date=next_year)

        with pytest.raises(attrs.exceptions.FrozenAttributeError):
            event.is_active = False

    @pytest.mark.unit
    def test_active_flag_is_not_recomputed(self):
        # Dated a moment ahead: active at creation, already started shortly after
        event = Event.create(
            name='Soon', description='Starting', date=datetime.now() + timedelta(milliseconds=100)
        )
        created_active = event.is_active

        while not event.has_started():
            pass

        assert created_active is True
        assert event.is_active is True


class TestEventValidation:
    @pytest.mark.unit
    @pytest.mark.parametrize('name', ['', '   '])
    def test_blank_name_is_rejected(self, name, next_year):
        with pytest.raises(DomainError, match='Event name is required'):
            Event.create(name=name, description='x', date=next_year)

    @pytest.mark.unit
    def test_date_must_be_datetime(self):
        with pytest.raises(TypeError):
            Event.create(name='Concert', description='x', date='2030-01-01')  # type: ignore[arg-type]


class TestEventSeats:
    @pytest.fixture
    def event(self, next_year) -> Event:
        return Event.create(name='Concert', description='Live', date=next_year)

    @pytest.mark.unit
    def test_add_seat_is_idempotent(self, event):
        event.add_seat('A1')
        event.add_seat('A1')

        assert event.available_seats == ('A1',)

    @pytest.mark.unit
    def test_seats_keep_insertion_order(self, event):
        for seat in ('B2', 'A1', 'C3'):
            event.add_seat(seat)

        assert event.available_seats == ('B2', 'A1', 'C3')

    @pytest.mark.unit
    def test_remove_seat_is_idempotent(self, event):
        event.add_seat('A1')

        event.remove_seat('A1')
        event.remove_seat('A1')

        assert event.available_seats == ()
        assert not event.has_seat('A1')

    @pytest.mark.unit
    def test_available_seats_is_a_snapshot(self, event):
        event.add_seat('A1')
        snapshot = event.available_seats

        event.add_seat('A2')

        assert snapshot == ('A1',)
        assert event.available_seats == ('A1', 'A2')
