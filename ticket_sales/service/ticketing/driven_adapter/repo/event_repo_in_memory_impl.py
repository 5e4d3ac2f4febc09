from typing import Dict, List, Optional

from ticket_sales.platform.logging.loguru_io import Logger
from ticket_sales.service.ticketing.app.interface.i_event_repo import IEventRepo
from ticket_sales.service.ticketing.domain.entity.event_entity import Event


class EventRepoInMemoryImpl(IEventRepo):
    """Name-keyed event store; dict insertion order doubles as registration order"""

    def __init__(self) -> None:
        self._events: Dict[str, Event] = {}

    @Logger.io
    def add(self, event: Event) -> Event:
        self._events[event.name] = event
        return event

    def get_by_name(self, name: str) -> Optional[Event]:
        return self._events.get(name)

    def exists_by_name(self, name: str) -> bool:
        return name in self._events

    def list_all(self) -> List[Event]:
        return list(self._events.values())
