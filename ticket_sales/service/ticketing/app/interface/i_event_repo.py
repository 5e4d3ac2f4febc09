from abc import ABC, abstractmethod
from typing import List, Optional

from ticket_sales.service.ticketing.domain.entity.event_entity import Event


class IEventRepo(ABC):
    @abstractmethod
    def add(self, event: Event) -> Event:
        pass

    @abstractmethod
    def get_by_name(self, name: str) -> Optional[Event]:
        pass

    @abstractmethod
    def exists_by_name(self, name: str) -> bool:
        pass

    @abstractmethod
    def list_all(self) -> List[Event]:
        """Return every event in registration order"""
        pass
