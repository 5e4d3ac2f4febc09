from abc import ABC, abstractmethod
from typing import List

from ticket_sales.service.ticketing.domain.value_object.purchase import Purchase


class IPurchaseRepo(ABC):
    @abstractmethod
    def add(self, purchase: Purchase) -> Purchase:
        pass

    @abstractmethod
    def list_by_login(self, login: str) -> List[Purchase]:
        pass
