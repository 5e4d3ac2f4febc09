from abc import ABC, abstractmethod
from typing import Optional

from ticket_sales.service.ticketing.domain.entity.account_entity import Account


class IAccountRepo(ABC):
    @abstractmethod
    def add(self, account: Account) -> Account:
        pass

    @abstractmethod
    def get_by_login(self, login: str) -> Optional[Account]:
        pass

    @abstractmethod
    def exists_by_login(self, login: str) -> bool:
        pass
