from typing import Dict, Optional

from ticket_sales.platform.logging.loguru_io import Logger
from ticket_sales.service.ticketing.app.interface.i_account_repo import IAccountRepo
from ticket_sales.service.ticketing.domain.entity.account_entity import Account


class AccountRepoInMemoryImpl(IAccountRepo):
    def __init__(self) -> None:
        self._accounts: Dict[str, Account] = {}

    @Logger.io
    def add(self, account: Account) -> Account:
        self._accounts[account.login] = account
        return account

    def get_by_login(self, login: str) -> Optional[Account]:
        return self._accounts.get(login)

    def exists_by_login(self, login: str) -> bool:
        return login in self._accounts
