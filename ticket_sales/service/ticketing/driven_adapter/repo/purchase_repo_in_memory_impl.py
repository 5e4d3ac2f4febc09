from collections import defaultdict
from typing import DefaultDict, List

from ticket_sales.platform.logging.loguru_io import Logger
from ticket_sales.service.ticketing.app.interface.i_purchase_repo import IPurchaseRepo
from ticket_sales.service.ticketing.domain.value_object.purchase import Purchase


class PurchaseRepoInMemoryImpl(IPurchaseRepo):
    def __init__(self) -> None:
        self._purchases_by_login: DefaultDict[str, List[Purchase]] = defaultdict(list)

    @Logger.io
    def add(self, purchase: Purchase) -> Purchase:
        self._purchases_by_login[purchase.account.login].append(purchase)
        return purchase

    def list_by_login(self, login: str) -> List[Purchase]:
        return list(self._purchases_by_login.get(login, []))
