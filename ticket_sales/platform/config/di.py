"""
https://python-dependency-injector.ets-labs.org/index.html
"""

from dependency_injector import containers, providers

from ticket_sales.platform.config.core_setting import settings as app_settings
from ticket_sales.service.ticketing.app.ticket_sales_controller import TicketSalesController
from ticket_sales.service.ticketing.driven_adapter.repo.account_repo_in_memory_impl import (
    AccountRepoInMemoryImpl,
)
from ticket_sales.service.ticketing.driven_adapter.repo.event_repo_in_memory_impl import (
    EventRepoInMemoryImpl,
)
from ticket_sales.service.ticketing.driven_adapter.repo.purchase_repo_in_memory_impl import (
    PurchaseRepoInMemoryImpl,
)


class Container(containers.DeclarativeContainer):
    # Module-level settings, shared with the logging config
    settings = providers.Object(app_settings)

    # Stores
    event_repo = providers.Singleton(EventRepoInMemoryImpl)
    account_repo = providers.Singleton(AccountRepoInMemoryImpl)
    purchase_repo = providers.Singleton(PurchaseRepoInMemoryImpl)

    # Coordinator
    ticket_sales_controller = providers.Singleton(
        TicketSalesController,
        event_repo=event_repo,
        account_repo=account_repo,
        purchase_repo=purchase_repo,
        settings=settings,
    )


container = Container()
