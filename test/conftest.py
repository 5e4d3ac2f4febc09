"""
Test Configuration and Fixtures

Environment variables read at import time (log directory, settings) are set
before any application module is imported.
"""

import os
from pathlib import Path


def _early_setup_test_environment() -> None:
    test_log_dir = Path(__file__).parent / 'test_log'
    test_log_dir.mkdir(exist_ok=True)
    os.environ['TEST_LOG_DIR'] = str(test_log_dir)
    os.environ.setdefault('DEPLOY_ENV', 'test')


_early_setup_test_environment()

from datetime import datetime, timedelta  # noqa: E402

import pytest  # noqa: E402

from ticket_sales.platform.config.core_setting import Settings  # noqa: E402
from ticket_sales.service.ticketing.app.ticket_sales_controller import (  # noqa: E402
    TicketSalesController,
)
from ticket_sales.service.ticketing.domain.entity.account_entity import Account  # noqa: E402
from ticket_sales.service.ticketing.driven_adapter.repo.account_repo_in_memory_impl import (  # noqa: E402
    AccountRepoInMemoryImpl,
)
from ticket_sales.service.ticketing.driven_adapter.repo.event_repo_in_memory_impl import (  # noqa: E402
    EventRepoInMemoryImpl,
)
from ticket_sales.service.ticketing.driven_adapter.repo.purchase_repo_in_memory_impl import (  # noqa: E402
    PurchaseRepoInMemoryImpl,
)


@pytest.fixture
def next_year() -> datetime:
    return datetime.now() + timedelta(days=365)


@pytest.fixture
def yesterday() -> datetime:
    return datetime.now() - timedelta(days=1)


@pytest.fixture
def controller() -> TicketSalesController:
    """Fresh controller over empty in-memory stores"""
    return TicketSalesController(
        event_repo=EventRepoInMemoryImpl(),
        account_repo=AccountRepoInMemoryImpl(),
        purchase_repo=PurchaseRepoInMemoryImpl(),
        settings=Settings(),
    )


@pytest.fixture
def admin(controller: TicketSalesController) -> Account:
    return controller.register_account(
        login='admin',
        password='admin-pass',
        name='Ada Admin',
        national_id='000.000.000-01',
        email='admin@example.com',
        is_admin=True,
    )


@pytest.fixture
def user(controller: TicketSalesController) -> Account:
    return controller.register_account(
        login='user',
        password='user-pass',
        name='Uma User',
        national_id='000.000.000-02',
        email='user@example.com',
    )
