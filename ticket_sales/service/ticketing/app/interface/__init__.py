"""Application layer interfaces (Ports)"""

from ticket_sales.service.ticketing.app.interface.i_account_repo import IAccountRepo
from ticket_sales.service.ticketing.app.interface.i_event_repo import IEventRepo
from ticket_sales.service.ticketing.app.interface.i_purchase_repo import IPurchaseRepo

__all__ = ['IAccountRepo', 'IEventRepo', 'IPurchaseRepo']
