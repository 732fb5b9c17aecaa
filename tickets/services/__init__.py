from tickets.services.factory import build_purchase_service
from tickets.services.purchase_service import TicketPurchaseService

__all__ = ["TicketPurchaseService", "build_purchase_service"]
