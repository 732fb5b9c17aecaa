from tickets.gateways.interfaces import PaymentGateway, SeatReservationGateway
from tickets.gateways.local import LocalPaymentGateway, LocalSeatReservationGateway

__all__ = [
    "PaymentGateway",
    "SeatReservationGateway",
    "LocalPaymentGateway",
    "LocalSeatReservationGateway",
]
