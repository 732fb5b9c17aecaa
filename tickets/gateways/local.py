"""In-process gateways used when no external service is configured.

Both services are assumed to always succeed, so these only log the call.
"""

import logging

from tickets.gateways.interfaces import PaymentGateway, SeatReservationGateway

logger = logging.getLogger(__name__)


class LocalPaymentGateway(PaymentGateway):
    def make_payment(self, account_id: int, amount: int) -> None:
        logger.info("Payment of %d taken from account %d", amount, account_id)


class LocalSeatReservationGateway(SeatReservationGateway):
    def reserve_seat(self, account_id: int, seat_count: int) -> None:
        logger.info("Reserved %d seats for account %d", seat_count, account_id)
