"""Ticket purchase service - all business logic lives here.

Services:
- Depend only on interfaces (gateways)
- Validate domain invariants
- Perform orchestration and error mapping
- Return domain models or domain errors
"""

import logging
from collections.abc import Sequence

from tickets.domain.errors import DomainError, EmptyRequestError, InvalidAccountError
from tickets.domain.rules import MAX_TICKETS_PER_PURCHASE, validate_ticket_counts
from tickets.domain.value_objects import AccountId, PurchaseQuote, TicketCounts, TicketRequest
from tickets.gateways.interfaces import PaymentGateway, SeatReservationGateway

logger = logging.getLogger(__name__)


class TicketPurchaseService:
    """Service for validating and paying for ticket purchases."""

    def __init__(
        self,
        payment_gateway: PaymentGateway,
        seat_reservation_gateway: SeatReservationGateway,
        max_tickets: int = MAX_TICKETS_PER_PURCHASE,
    ) -> None:
        self._payment_gateway = payment_gateway
        self._seat_reservation_gateway = seat_reservation_gateway
        self._max_tickets = max_tickets

    def quote_tickets(
        self,
        account_id: int | str | None,
        requests: Sequence[TicketRequest | None] | None,
    ) -> PurchaseQuote:
        """Validate a purchase and return what it would cost, without paying.

        Raises:
            InvalidAccountError: If the account_id is not a positive integer.
            EmptyRequestError: If no ticket requests were given.
            InvalidPurchaseError: If the tickets break a purchase rule.
        """
        account = _parse_account_id(account_id)
        if not requests:
            raise EmptyRequestError()

        counts = TicketCounts.from_requests(requests)
        validate_ticket_counts(counts, self._max_tickets)
        return PurchaseQuote.from_counts(account, counts)

    def purchase_tickets(
        self,
        account_id: int | str | None,
        requests: Sequence[TicketRequest | None] | None,
    ) -> None:
        """Take payment for the tickets, then reserve their seats.

        Neither gateway is called unless every check passes. Gateway
        failures propagate unchanged; a failed payment means no seats are
        reserved, and a failed reservation does not refund the payment.

        Raises:
            InvalidAccountError: If the account_id is not a positive integer.
            EmptyRequestError: If no ticket requests were given.
            InvalidPurchaseError: If the tickets break a purchase rule.
        """
        logger.info("Request received to purchase tickets for account %s", account_id)
        try:
            quote = self.quote_tickets(account_id, requests)
        except DomainError as exc:
            logger.warning("Purchase rejected for account %s: %s", account_id, exc)
            raise

        account = quote.account_id.value
        self._payment_gateway.make_payment(account, quote.total_price)
        self._seat_reservation_gateway.reserve_seat(account, quote.total_seats)
        logger.info(
            "Reserved %d tickets and %d seats for account %d",
            quote.total_tickets,
            quote.total_seats,
            account,
        )


def _parse_account_id(account_id: int | str | None) -> AccountId:
    try:
        if isinstance(account_id, str):
            return AccountId.from_string(account_id)
        return AccountId(value=account_id)
    except (TypeError, ValueError):
        raise InvalidAccountError(account_id) from None
