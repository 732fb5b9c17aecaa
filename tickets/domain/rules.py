"""Purchase eligibility rules evaluated against aggregated ticket counts."""

from tickets.domain.errors import InvalidPurchaseError, PurchaseRejection
from tickets.domain.value_objects import TicketCategory, TicketCounts

MAX_TICKETS_PER_PURCHASE = 25


def check_ticket_limit(counts: TicketCounts, max_tickets: int = MAX_TICKETS_PER_PURCHASE) -> None:
    if counts.total_tickets > max_tickets:
        raise InvalidPurchaseError(
            PurchaseRejection.TOO_MANY_TICKETS,
            f"Number of total tickets must not be more than {max_tickets}",
        )


def check_adult_present(counts: TicketCounts) -> None:
    """Child and infant tickets cannot be bought without an adult ticket."""
    if counts.count(TicketCategory.ADULT) == 0:
        raise InvalidPurchaseError(
            PurchaseRejection.NO_ADULT,
            "At least one adult ticket must be purchased",
        )


def check_infants_seated(counts: TicketCounts) -> None:
    """Every infant needs an adult lap to sit on."""
    if counts.count(TicketCategory.INFANT) > counts.count(TicketCategory.ADULT):
        raise InvalidPurchaseError(
            PurchaseRejection.TOO_MANY_INFANTS,
            "Number of infant tickets must not be more than number of adult tickets",
        )


def validate_ticket_counts(
    counts: TicketCounts, max_tickets: int = MAX_TICKETS_PER_PURCHASE
) -> None:
    """Run every rule in order, raising on the first that fails."""
    check_ticket_limit(counts, max_tickets)
    check_adult_present(counts)
    check_infants_seated(counts)
