from tickets.domain.errors import (
    DomainError,
    EmptyRequestError,
    ErrorCode,
    InvalidAccountError,
    InvalidPurchaseError,
    InvalidTicketRequestError,
    PurchaseRejection,
)
from tickets.domain.value_objects import (
    AccountId,
    PurchaseQuote,
    TicketCategory,
    TicketCounts,
    TicketRequest,
)

__all__ = [
    "AccountId",
    "PurchaseQuote",
    "TicketCategory",
    "TicketCounts",
    "TicketRequest",
    "DomainError",
    "ErrorCode",
    "PurchaseRejection",
    "InvalidAccountError",
    "EmptyRequestError",
    "InvalidTicketRequestError",
    "InvalidPurchaseError",
]
