"""Domain error codes for the tickets module."""

from dataclasses import dataclass
from enum import Enum


class ErrorCode(Enum):
    """Domain error codes."""

    INVALID_ACCOUNT = "INVALID_ACCOUNT"
    EMPTY_REQUEST = "EMPTY_REQUEST"
    INVALID_TICKET_REQUEST = "INVALID_TICKET_REQUEST"
    INVALID_PURCHASE = "INVALID_PURCHASE"


class PurchaseRejection(Enum):
    """Business rule that rejected a purchase."""

    TOO_MANY_TICKETS = "TOO_MANY_TICKETS"
    NO_ADULT = "NO_ADULT"
    TOO_MANY_INFANTS = "TOO_MANY_INFANTS"


@dataclass(eq=False)
class DomainError(Exception):
    """Base domain error with code and user-safe message."""

    code: ErrorCode
    message: str

    def __str__(self) -> str:
        return f"{self.code.value}: {self.message}"


class InvalidAccountError(DomainError):
    """Raised when an account ID is missing, non-numeric or not positive."""

    def __init__(self, account_id: object) -> None:
        super().__init__(
            code=ErrorCode.INVALID_ACCOUNT,
            message="Account ID must be a positive number",
        )
        self.account_id = account_id


class EmptyRequestError(DomainError):
    """Raised when no ticket requests are provided."""

    def __init__(self) -> None:
        super().__init__(
            code=ErrorCode.EMPTY_REQUEST,
            message="At least one ticket request must be provided",
        )


class InvalidTicketRequestError(DomainError):
    """Raised when a single ticket request is malformed."""

    def __init__(self, detail: str) -> None:
        super().__init__(
            code=ErrorCode.INVALID_TICKET_REQUEST,
            message=detail,
        )


class InvalidPurchaseError(DomainError):
    """Raised when a purchase breaks a business rule."""

    def __init__(self, reason: PurchaseRejection, detail: str) -> None:
        super().__init__(
            code=ErrorCode.INVALID_PURCHASE,
            message=detail,
        )
        self.reason = reason
