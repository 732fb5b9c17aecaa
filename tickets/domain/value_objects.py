"""Domain primitives that enforce validity at creation time."""

import re
from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import Self

from tickets.domain.errors import InvalidTicketRequestError


class TicketCategory(Enum):
    """Ticket categories sold by the venue."""

    ADULT = "ADULT"
    CHILD = "CHILD"
    INFANT = "INFANT"

    @classmethod
    def from_string(cls, value: str) -> Self:
        try:
            return cls(value.strip().upper())
        except (AttributeError, ValueError):
            raise InvalidTicketRequestError(f"Unknown ticket type: {value!r}") from None

    @property
    def unit_price(self) -> int:
        return _UNIT_PRICES[self]

    @property
    def occupies_seat(self) -> bool:
        return self in _SEATED_CATEGORIES


# Every category needs an entry here.
_UNIT_PRICES: Mapping[TicketCategory, int] = MappingProxyType(
    {
        TicketCategory.ADULT: 25,
        TicketCategory.CHILD: 15,
        TicketCategory.INFANT: 0,
    }
)

# Infants sit on an adult's lap.
_SEATED_CATEGORIES: frozenset[TicketCategory] = frozenset(
    {TicketCategory.ADULT, TicketCategory.CHILD}
)

_DECIMAL_PATTERN = re.compile(r"-?[0-9]+")


@dataclass(frozen=True)
class AccountId:
    """Positive integer identifying the purchasing account."""

    value: int

    def __post_init__(self) -> None:
        if isinstance(self.value, bool) or not isinstance(self.value, int):
            raise ValueError("Account ID must be an integer")
        if self.value <= 0:
            raise ValueError("Account ID must be positive")

    @classmethod
    def from_string(cls, value: str) -> Self:
        text = value.strip()
        if not _DECIMAL_PATTERN.fullmatch(text):
            raise ValueError(f"Account ID must be decimal digits, received: {value!r}")
        return cls(value=int(text))


@dataclass(frozen=True)
class TicketRequest:
    """A request for a number of tickets of one category."""

    category: TicketCategory
    count: int

    def __post_init__(self) -> None:
        if not isinstance(self.category, TicketCategory):
            raise InvalidTicketRequestError("Ticket type must be provided")
        if isinstance(self.count, bool) or not isinstance(self.count, int):
            raise InvalidTicketRequestError("Number of tickets must be an integer")
        if self.count <= 0:
            raise InvalidTicketRequestError(
                f"Number of tickets must be positive, received: {self.count}"
            )


@dataclass(frozen=True)
class TicketCounts:
    """Total number of tickets requested per category."""

    counts: Mapping[TicketCategory, int] = field(default_factory=dict)

    @classmethod
    def from_requests(cls, requests: Iterable[TicketRequest | None]) -> Self:
        totals: dict[TicketCategory, int] = {}
        for request in requests:
            if request is None:
                continue
            totals[request.category] = totals.get(request.category, 0) + request.count
        return cls(counts=MappingProxyType(totals))

    def count(self, category: TicketCategory) -> int:
        return self.counts.get(category, 0)

    @property
    def total_tickets(self) -> int:
        return sum(self.counts.values())

    @property
    def total_price(self) -> int:
        return sum(
            category.unit_price * count for category, count in self.counts.items()
        )

    @property
    def total_seats(self) -> int:
        return sum(
            count for category, count in self.counts.items() if category.occupies_seat
        )


@dataclass(frozen=True)
class PurchaseQuote:
    """Price and seats owed for a validated purchase."""

    account_id: AccountId
    total_tickets: int
    total_price: int
    total_seats: int

    @classmethod
    def from_counts(cls, account_id: AccountId, counts: TicketCounts) -> Self:
        return cls(
            account_id=account_id,
            total_tickets=counts.total_tickets,
            total_price=counts.total_price,
            total_seats=counts.total_seats,
        )
