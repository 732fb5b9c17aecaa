"""Gateway interfaces for the third-party services a purchase depends on.

Gateways must be swappable and are injected into services.
"""

from abc import ABC, abstractmethod


class PaymentGateway(ABC):
    """Interface for taking payment from an account."""

    @abstractmethod
    def make_payment(self, account_id: int, amount: int) -> None:
        """Charge `amount` currency units to the account."""
        ...


class SeatReservationGateway(ABC):
    """Interface for reserving seats at the venue."""

    @abstractmethod
    def reserve_seat(self, account_id: int, seat_count: int) -> None:
        """Reserve `seat_count` seats for the account."""
        ...
