"""Pytest configuration and shared fixtures."""

from unittest.mock import Mock

import pytest
from rest_framework.test import APIClient

from tickets.gateways import PaymentGateway, SeatReservationGateway
from tickets.services import TicketPurchaseService


@pytest.fixture
def api_client() -> APIClient:
    return APIClient()


@pytest.fixture
def payment_gateway() -> Mock:
    return Mock(spec=PaymentGateway)


@pytest.fixture
def seat_reservation_gateway() -> Mock:
    return Mock(spec=SeatReservationGateway)


@pytest.fixture
def gateway_calls(payment_gateway: Mock, seat_reservation_gateway: Mock) -> Mock:
    """Parent mock recording calls to both gateways in the order they happen."""
    manager = Mock()
    manager.attach_mock(payment_gateway, "payment")
    manager.attach_mock(seat_reservation_gateway, "seats")
    return manager


@pytest.fixture
def service(payment_gateway: Mock, seat_reservation_gateway: Mock) -> TicketPurchaseService:
    return TicketPurchaseService(payment_gateway, seat_reservation_gateway)
