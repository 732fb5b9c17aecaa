"""HTTP handlers (views) - handle HTTP concerns only.

Handlers:
- Parse requests and validate input format
- Call services for business logic
- Map domain errors to HTTP responses
- Never contain business logic
- Never expose internal error details
"""

from typing import Any

from rest_framework import status
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.views import APIView

from tickets.domain import DomainError, InvalidPurchaseError, TicketCategory, TicketRequest
from tickets.handlers.serializers import PurchaseQuoteSerializer, PurchaseRequestSerializer
from tickets.services import build_purchase_service


def _ticket_requests(tickets: list[dict[str, Any] | None] | None) -> list[TicketRequest | None] | None:
    if tickets is None:
        return None
    return [
        None
        if item is None
        else TicketRequest(
            category=TicketCategory.from_string(item["type"]),
            count=item["count"],
        )
        for item in tickets
    ]


def _domain_error_response(error: DomainError) -> Response:
    body = {"code": error.code.value, "message": error.message}
    if isinstance(error, InvalidPurchaseError):
        body["reason"] = error.reason.value
    return Response(body, status=status.HTTP_400_BAD_REQUEST)


def _format_error_response(errors: dict[str, Any]) -> Response:
    return Response(
        {"code": "INVALID_REQUEST", "errors": errors},
        status=status.HTTP_400_BAD_REQUEST,
    )


class PurchaseView(APIView):
    """Handler for POST /api/purchases"""

    def post(self, request: Request) -> Response:
        serializer = PurchaseRequestSerializer(data=request.data)
        if not serializer.is_valid():
            return _format_error_response(serializer.errors)

        account_id = serializer.validated_data.get("account_id")
        service = build_purchase_service()
        try:
            requests = _ticket_requests(serializer.validated_data.get("tickets"))
            # purchase_tickets returns nothing; the quote is recomputed for the response body.
            quote = service.quote_tickets(account_id, requests)
            service.purchase_tickets(account_id, requests)
        except DomainError as exc:
            return _domain_error_response(exc)

        return Response(PurchaseQuoteSerializer(quote).data, status=status.HTTP_201_CREATED)


class PurchaseQuoteView(APIView):
    """Handler for POST /api/purchases/quote"""

    def post(self, request: Request) -> Response:
        serializer = PurchaseRequestSerializer(data=request.data)
        if not serializer.is_valid():
            return _format_error_response(serializer.errors)

        service = build_purchase_service()
        try:
            requests = _ticket_requests(serializer.validated_data.get("tickets"))
            quote = service.quote_tickets(serializer.validated_data.get("account_id"), requests)
        except DomainError as exc:
            return _domain_error_response(exc)

        return Response(PurchaseQuoteSerializer(quote).data)
