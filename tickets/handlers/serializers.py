"""Serializers for purchase payloads and responses.

Input serializers check format only; purchase rules are enforced by the service.
"""

from rest_framework import serializers


class TicketRequestSerializer(serializers.Serializer):
    """Serializer for one entry of the tickets list."""

    type = serializers.CharField()
    count = serializers.IntegerField()


class PurchaseRequestSerializer(serializers.Serializer):
    """Serializer for a purchase or quote request body."""

    # Passed through untouched so any non-numeric ID reaches the service as an account error.
    account_id = serializers.JSONField(required=False, allow_null=True)
    tickets = serializers.ListField(
        child=TicketRequestSerializer(allow_null=True),
        required=False,
        allow_null=True,
        allow_empty=True,
    )


class PurchaseQuoteSerializer(serializers.Serializer):
    """Serializer for the PurchaseQuote domain model."""

    account_id = serializers.IntegerField(source="account_id.value")
    total_tickets = serializers.IntegerField()
    total_price = serializers.IntegerField()
    total_seats = serializers.IntegerField()
