"""Serializers for request bodies and domain-model responses."""

from rest_framework import serializers

from storefront.domain import TicketTypeId


class MoneyField(serializers.Field):
    """Read-only Money rendered as a two-decimal string."""

    def __init__(self, **kwargs):
        kwargs["read_only"] = True
        super().__init__(**kwargs)

    def to_representation(self, value):
        return str(value)


class EventSummarySerializer(serializers.Serializer):
    """Serializer for EventSummary domain model."""

    id = serializers.IntegerField(source="id.value")
    title = serializers.CharField()
    organisation_name = serializers.CharField()
    description = serializers.CharField()
    image_url = serializers.CharField(allow_null=True)


class TicketTypeSerializer(serializers.Serializer):
    """Serializer for TicketType domain model."""

    id = serializers.IntegerField(source="id.value")
    name = serializers.CharField()
    price = MoneyField()
    total_quantity = serializers.IntegerField(source="total_quantity.value")
    min_quantity = serializers.IntegerField(source="bounds.minimum")
    max_quantity = serializers.IntegerField(source="bounds.maximum")


class EventSerializer(serializers.Serializer):
    """Serializer for Event domain model."""

    id = serializers.IntegerField(source="id.value")
    title = serializers.CharField()
    organisation_name = serializers.CharField()
    description = serializers.CharField()
    location = serializers.CharField()
    image_urls = serializers.ListField(child=serializers.CharField())
    start_time = serializers.DateTimeField(source="starts_at")
    end_time = serializers.DateTimeField(source="ends_at")
    total_capacity = serializers.IntegerField(source="total_capacity.value")
    ticket_types = TicketTypeSerializer(many=True)


class CartLineSerializer(serializers.Serializer):
    """Serializer for CartLine domain model."""

    ticket_id = serializers.IntegerField(source="ticket_id.value")
    name = serializers.CharField()
    quantity = serializers.IntegerField()
    unit_price = MoneyField()
    subtotal = MoneyField()
    label = serializers.CharField()


class CartSummarySerializer(serializers.Serializer):
    """Serializer for CartSummary domain model."""

    lines = CartLineSerializer(many=True)
    total = MoneyField()
    total_tickets = serializers.IntegerField()
    pending = serializers.SerializerMethodField()
    failed = serializers.SerializerMethodField()
    is_final = serializers.BooleanField()

    def get_pending(self, summary) -> list[int]:
        return [ticket_id.value for ticket_id in summary.pending_ids]

    def get_failed(self, summary) -> list[int]:
        return [ticket_id.value for ticket_id in summary.failed_ids]


class SelectionField(serializers.DictField):
    """Ticket id to quantity mapping.

    Quantities are passed through raw; clamping and parsing happen in
    TicketSelectionState.
    """

    child = serializers.JSONField()

    def to_internal_value(self, data):
        raw = super().to_internal_value(data)
        try:
            return {TicketTypeId.from_string(key): value for key, value in raw.items()}
        except ValueError:
            raise serializers.ValidationError("Ticket ids must be integers.")


def selection_to_representation(selection) -> dict[str, int]:
    return {str(ticket_id.value): quantity for ticket_id, quantity in sorted(selection.items())}


class SelectionUpdateSerializer(serializers.Serializer):
    """Body of POST /api/events/{id}/selection."""

    selection = SelectionField(required=False, default=dict)
    ticket_id = serializers.IntegerField()
    quantity = serializers.JSONField(required=False)
    action = serializers.ChoiceField(choices=["set", "increment", "decrement"], default="set")

    def validate(self, attrs):
        if attrs["action"] == "set" and "quantity" not in attrs:
            raise serializers.ValidationError({"quantity": "Required when action is 'set'."})
        return attrs


class ProceedSerializer(serializers.Serializer):
    """Body of POST /api/events/{id}/proceed."""

    selection = SelectionField()


class CheckoutSerializer(serializers.Serializer):
    """Body of POST /api/cart/checkout."""

    email = serializers.CharField(required=False, allow_blank=True, default="")
