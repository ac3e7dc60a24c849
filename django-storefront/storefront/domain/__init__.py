from storefront.domain.models import (
    CartLine,
    CartSummary,
    CheckoutRequest,
    CheckoutSession,
    Event,
    EventSummary,
    LineItem,
    TicketMetadataEntry,
    TicketType,
)
from storefront.domain.value_objects import (
    Capacity,
    EventId,
    Money,
    QuantityBounds,
    TicketTypeId,
)

__all__ = [
    "CartLine",
    "CartSummary",
    "CheckoutRequest",
    "CheckoutSession",
    "Event",
    "EventSummary",
    "LineItem",
    "TicketMetadataEntry",
    "TicketType",
    "Capacity",
    "EventId",
    "Money",
    "QuantityBounds",
    "TicketTypeId",
]
