"""Domain models for the storefront.

These are pure domain objects built from backend payloads in stores/.
Nothing here knows about HTTP or the session.
"""

from dataclasses import dataclass, field
from datetime import datetime

from storefront.domain.value_objects import (
    Capacity,
    EventId,
    Money,
    QuantityBounds,
    TicketTypeId,
)


@dataclass(frozen=True)
class EventSummary:
    """An event as it appears in the catalog list."""

    id: EventId
    title: str
    organisation_name: str
    description: str
    image_url: str | None = None


@dataclass(frozen=True)
class TicketType:
    """A purchasable category within an event."""

    id: TicketTypeId
    name: str
    price: Money
    total_quantity: Capacity
    bounds: QuantityBounds = field(default_factory=QuantityBounds)


@dataclass(frozen=True)
class Event:
    """Full event detail, including its ticket types."""

    id: EventId
    title: str
    organisation_name: str
    description: str
    location: str
    image_urls: tuple[str, ...]
    starts_at: datetime
    ends_at: datetime
    total_capacity: Capacity
    ticket_types: tuple[TicketType, ...] = ()

    def ticket_type(self, ticket_id: TicketTypeId) -> TicketType | None:
        for ticket_type in self.ticket_types:
            if ticket_type.id == ticket_id:
                return ticket_type
        return None


@dataclass(frozen=True)
class TicketMetadataEntry:
    """Display data for one ticket type, resolved independently of the event."""

    id: TicketTypeId
    name: str
    price: Money


@dataclass(frozen=True)
class LineItem:
    """One checkout line: how many of which ticket type."""

    ticket_id: TicketTypeId
    quantity: int


@dataclass(frozen=True)
class CheckoutRequest:
    """Payload sent to the checkout-session endpoint."""

    items: tuple[LineItem, ...]
    email: str


@dataclass(frozen=True)
class CheckoutSession:
    """Checkout-session endpoint answer: a redirect URL or an error message."""

    url: str | None = None
    error: str | None = None


@dataclass(frozen=True)
class CartLine:
    """A resolved cart line, ready to display."""

    ticket_id: TicketTypeId
    name: str
    quantity: int
    unit_price: Money

    @property
    def subtotal(self) -> Money:
        return self.unit_price.times(self.quantity)

    @property
    def label(self) -> str:
        return f"{self.quantity} × {self.name}"

    def __str__(self) -> str:
        return f"{self.label} = ${self.subtotal}"


@dataclass(frozen=True)
class CartSummary:
    """Cart lines and total, plus the ids still waiting on metadata."""

    lines: tuple[CartLine, ...]
    total: Money
    pending_ids: tuple[TicketTypeId, ...] = ()
    failed_ids: tuple[TicketTypeId, ...] = ()

    @property
    def is_final(self) -> bool:
        """True once every selected line has resolved metadata."""
        return not self.pending_ids and not self.failed_ids

    @property
    def total_tickets(self) -> int:
        return sum(line.quantity for line in self.lines)
