"""Pydantic models for backend JSON payloads.

The backend is validated at the boundary so a drifting payload becomes a
domain error instead of a KeyError deep inside a service.
"""

from datetime import datetime
from decimal import Decimal

from pydantic import BaseModel, Field, TypeAdapter

from storefront.config import TicketLimits
from storefront.domain import (
    Capacity,
    Event,
    EventId,
    EventSummary,
    Money,
    QuantityBounds,
    TicketMetadataEntry,
    TicketType,
    TicketTypeId,
)
from storefront.domain.errors import MalformedEventError


class EventSummaryPayload(BaseModel):
    """One element of `GET /api/events`."""

    id: int
    title: str
    organisation_name: str = ""
    description: str = ""
    image_url: str | None = None

    def to_domain(self) -> EventSummary:
        return EventSummary(
            id=EventId(self.id),
            title=self.title,
            organisation_name=self.organisation_name,
            description=self.description,
            image_url=self.image_url or None,
        )


class TicketTypePayload(BaseModel):
    """Ticket type nested inside an event detail.

    `min_quantity`/`max_quantity` are optional per-row overrides of the
    configured selection bounds.
    """

    id: int
    name: str
    price: Decimal = Field(ge=0)
    total_quantity: int = Field(default=0, ge=0)
    min_quantity: int = Field(default=TicketLimits.MIN_PER_TYPE, ge=0)
    max_quantity: int = Field(default=TicketLimits.MAX_PER_TYPE, ge=0)

    def to_domain(self) -> TicketType:
        return TicketType(
            id=TicketTypeId(self.id),
            name=self.name,
            price=Money(self.price),
            total_quantity=Capacity(self.total_quantity),
            bounds=QuantityBounds(minimum=self.min_quantity, maximum=self.max_quantity),
        )


class EventPayload(BaseModel):
    """Body of `GET /api/events/{id}`."""

    id: int
    title: str
    organisation_name: str = ""
    description: str = ""
    location: str = ""
    start_time: datetime
    end_time: datetime
    total_capacity: int = Field(default=0, ge=0)
    # Absent and empty are different: absent means the record is broken.
    image_urls: list[str | None] | None = None
    ticket_types: list[TicketTypePayload] | None = None

    def to_domain(self) -> Event:
        if self.image_urls is None:
            raise MalformedEventError(str(self.id), reason="image_urls missing")
        return Event(
            id=EventId(self.id),
            title=self.title,
            organisation_name=self.organisation_name,
            description=self.description,
            location=self.location,
            image_urls=tuple(url for url in self.image_urls if url),
            starts_at=self.start_time,
            ends_at=self.end_time,
            total_capacity=Capacity(self.total_capacity),
            ticket_types=tuple(t.to_domain() for t in self.ticket_types or ()),
        )


class TicketMetadataPayload(BaseModel):
    """One value of the `POST /api/ticketTypes` mapping."""

    id: int
    name: str
    price: Decimal = Field(ge=0)

    def to_domain(self) -> TicketMetadataEntry:
        return TicketMetadataEntry(
            id=TicketTypeId(self.id),
            name=self.name,
            price=Money(self.price),
        )


class CheckoutSessionPayload(BaseModel):
    """Body of `POST /create-checkout-session`, success or failure."""

    url: str | None = None
    error: str | None = None


event_list_adapter = TypeAdapter(list[EventSummaryPayload] | None)
ticket_metadata_adapter = TypeAdapter(dict[int, TicketMetadataPayload] | None)
