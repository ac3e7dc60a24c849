"""Builders and in-memory fakes shared by the tests."""

from collections.abc import Sequence
from datetime import datetime, timezone
from decimal import Decimal

from storefront.domain import (
    Capacity,
    CheckoutRequest,
    CheckoutSession,
    Event,
    EventId,
    EventSummary,
    Money,
    QuantityBounds,
    TicketMetadataEntry,
    TicketType,
    TicketTypeId,
)
from storefront.domain.errors import (
    CatalogUnavailableError,
    CheckoutRejectedError,
    EventNotFoundError,
    MetadataUnresolvedError,
)
from storefront.stores.interfaces import CatalogStore, CheckoutGateway, SelectionStore


def make_ticket_type(ticket_id: int, name: str, price: str, minimum: int = 0, maximum: int = 10) -> TicketType:
    return TicketType(
        id=TicketTypeId(ticket_id),
        name=name,
        price=Money(Decimal(price)),
        total_quantity=Capacity(100),
        bounds=QuantityBounds(minimum=minimum, maximum=maximum),
    )


def make_event(event_id: int = 1, ticket_types: Sequence[TicketType] = (), image_urls=("https://img/1.png",)) -> Event:
    return Event(
        id=EventId(event_id),
        title="Jazz Night",
        organisation_name="Blue Note",
        description="An evening of live jazz",
        location="Sydney",
        image_urls=tuple(image_urls),
        starts_at=datetime(2026, 11, 1, 19, 0, tzinfo=timezone.utc),
        ends_at=datetime(2026, 11, 1, 23, 0, tzinfo=timezone.utc),
        total_capacity=Capacity(200),
        ticket_types=tuple(ticket_types),
    )


def make_summary(event_id: int, title: str, description: str = "") -> EventSummary:
    return EventSummary(
        id=EventId(event_id),
        title=title,
        organisation_name="Org",
        description=description,
    )


def metadata(ticket_id: int, name: str, price: str) -> TicketMetadataEntry:
    return TicketMetadataEntry(id=TicketTypeId(ticket_id), name=name, price=Money(Decimal(price)))


class FakeBackendStore(CatalogStore, CheckoutGateway):
    """In-memory backend recording every call it receives."""

    def __init__(self) -> None:
        self.events: dict[EventId, Event] = {}
        self.summaries: list[EventSummary] = []
        self.metadata: dict[TicketTypeId, TicketMetadataEntry] = {}
        self.checkout_result: CheckoutSession | CheckoutRejectedError = CheckoutSession(
            url="https://pay.example/session/abc"
        )
        self.unavailable = False
        self.metadata_unavailable = False
        self.metadata_calls: list[list[TicketTypeId]] = []
        self.checkout_calls: list[CheckoutRequest] = []

    async def list_events(self) -> list[EventSummary]:
        if self.unavailable:
            raise CatalogUnavailableError()
        return list(self.summaries)

    async def get_event(self, event_id: EventId) -> Event:
        if self.unavailable:
            raise CatalogUnavailableError()
        try:
            return self.events[event_id]
        except KeyError:
            raise EventNotFoundError(str(event_id)) from None

    async def get_ticket_types(
        self, ticket_ids: Sequence[TicketTypeId]
    ) -> dict[TicketTypeId, TicketMetadataEntry]:
        self.metadata_calls.append(list(ticket_ids))
        if self.metadata_unavailable:
            raise MetadataUnresolvedError()
        return {i: self.metadata[i] for i in ticket_ids if i in self.metadata}

    async def create_checkout_session(self, request: CheckoutRequest) -> CheckoutSession:
        self.checkout_calls.append(request)
        if isinstance(self.checkout_result, CheckoutRejectedError):
            raise self.checkout_result
        return self.checkout_result


class InMemorySelectionStore(SelectionStore):
    def __init__(self, initial: dict[str, str] | None = None) -> None:
        self.data = dict(initial or {})

    def get(self, key: str) -> str | None:
        return self.data.get(key)

    def set(self, key: str, value: str) -> None:
        self.data[key] = value


