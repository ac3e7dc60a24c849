"""Store interfaces (repository pattern).

Stores must be swappable and return domain models. Backend failures are
converted to domain errors inside the store that issued the call.
"""

from abc import ABC, abstractmethod
from collections.abc import Sequence

from storefront.domain import (
    CheckoutRequest,
    CheckoutSession,
    Event,
    EventId,
    EventSummary,
    TicketMetadataEntry,
    TicketTypeId,
)


class CatalogStore(ABC):
    """Interface for reading the event catalog."""

    @abstractmethod
    async def list_events(self) -> list[EventSummary]:
        """Return all events in catalog order.

        Raises:
            CatalogUnavailableError: If the catalog cannot be reached.
        """
        ...

    @abstractmethod
    async def get_event(self, event_id: EventId) -> Event:
        """Return one event with its ticket types.

        Raises:
            CatalogUnavailableError: If the catalog cannot be reached.
            EventNotFoundError: If the event does not exist.
            MalformedEventError: If the record has no image list.
        """
        ...

    @abstractmethod
    async def get_ticket_types(
        self, ticket_ids: Sequence[TicketTypeId]
    ) -> dict[TicketTypeId, TicketMetadataEntry]:
        """Return name and price for each known id in one batched request.

        Raises:
            MetadataUnresolvedError: If the batch cannot be fetched.
        """
        ...


class CheckoutGateway(ABC):
    """Interface for the external checkout-session endpoint."""

    @abstractmethod
    async def create_checkout_session(self, request: CheckoutRequest) -> CheckoutSession:
        """Create a payment session and return where to send the shopper.

        Raises:
            CheckoutRejectedError: On transport failure or a non-success response.
        """
        ...


class SelectionStore(ABC):
    """Session-scoped key-value storage."""

    @abstractmethod
    def get(self, key: str) -> str | None:
        """Return the stored value, or None if absent."""
        ...

    @abstractmethod
    def set(self, key: str, value: str) -> None:
        """Store a value, replacing whatever was there."""
        ...
