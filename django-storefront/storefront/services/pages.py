"""Page state containers.

Each page owns its components and a PageScope. Network failures are turned
into an `error` attribute on the page instead of escaping to the caller, so
the handler can render the error state in place of the content.
"""

from collections.abc import Mapping

from storefront.domain import CartSummary, Event, EventSummary, TicketTypeId
from storefront.domain.errors import DomainError
from storefront.services.cart_persistence import CartPersistence
from storefront.services.cart_service import summarize
from storefront.services.catalog_service import EventCatalog
from storefront.services.checkout_service import CheckoutOrchestrator, CheckoutOutcome
from storefront.services.metadata_cache import TicketMetadataCache
from storefront.services.page_scope import PageScope
from storefront.services.search_service import SearchIndex
from storefront.services.selection_service import TicketSelection, TicketSelectionState
from storefront.stores.interfaces import CatalogStore, CheckoutGateway


class EventListPage:
    """Event list with search."""

    def __init__(self, catalog: EventCatalog, scope: PageScope, threshold: float) -> None:
        self._catalog = catalog
        self._scope = scope
        self._threshold = threshold
        self.index = SearchIndex((), threshold)
        self.error: DomainError | None = None

    async def load(self) -> None:
        try:
            await self._scope.run(self._catalog.load_list(), self._loaded)
        except DomainError as exc:
            self.error = exc

    def _loaded(self, events: list[EventSummary]) -> None:
        self.index = SearchIndex(events, self._threshold)

    def filter(self, query: str) -> list[EventSummary]:
        return self.index.search(query)


class EventDetailPage:
    """Event detail and the shopper's ticket selection for it."""

    def __init__(self, catalog: EventCatalog, scope: PageScope) -> None:
        self._catalog = catalog
        self._scope = scope
        self.event: Event | None = None
        self.selection: TicketSelectionState | None = None
        self.error: DomainError | None = None

    async def load(
        self,
        event_id: str | int,
        quantities: Mapping[TicketTypeId, object] | None = None,
    ) -> None:
        try:
            await self._scope.run(
                self._catalog.load_detail(event_id),
                lambda event: self._loaded(event, quantities),
            )
        except DomainError as exc:
            self.error = exc

    def _loaded(self, event: Event, quantities: Mapping[TicketTypeId, object] | None) -> None:
        self.event = event
        self.selection = TicketSelectionState(event.ticket_types, quantities)

    def proceed_to_checkout(self, persistence: CartPersistence) -> TicketSelection:
        """Hand the selection over to the cart page."""
        selection = self.selection.selection if self.selection else {}
        persistence.save(selection)
        return selection


class CartPage:
    """Cart summary and checkout for the persisted selection."""

    def __init__(
        self,
        store: CatalogStore,
        gateway: CheckoutGateway,
        persistence: CartPersistence,
        scope: PageScope,
    ) -> None:
        self.selection: TicketSelection = persistence.load()
        self.metadata = TicketMetadataCache(store, scope)
        self.orchestrator = CheckoutOrchestrator(gateway, scope)

    async def refresh(self) -> CartSummary:
        entries = await self.metadata.sync(self.selection)
        return summarize(
            self.selection,
            entries,
            failed=self.metadata.failed_ids(self.selection),
        )

    async def checkout(self, email: str) -> CheckoutOutcome:
        return await self.orchestrator.checkout(self.selection, email)
