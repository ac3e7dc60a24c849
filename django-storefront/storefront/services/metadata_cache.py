"""Ticket id to {name, price} resolution for the cart."""

from collections.abc import Iterable, Mapping
from enum import Enum

from storefront.domain import TicketMetadataEntry, TicketTypeId
from storefront.domain.errors import MetadataUnresolvedError
from storefront.logger_config import layer_logger
from storefront.services.page_scope import PageScope
from storefront.stores.interfaces import CatalogStore

logger = layer_logger("service")


class MetadataStatus(Enum):
    PENDING = "pending"
    RESOLVED = "resolved"
    FAILED = "failed"


class TicketMetadataCache:
    """Page-lifetime cache of ticket metadata.

    Entries are only ever added. Ids that are not resolved yet are pending;
    ids whose batch failed, or that the backend did not return, are failed
    and will be requested again by the next resolve.
    """

    def __init__(self, store: CatalogStore, scope: PageScope) -> None:
        self._store = store
        self._scope = scope
        self._entries: dict[TicketTypeId, TicketMetadataEntry] = {}
        self._in_flight: set[TicketTypeId] = set()
        self._failed: set[TicketTypeId] = set()
        self._tracked: frozenset[TicketTypeId] = frozenset()

    @property
    def entries(self) -> dict[TicketTypeId, TicketMetadataEntry]:
        return dict(self._entries)

    def status(self, ticket_id: TicketTypeId) -> MetadataStatus:
        if ticket_id in self._entries:
            return MetadataStatus.RESOLVED
        if ticket_id in self._failed:
            return MetadataStatus.FAILED
        return MetadataStatus.PENDING

    def pending_ids(self, ticket_ids: Iterable[TicketTypeId]) -> set[TicketTypeId]:
        return {i for i in ticket_ids if self.status(i) is MetadataStatus.PENDING}

    def failed_ids(self, ticket_ids: Iterable[TicketTypeId]) -> set[TicketTypeId]:
        return {i for i in ticket_ids if self.status(i) is MetadataStatus.FAILED}

    async def sync(
        self, selection: Mapping[TicketTypeId, int]
    ) -> dict[TicketTypeId, TicketMetadataEntry]:
        """Resolve the selection's ids if its key set changed since the last sync."""
        ids = frozenset(selection)
        if ids == self._tracked:
            return self._known(ids)
        self._tracked = ids
        return await self.resolve(ids)

    async def resolve(
        self, ticket_ids: Iterable[TicketTypeId]
    ) -> dict[TicketTypeId, TicketMetadataEntry]:
        """Fetch whatever is missing in one batch and return what is known."""
        wanted = set(ticket_ids)
        missing = sorted(wanted - self._entries.keys() - self._in_flight)
        if missing:
            await self._fetch(missing)
        return self._known(wanted)

    async def _fetch(self, missing: list[TicketTypeId]) -> None:
        self._in_flight.update(missing)
        self._failed.difference_update(missing)
        try:
            await self._scope.run(
                self._store.get_ticket_types(missing),
                lambda resolved: self._absorb(missing, resolved),
            )
        except MetadataUnresolvedError:
            logger.warning(f"Ticket metadata unresolved for {[str(i) for i in missing]}")
            self._failed.update(missing)
        finally:
            self._in_flight.difference_update(missing)

    def _absorb(
        self,
        requested: list[TicketTypeId],
        resolved: Mapping[TicketTypeId, TicketMetadataEntry],
    ) -> None:
        for ticket_id, entry in resolved.items():
            self._entries.setdefault(ticket_id, entry)
        unknown = [i for i in requested if i not in self._entries]
        if unknown:
            logger.warning(f"Backend returned no metadata for {[str(i) for i in unknown]}")
            self._failed.update(unknown)

    def _known(self, ticket_ids: Iterable[TicketTypeId]) -> dict[TicketTypeId, TicketMetadataEntry]:
        return {i: self._entries[i] for i in ticket_ids if i in self._entries}
