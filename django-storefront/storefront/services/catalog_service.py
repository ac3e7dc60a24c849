"""Event catalog service.

Services:
- Depend only on interfaces (stores)
- Validate domain invariants
- Perform orchestration and error mapping
- Return domain models or domain errors
"""

from storefront.domain import Event, EventId, EventSummary
from storefront.domain.errors import InvalidEventIdError
from storefront.logger_config import layer_logger
from storefront.stores.interfaces import CatalogStore

logger = layer_logger("service")


class EventCatalog:
    """Loads the event list and single-event detail.

    Nothing is cached between calls; each page load fetches again.
    """

    def __init__(self, store: CatalogStore) -> None:
        self._store = store

    async def load_list(self) -> list[EventSummary]:
        """Return all events.

        Raises:
            CatalogUnavailableError: If the catalog cannot be reached.
        """
        events = await self._store.list_events()
        logger.debug(f"Loaded {len(events)} events")
        return events

    async def load_detail(self, event_id: str | int) -> Event:
        """Return an event with its ticket types.

        Raises:
            InvalidEventIdError: If event_id is not a non-negative integer.
            CatalogUnavailableError: If the catalog cannot be reached.
            EventNotFoundError: If the event does not exist.
            MalformedEventError: If the record has no image list.
        """
        return await self._store.get_event(parse_event_id(event_id))


def parse_event_id(event_id: str | int) -> EventId:
    if isinstance(event_id, bool):
        raise InvalidEventIdError()
    try:
        if isinstance(event_id, int):
            return EventId(event_id)
        return EventId.from_string(event_id.strip())
    except (ValueError, AttributeError) as exc:
        raise InvalidEventIdError() from exc
