"""httpx implementation of the catalog and checkout stores.

Every call opens a short-lived AsyncClient against the backend base URL.
Transport errors, timeouts, non-2xx responses and unreadable bodies are
converted to domain errors here and never leave this module as httpx errors.
"""

from collections.abc import Sequence

import httpx

from storefront.config import Checkout
from storefront.domain import (
    CheckoutRequest,
    CheckoutSession,
    Event,
    EventId,
    EventSummary,
    TicketMetadataEntry,
    TicketTypeId,
)
from storefront.domain.errors import (
    CatalogUnavailableError,
    CheckoutRejectedError,
    EventNotFoundError,
    MalformedEventError,
    MetadataUnresolvedError,
)
from storefront.logger_config import layer_logger
from storefront.stores.interfaces import CatalogStore, CheckoutGateway
from storefront.stores.payloads import (
    CheckoutSessionPayload,
    EventPayload,
    event_list_adapter,
    ticket_metadata_adapter,
)

logger = layer_logger("store")

EVENTS_PATH = "/api/events"
TICKET_TYPES_PATH = "/api/ticketTypes"
CHECKOUT_SESSION_PATH = "/create-checkout-session"


class HttpBackendStore(CatalogStore, CheckoutGateway):
    """Backend client for the catalog, ticket metadata and checkout endpoints."""

    def __init__(
        self,
        base_url: str,
        timeout: float = 10.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._base_url = base_url.rstrip("/")
        self._timeout = timeout
        self._transport = transport

    def _client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(
            base_url=self._base_url,
            timeout=self._timeout,
            transport=self._transport,
        )

    async def list_events(self) -> list[EventSummary]:
        try:
            async with self._client() as client:
                resp = await client.get(EVENTS_PATH)
                resp.raise_for_status()
                payload = event_list_adapter.validate_python(resp.json())
            return [item.to_domain() for item in payload or ()]
        except (httpx.HTTPError, ValueError) as exc:
            # ValueError also covers ids rejected by a value object
            logger.warning(f"Event list fetch failed: {exc}")
            raise CatalogUnavailableError() from exc

    async def get_event(self, event_id: EventId) -> Event:
        try:
            async with self._client() as client:
                resp = await client.get(f"{EVENTS_PATH}/{event_id}")
        except httpx.HTTPError as exc:
            logger.warning(f"Event {event_id} fetch failed: {exc}")
            raise CatalogUnavailableError() from exc

        if resp.status_code == httpx.codes.NOT_FOUND:
            raise EventNotFoundError(str(event_id))
        if resp.is_error:
            logger.warning(f"Event {event_id} fetch returned {resp.status_code}")
            raise CatalogUnavailableError()

        try:
            body = resp.json()
        except ValueError as exc:
            logger.warning(f"Event {event_id} body is not JSON: {exc}")
            raise CatalogUnavailableError() from exc

        try:
            return EventPayload.model_validate(body).to_domain()
        except ValueError as exc:
            # ValidationError, or bounds/price rejected by a value object
            logger.warning(f"Event {event_id} record is malformed: {exc}")
            raise MalformedEventError(str(event_id), reason=str(exc)) from exc

    async def get_ticket_types(
        self, ticket_ids: Sequence[TicketTypeId]
    ) -> dict[TicketTypeId, TicketMetadataEntry]:
        body = {"ticketIds": [ticket_id.value for ticket_id in ticket_ids]}
        try:
            async with self._client() as client:
                resp = await client.post(TICKET_TYPES_PATH, json=body)
                resp.raise_for_status()
                payload = ticket_metadata_adapter.validate_python(resp.json())
        except (httpx.HTTPError, ValueError) as exc:
            logger.warning(f"Ticket metadata fetch failed for {body['ticketIds']}: {exc}")
            raise MetadataUnresolvedError() from exc

        entries = (item.to_domain() for item in (payload or {}).values())
        return {entry.id: entry for entry in entries}

    async def create_checkout_session(self, request: CheckoutRequest) -> CheckoutSession:
        body = {
            "items": [
                {"ticket_id": item.ticket_id.value, "quantity": item.quantity}
                for item in request.items
            ],
            "email": request.email,
        }
        try:
            async with self._client() as client:
                resp = await client.post(CHECKOUT_SESSION_PATH, json=body)
        except httpx.HTTPError as exc:
            logger.warning(f"Checkout session request failed: {exc}")
            raise CheckoutRejectedError(Checkout.GENERIC_FAILURE) from exc

        payload = _read_checkout_payload(resp)
        if resp.is_error or payload.error:
            logger.warning(
                f"Checkout session rejected ({resp.status_code}): {payload.error}"
            )
            raise CheckoutRejectedError(payload.error or Checkout.GENERIC_FAILURE)

        return CheckoutSession(url=payload.url or None)


def _read_checkout_payload(resp: httpx.Response) -> CheckoutSessionPayload:
    """Best-effort parse; error pages without a JSON body read as empty."""
    try:
        return CheckoutSessionPayload.model_validate(resp.json())
    except ValueError:
        return CheckoutSessionPayload()
