"""HTTP handlers (views) - handle HTTP concerns only.

Handlers:
- Parse requests and validate input format
- Run page containers inside a PageScope for the life of the request
- Map domain errors to HTTP responses
- Never contain business logic
- Never expose internal error details
"""

from collections.abc import Awaitable, Callable
from typing import TypeVar

from asgiref.sync import async_to_sync
from django.conf import settings
from django.urls import reverse
from rest_framework import status
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.views import APIView

from storefront.domain import TicketTypeId
from storefront.domain.errors import DomainError, ErrorCode
from storefront.handlers.serializers import (
    CartSummarySerializer,
    CheckoutSerializer,
    EventSerializer,
    EventSummarySerializer,
    ProceedSerializer,
    SelectionUpdateSerializer,
    selection_to_representation,
)
from storefront.services.cart_persistence import CartPersistence
from storefront.services.catalog_service import EventCatalog
from storefront.services.checkout_service import CheckoutState
from storefront.services.pages import CartPage, EventDetailPage, EventListPage
from storefront.services.page_scope import PageScope
from storefront.stores import DjangoSessionStore, HttpBackendStore

T = TypeVar("T")

ERROR_STATUS = {
    ErrorCode.CATALOG_UNAVAILABLE: status.HTTP_503_SERVICE_UNAVAILABLE,
    ErrorCode.EVENT_NOT_FOUND: status.HTTP_404_NOT_FOUND,
    ErrorCode.INVALID_EVENT_ID: status.HTTP_400_BAD_REQUEST,
    ErrorCode.MALFORMED_EVENT: status.HTTP_502_BAD_GATEWAY,
    ErrorCode.METADATA_UNRESOLVED: status.HTTP_502_BAD_GATEWAY,
    ErrorCode.UNKNOWN_TICKET_TYPE: status.HTTP_400_BAD_REQUEST,
    ErrorCode.INVALID_SELECTION: status.HTTP_400_BAD_REQUEST,
    ErrorCode.CART_EMPTY: status.HTTP_400_BAD_REQUEST,
    ErrorCode.MISSING_EMAIL: status.HTTP_400_BAD_REQUEST,
    ErrorCode.CHECKOUT_REJECTED: status.HTTP_502_BAD_GATEWAY,
}


def build_backend_store() -> HttpBackendStore:
    return HttpBackendStore(
        settings.STOREFRONT_BACKEND_URL,
        timeout=settings.STOREFRONT_BACKEND_TIMEOUT,
    )


def run_in_scope(scope: PageScope, call: Callable[[], Awaitable[T]]) -> T:
    """Run a page coroutine and retire the page scope when it returns."""

    async def runner() -> T:
        async with scope:
            return await call()

    return async_to_sync(runner)()


def error_response(error: DomainError, **extra) -> Response:
    body = {"code": error.code.value, "message": error.message, **extra}
    return Response(body, status=ERROR_STATUS.get(error.code, status.HTTP_500_INTERNAL_SERVER_ERROR))


def invalid_selection_response(errors) -> Response:
    return Response(
        {"code": ErrorCode.INVALID_SELECTION.value, "message": "Invalid ticket selection", "errors": errors},
        status=status.HTTP_400_BAD_REQUEST,
    )


def _persistence(request: Request) -> CartPersistence:
    return CartPersistence(DjangoSessionStore(request.session))


class EventListView(APIView):
    """Handler for GET /api/events?q=<query>"""

    def get(self, request: Request) -> Response:
        scope = PageScope("event-list")
        page = EventListPage(
            EventCatalog(build_backend_store()),
            scope,
            threshold=settings.STOREFRONT_SEARCH_THRESHOLD,
        )
        run_in_scope(scope, page.load)
        if page.error:
            return error_response(page.error)

        events = page.filter(request.query_params.get("q", ""))
        return Response(EventSummarySerializer(events, many=True).data)


class EventDetailView(APIView):
    """Handler for GET /api/events/{event_id}"""

    def get(self, request: Request, event_id: str) -> Response:
        scope = PageScope("event-detail")
        page = EventDetailPage(EventCatalog(build_backend_store()), scope)
        run_in_scope(scope, lambda: page.load(event_id))
        if page.error:
            return error_response(page.error)
        return Response(EventSerializer(page.event).data)


class SelectionView(APIView):
    """Handler for POST /api/events/{event_id}/selection

    Applies one quantity change to the submitted selection and returns the
    clamped result.
    """

    def post(self, request: Request, event_id: str) -> Response:
        body = SelectionUpdateSerializer(data=request.data)
        if not body.is_valid():
            return invalid_selection_response(body.errors)
        data = body.validated_data

        scope = PageScope("event-detail")
        page = EventDetailPage(EventCatalog(build_backend_store()), scope)
        run_in_scope(scope, lambda: page.load(event_id, data["selection"]))
        if page.error:
            return error_response(page.error)

        ticket_id = TicketTypeId(data["ticket_id"])
        try:
            if data["action"] == "increment":
                selection = page.selection.increment(ticket_id)
            elif data["action"] == "decrement":
                selection = page.selection.decrement(ticket_id)
            else:
                selection = page.selection.set_quantity(ticket_id, data["quantity"])
        except DomainError as exc:
            return error_response(exc)

        return Response(
            {
                "selection": selection_to_representation(selection),
                "total_tickets": page.selection.total_tickets(),
            }
        )


class ProceedView(APIView):
    """Handler for POST /api/events/{event_id}/proceed

    Clamps the selection against the event's ticket types and saves it for
    the cart page.
    """

    def post(self, request: Request, event_id: str) -> Response:
        body = ProceedSerializer(data=request.data)
        if not body.is_valid():
            return invalid_selection_response(body.errors)

        scope = PageScope("event-detail")
        page = EventDetailPage(EventCatalog(build_backend_store()), scope)
        run_in_scope(scope, lambda: page.load(event_id, body.validated_data["selection"]))
        if page.error:
            return error_response(page.error)

        selection = page.proceed_to_checkout(_persistence(request))
        return Response(
            {
                "selection": selection_to_representation(selection),
                "cart_url": reverse("cart"),
            }
        )


class CartView(APIView):
    """Handler for GET /api/cart"""

    def get(self, request: Request) -> Response:
        store = build_backend_store()
        scope = PageScope("cart")
        page = CartPage(store, store, _persistence(request), scope)
        summary = run_in_scope(scope, page.refresh)
        return Response(
            {
                "selection": selection_to_representation(page.selection),
                **CartSummarySerializer(summary).data,
            }
        )


class CheckoutView(APIView):
    """Handler for POST /api/cart/checkout"""

    def post(self, request: Request) -> Response:
        body = CheckoutSerializer(data=request.data)
        body.is_valid(raise_exception=True)

        store = build_backend_store()
        scope = PageScope("cart")
        page = CartPage(store, store, _persistence(request), scope)
        outcome = run_in_scope(scope, lambda: page.checkout(body.validated_data["email"]))

        if outcome.state is CheckoutState.REDIRECTING:
            return Response({"state": outcome.state.value, "url": outcome.redirect_url})
        if outcome.error is not None:
            return error_response(outcome.error, state=outcome.state.value)
        return Response({"state": outcome.state.value}, status=status.HTTP_409_CONFLICT)
