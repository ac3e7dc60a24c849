"""Checkout orchestration: validate, request a payment session, redirect.

State machine:

    IDLE -> VALIDATING -> SUBMITTING -> REDIRECTING
                 |              |
                 v              v
               IDLE          FAILED  (retry allowed)

Validation failures go back to IDLE without touching the network. A
rejected or failed submission ends in FAILED, which accepts a new attempt
with the same selection.
"""

from collections.abc import Mapping
from dataclasses import dataclass
from enum import Enum

from storefront.config import Checkout
from storefront.domain import CheckoutRequest, CheckoutSession, LineItem, TicketTypeId
from storefront.domain.errors import (
    CartEmptyError,
    CheckoutRejectedError,
    MissingEmailError,
    ValidationFailedError,
)
from storefront.logger_config import layer_logger
from storefront.services.page_scope import PageScope
from storefront.stores.interfaces import CheckoutGateway

logger = layer_logger("service")


class CheckoutState(Enum):
    IDLE = "idle"
    VALIDATING = "validating"
    SUBMITTING = "submitting"
    REDIRECTING = "redirecting"
    FAILED = "failed"


@dataclass(frozen=True)
class CheckoutOutcome:
    """Where a checkout attempt ended, with the URL or a user-visible message."""

    state: CheckoutState
    redirect_url: str | None = None
    message: str | None = None
    error: ValidationFailedError | CheckoutRejectedError | None = None


def build_checkout_request(selection: Mapping[TicketTypeId, int], email: str) -> CheckoutRequest:
    """Validate the cart and project it to line items ordered by ticket id.

    Raises:
        CartEmptyError: If no ticket has a quantity above zero.
        MissingEmailError: If email is empty or blank.
    """
    items = tuple(
        LineItem(ticket_id=ticket_id, quantity=selection[ticket_id])
        for ticket_id in sorted(selection)
        if selection[ticket_id] > 0
    )
    if not items:
        raise CartEmptyError()
    email = (email or "").strip()
    if not email:
        raise MissingEmailError()
    return CheckoutRequest(items=items, email=email)


class CheckoutOrchestrator:
    """Runs one page's checkout attempts against the checkout gateway."""

    def __init__(self, gateway: CheckoutGateway, scope: PageScope) -> None:
        self._gateway = gateway
        self._scope = scope
        self._state = CheckoutState.IDLE
        self._outcome = CheckoutOutcome(state=CheckoutState.IDLE)

    @property
    def state(self) -> CheckoutState:
        return self._state

    @property
    def outcome(self) -> CheckoutOutcome:
        return self._outcome

    async def checkout(self, selection: Mapping[TicketTypeId, int], email: str) -> CheckoutOutcome:
        if self._state in (CheckoutState.VALIDATING, CheckoutState.SUBMITTING):
            logger.debug("Checkout already in progress, ignoring")
            return CheckoutOutcome(state=self._state)
        if self._state is CheckoutState.REDIRECTING:
            return self._outcome

        self._state = CheckoutState.VALIDATING
        try:
            request = build_checkout_request(selection, email)
        except ValidationFailedError as exc:
            logger.info(f"Checkout blocked: {exc.message}")
            return self._finish(
                CheckoutOutcome(state=CheckoutState.IDLE, message=exc.message, error=exc)
            )

        self._state = CheckoutState.SUBMITTING
        logger.info(f"Submitting checkout with {len(request.items)} line items")
        sessions: list[CheckoutSession] = []
        try:
            applied = await self._scope.run(
                self._gateway.create_checkout_session(request), sessions.append
            )
        except CheckoutRejectedError as exc:
            return self._fail(exc)

        if not applied:
            # Page torn down mid-flight; nothing left to update.
            return self._finish(CheckoutOutcome(state=CheckoutState.IDLE))

        session = sessions[0]
        if not session.url:
            return self._fail(CheckoutRejectedError(Checkout.NO_URL))

        logger.info("Checkout session created, redirecting to payment provider")
        return self._finish(
            CheckoutOutcome(state=CheckoutState.REDIRECTING, redirect_url=session.url)
        )

    def _fail(self, error: CheckoutRejectedError) -> CheckoutOutcome:
        logger.warning(f"Checkout failed: {error.message}")
        return self._finish(
            CheckoutOutcome(state=CheckoutState.FAILED, message=error.message, error=error)
        )

    def _finish(self, outcome: CheckoutOutcome) -> CheckoutOutcome:
        self._state = outcome.state
        self._outcome = outcome
        return outcome
