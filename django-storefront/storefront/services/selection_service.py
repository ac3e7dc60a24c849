"""Per-ticket-type quantity selection for one event."""

import math
from collections.abc import Iterable, Mapping
from decimal import Decimal, InvalidOperation

from storefront.domain import QuantityBounds, TicketType, TicketTypeId
from storefront.domain.errors import UnknownTicketTypeError

TicketSelection = dict[TicketTypeId, int]

_SATURATION = Decimal(10) ** 18


def parse_quantity(requested: object) -> int | None:
    """Read a requested quantity, or None when it is not a whole number.

    Accepts ints, integral floats and numeric strings such as "3" or "3.0".
    Empty strings, booleans, fractions, NaN and infinities are rejected.
    Numeric strings of huge magnitude are saturated to +-10**18.
    """
    if isinstance(requested, bool):
        return None
    if isinstance(requested, int):
        return requested
    if isinstance(requested, float):
        if math.isfinite(requested) and requested.is_integer():
            return int(requested)
        return None
    if isinstance(requested, str):
        text = requested.strip()
        if not text:
            return None
        try:
            value = Decimal(text)
        except InvalidOperation:
            return None
        if value.is_finite() and value == value.to_integral_value():
            # int() must never expand an exponent like "1e3000000".
            return int(max(-_SATURATION, min(value, _SATURATION)))
    return None


def apply_quantity(
    selection: Mapping[TicketTypeId, int],
    ticket_id: TicketTypeId,
    requested: object,
    bounds: QuantityBounds,
) -> TicketSelection:
    """Return a new selection with ticket_id set to requested, clamped to bounds.

    Unparseable input keeps the current quantity. Other entries are copied
    unchanged.
    """
    current = selection.get(ticket_id, bounds.minimum)
    quantity = parse_quantity(requested)
    updated = dict(selection)
    updated[ticket_id] = bounds.clamp(current if quantity is None else quantity)
    return updated


class TicketSelectionState:
    """Holds the shopper's quantities for one event's ticket types."""

    def __init__(
        self,
        ticket_types: Iterable[TicketType],
        quantities: Mapping[TicketTypeId, object] | None = None,
    ) -> None:
        self._bounds = {ticket_type.id: ticket_type.bounds for ticket_type in ticket_types}
        self._selection: TicketSelection = {}
        for ticket_id, requested in (quantities or {}).items():
            self.set_quantity(ticket_id, requested)

    def bounds_for(self, ticket_id: TicketTypeId) -> QuantityBounds:
        try:
            return self._bounds[ticket_id]
        except KeyError:
            raise UnknownTicketTypeError(str(ticket_id)) from None

    def quantity(self, ticket_id: TicketTypeId) -> int:
        return self._selection.get(ticket_id, self.bounds_for(ticket_id).minimum)

    def set_quantity(self, ticket_id: TicketTypeId, requested: object) -> TicketSelection:
        self._selection = apply_quantity(
            self._selection, ticket_id, requested, self.bounds_for(ticket_id)
        )
        return self.selection

    def increment(self, ticket_id: TicketTypeId) -> TicketSelection:
        return self.set_quantity(ticket_id, self.quantity(ticket_id) + 1)

    def decrement(self, ticket_id: TicketTypeId) -> TicketSelection:
        return self.set_quantity(ticket_id, self.quantity(ticket_id) - 1)

    @property
    def selection(self) -> TicketSelection:
        return dict(self._selection)

    def total_tickets(self) -> int:
        return sum(self._selection.values())
