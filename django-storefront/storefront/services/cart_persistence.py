"""Carries a ticket selection from the event page to the cart page."""

import json
from collections.abc import Mapping

from storefront.config import CartStorage
from storefront.domain import TicketTypeId
from storefront.logger_config import layer_logger
from storefront.services.selection_service import TicketSelection
from storefront.stores.interfaces import SelectionStore

logger = layer_logger("service")


class CorruptSelectionError(ValueError):
    """A stored selection record that cannot be read back."""


def encode_selection(selection: Mapping[TicketTypeId, int]) -> str:
    return json.dumps({str(ticket_id.value): quantity for ticket_id, quantity in selection.items()})


def decode_selection(raw: str) -> TicketSelection:
    """Parse a stored record.

    Raises:
        CorruptSelectionError: If any part of the record is not a
            ticket id mapped to a non-negative integer.
    """
    try:
        data = json.loads(raw)
    except ValueError as exc:
        raise CorruptSelectionError("not JSON") from exc
    if not isinstance(data, dict):
        raise CorruptSelectionError("not an object")

    selection: TicketSelection = {}
    for key, quantity in data.items():
        try:
            ticket_id = TicketTypeId.from_string(key)
        except ValueError as exc:
            raise CorruptSelectionError(f"bad ticket id {key!r}") from exc
        if isinstance(quantity, bool) or not isinstance(quantity, int) or quantity < 0:
            raise CorruptSelectionError(f"bad quantity {quantity!r} for {key}")
        selection[ticket_id] = quantity
    return selection


class CartPersistence:
    """Saves and loads the selection under one fixed session key.

    Saving replaces the previous record; there is no merging.
    """

    def __init__(self, store: SelectionStore, key: str = CartStorage.SELECTION_KEY) -> None:
        self._store = store
        self._key = key

    def save(self, selection: Mapping[TicketTypeId, int]) -> None:
        self._store.set(self._key, encode_selection(selection))
        logger.info(f"Saved selection of {len(selection)} ticket types")

    def load(self) -> TicketSelection:
        """Return the stored selection, or an empty one if absent or corrupt."""
        raw = self._store.get(self._key)
        if raw is None:
            return {}
        try:
            return decode_selection(raw)
        except CorruptSelectionError as exc:
            logger.warning(f"Discarding corrupt stored selection: {exc}")
            return {}
