"""Business constants for the storefront."""

from typing import Final


class TicketLimits:
    """Default per-ticket-type quantity bounds."""

    MIN_PER_TYPE: Final[int] = 0
    MAX_PER_TYPE: Final[int] = 10


class CartStorage:
    """Session storage used to hand a selection from event page to cart."""

    SELECTION_KEY: Final[str] = "ticketSelection"


class Search:
    """Event search tuning. Scores run from 0 (identical) to 1 (unrelated)."""

    DEFAULT_THRESHOLD: Final[float] = 0.4
    FIELDS: Final[tuple[str, ...]] = ("title", "description")


class Checkout:
    """User-facing checkout messages."""

    GENERIC_FAILURE: Final[str] = "checkout failed"
    NO_URL: Final[str] = "no checkout URL"
