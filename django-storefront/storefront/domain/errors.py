"""Domain error codes for the storefront."""

from dataclasses import dataclass
from enum import Enum


class ErrorCode(Enum):
    """Domain error codes."""

    CATALOG_UNAVAILABLE = "CATALOG_UNAVAILABLE"
    EVENT_NOT_FOUND = "EVENT_NOT_FOUND"
    INVALID_EVENT_ID = "INVALID_EVENT_ID"
    MALFORMED_EVENT = "MALFORMED_EVENT"
    METADATA_UNRESOLVED = "METADATA_UNRESOLVED"
    UNKNOWN_TICKET_TYPE = "UNKNOWN_TICKET_TYPE"
    INVALID_SELECTION = "INVALID_SELECTION"
    CART_EMPTY = "CART_EMPTY"
    MISSING_EMAIL = "MISSING_EMAIL"
    CHECKOUT_REJECTED = "CHECKOUT_REJECTED"


@dataclass(frozen=True)
class DomainError(Exception):
    """Base domain error with code and user-safe message."""

    code: ErrorCode
    message: str

    def __str__(self) -> str:
        return f"{self.code.value}: {self.message}"


class CatalogUnavailableError(DomainError):
    """Raised when the event list or detail cannot be fetched."""

    def __init__(self) -> None:
        super().__init__(
            code=ErrorCode.CATALOG_UNAVAILABLE,
            message="Catalog unavailable",
        )


class EventNotFoundError(DomainError):
    """Raised when an event is not found."""

    def __init__(self, event_id: str) -> None:
        super().__init__(
            code=ErrorCode.EVENT_NOT_FOUND,
            message="Event not found",
        )
        object.__setattr__(self, "event_id", event_id)


class InvalidEventIdError(DomainError):
    """Raised when an event ID is invalid."""

    def __init__(self) -> None:
        super().__init__(
            code=ErrorCode.INVALID_EVENT_ID,
            message="Invalid event ID format",
        )


class MalformedEventError(DomainError):
    """Raised when an event record from the catalog is missing required data."""

    def __init__(self, event_id: str, reason: str) -> None:
        super().__init__(
            code=ErrorCode.MALFORMED_EVENT,
            message="Error loading event data",
        )
        object.__setattr__(self, "event_id", event_id)
        object.__setattr__(self, "reason", reason)


class MetadataUnresolvedError(DomainError):
    """Raised when the ticket metadata batch cannot be fetched."""

    def __init__(self) -> None:
        super().__init__(
            code=ErrorCode.METADATA_UNRESOLVED,
            message="Ticket details could not be loaded",
        )


class UnknownTicketTypeError(DomainError):
    """Raised when a ticket type id does not belong to the event."""

    def __init__(self, ticket_id: str) -> None:
        super().__init__(
            code=ErrorCode.UNKNOWN_TICKET_TYPE,
            message="Unknown ticket type",
        )
        object.__setattr__(self, "ticket_id", ticket_id)


class InvalidSelectionError(DomainError):
    """Raised when a submitted selection cannot be read."""

    def __init__(self) -> None:
        super().__init__(
            code=ErrorCode.INVALID_SELECTION,
            message="Invalid ticket selection",
        )


class ValidationFailedError(DomainError):
    """Base for checkout validation failures. Recoverable, nothing is submitted."""


class CartEmptyError(ValidationFailedError):
    """Raised when no ticket in the selection has a quantity above zero."""

    def __init__(self) -> None:
        super().__init__(code=ErrorCode.CART_EMPTY, message="cart empty")


class MissingEmailError(ValidationFailedError):
    """Raised when checkout is attempted without a contact email."""

    def __init__(self) -> None:
        super().__init__(code=ErrorCode.MISSING_EMAIL, message="missing email")


class CheckoutRejectedError(DomainError):
    """Raised when the checkout-session endpoint fails or rejects the request."""

    def __init__(self, message: str) -> None:
        super().__init__(code=ErrorCode.CHECKOUT_REJECTED, message=message)
