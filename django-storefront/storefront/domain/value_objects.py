"""Domain primitives that enforce validity at creation time."""

from dataclasses import dataclass
from decimal import Decimal
from typing import Self

from storefront.config import TicketLimits


@dataclass(frozen=True, order=True)
class EventId:
    """Unique identifier for an Event."""

    value: int

    def __post_init__(self) -> None:
        if self.value < 0:
            raise ValueError("Event id cannot be negative")

    @classmethod
    def from_string(cls, value: str) -> Self:
        return cls(value=int(value))

    def __str__(self) -> str:
        return str(self.value)


@dataclass(frozen=True, order=True)
class TicketTypeId:
    """Identifier for a TicketType, unique within its event."""

    value: int

    @classmethod
    def from_string(cls, value: str) -> Self:
        return cls(value=int(value))

    def __str__(self) -> str:
        return str(self.value)


@dataclass(frozen=True)
class Money:
    """Price representation with validation."""

    amount: Decimal

    def __post_init__(self) -> None:
        if self.amount < 0:
            raise ValueError("Money amount cannot be negative")

    @classmethod
    def zero(cls) -> Self:
        return cls(amount=Decimal("0"))

    def __add__(self, other: "Money") -> "Money":
        return Money(amount=self.amount + other.amount)

    def times(self, quantity: int) -> "Money":
        return Money(amount=self.amount * quantity)

    def __str__(self) -> str:
        return f"{self.amount:.2f}"


@dataclass(frozen=True)
class Capacity:
    """Non-negative integer representing capacity."""

    value: int

    def __post_init__(self) -> None:
        if self.value < 0:
            raise ValueError("Capacity cannot be negative")


@dataclass(frozen=True)
class QuantityBounds:
    """Inclusive [minimum, maximum] a shopper may select for one ticket type."""

    minimum: int = TicketLimits.MIN_PER_TYPE
    maximum: int = TicketLimits.MAX_PER_TYPE

    def __post_init__(self) -> None:
        if self.minimum < 0:
            raise ValueError("Minimum quantity cannot be negative")
        if self.maximum < self.minimum:
            raise ValueError("Maximum quantity cannot be below the minimum")

    def clamp(self, quantity: int) -> int:
        return max(self.minimum, min(self.maximum, quantity))
