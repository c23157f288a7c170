"""Trading orders."""

from __future__ import annotations

import uuid
from dataclasses import dataclass, field
from datetime import datetime, timezone
from decimal import Decimal
from enum import Enum

from brookspa.market import Direction, SecurityId


class OrderType(Enum):
    """How an order is executed."""

    MARKET = "Market"
    LIMIT = "Limit"
    STOP = "Stop"
    STOP_LIMIT = "StopLimit"


class OrderStatus(Enum):
    """Life-cycle state of an order."""

    PENDING = "Pending"
    SUBMITTED = "Submitted"
    PARTIALLY_FILLED = "PartiallyFilled"
    FILLED = "Filled"
    CANCELLED = "Cancelled"
    REJECTED = "Rejected"


_TERMINAL = frozenset({OrderStatus.FILLED, OrderStatus.CANCELLED, OrderStatus.REJECTED})
_ACTIVE = frozenset(
    {OrderStatus.PENDING, OrderStatus.SUBMITTED, OrderStatus.PARTIALLY_FILLED}
)


def _now() -> datetime:
    return datetime.now(timezone.utc)


@dataclass
class Order:
    """A trading order."""

    security: SecurityId
    direction: Direction
    order_type: OrderType
    quantity: int
    price: Decimal | None = None
    stop_price: Decimal | None = None
    status: OrderStatus = OrderStatus.PENDING
    id: uuid.UUID = field(default_factory=uuid.uuid4)
    created_at: datetime = field(default_factory=_now)
    filled_at: datetime | None = None
    filled_price: Decimal | None = None
    filled_quantity: int = 0

    @classmethod
    def market(cls, security: SecurityId, direction: Direction, quantity: int) -> Order:
        """A new market order."""
        return cls(security, direction, OrderType.MARKET, quantity)

    @classmethod
    def limit(
        cls, security: SecurityId, direction: Direction, quantity: int, price: Decimal
    ) -> Order:
        """A new limit order at ``price``."""
        return cls(security, direction, OrderType.LIMIT, quantity, price=price)

    @classmethod
    def stop(
        cls,
        security: SecurityId,
        direction: Direction,
        quantity: int,
        stop_price: Decimal,
    ) -> Order:
        """A new stop order triggered at ``stop_price``."""
        return cls(security, direction, OrderType.STOP, quantity, stop_price=stop_price)

    def is_terminal(self) -> bool:
        """Whether the order can no longer change."""
        return self.status in _TERMINAL

    def is_active(self) -> bool:
        """Whether the order can still be filled or cancelled."""
        return self.status in _ACTIVE

    def remaining_quantity(self) -> int:
        """Unfilled quantity, never below zero."""
        return max(0, self.quantity - self.filled_quantity)