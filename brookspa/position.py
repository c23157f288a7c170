"""Open trading positions."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from decimal import Decimal

from brookspa.market import Direction, SecurityId

# China Standard Time, used for T+1 settlement dates.
CST = timezone(timedelta(hours=8))

_ZERO = Decimal(0)
_HUNDRED = Decimal(100)


@dataclass
class Position:
    """An open trading position."""

    security: SecurityId
    direction: Direction
    quantity: int
    entry_price: Decimal
    current_price: Decimal
    stop_loss: Decimal
    take_profit: Decimal | None
    opened_at: datetime

    def _signed_move(self) -> Decimal:
        diff = self.current_price - self.entry_price
        return diff if self.direction is Direction.LONG else -diff

    def unrealized_pnl(self) -> Decimal:
        """Profit or loss at the current price."""
        return self._signed_move() * Decimal(self.quantity)

    def unrealized_pnl_pct(self) -> Decimal:
        """Profit or loss as a percentage of the entry price."""
        if self.entry_price == _ZERO:
            return _ZERO
        return self._signed_move() / self.entry_price * _HUNDRED

    def update_price(self, price: Decimal) -> Decimal:
        """Set the current price and return the new unrealized PnL."""
        self.current_price = price
        return self.unrealized_pnl()

    def is_stop_hit(self, price: Decimal) -> bool:
        """Whether ``price`` has reached the stop loss."""
        if self.direction is Direction.LONG:
            return price <= self.stop_loss
        return price >= self.stop_loss

    def is_target_hit(self, price: Decimal) -> bool:
        """Whether ``price`` has reached the take-profit target."""
        if self.take_profit is None:
            return False
        if self.direction is Direction.LONG:
            return price >= self.take_profit
        return price <= self.take_profit

    def notional_value(self) -> Decimal:
        """Value of the position at the current price."""
        return self.current_price * Decimal(self.quantity)

    def entry_value(self) -> Decimal:
        """Value of the position at the entry price."""
        return self.entry_price * Decimal(self.quantity)

    def is_t1_settled(self, as_of: datetime) -> bool:
        """Whether the CST date of ``as_of`` is strictly after the opening date."""
        open_date = self.opened_at.astimezone(CST).date()
        current_date = as_of.astimezone(CST).date()
        return current_date > open_date