"""Price bars (OHLCV candles)."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal

from brookspa.market import SecurityId
from brookspa.timeframe import Timeframe

# All financial arithmetic uses Decimal, never float.
Price = Decimal

_ZERO = Decimal(0)
_TWO = Decimal(2)


@dataclass(frozen=True)
class Bar:
    """A single price bar."""

    timestamp: datetime
    open: Price
    high: Price
    low: Price
    close: Price
    volume: int
    timeframe: Timeframe
    security: SecurityId

    def body_size(self) -> Decimal:
        """Absolute distance between open and close."""
        return abs(self.close - self.open)

    def range(self) -> Decimal:
        """High minus low."""
        return self.high - self.low

    def midpoint(self) -> Decimal:
        """Middle of the bar's range."""
        return (self.high + self.low) / _TWO

    def is_bull(self) -> bool:
        return self.close > self.open

    def is_bear(self) -> bool:
        return self.close < self.open

    def is_doji(self, threshold: Decimal) -> bool:
        """Whether the body is at most ``threshold`` of the range."""
        if self.range() == _ZERO:
            return True
        return self.body_size() / self.range() <= threshold

    def upper_tail(self) -> Decimal:
        return self.high - max(self.close, self.open)

    def lower_tail(self) -> Decimal:
        return min(self.close, self.open) - self.low

    def _ratio(self, part: Decimal) -> Decimal:
        bar_range = self.range()
        if bar_range == _ZERO:
            return _ZERO
        return part / bar_range

    def body_ratio(self) -> Decimal:
        return self._ratio(self.body_size())

    def upper_tail_ratio(self) -> Decimal:
        return self._ratio(self.upper_tail())

    def lower_tail_ratio(self) -> Decimal:
        return self._ratio(self.lower_tail())

    def closes_in_upper_half(self) -> bool:
        return self.close > self.midpoint()

    def closes_in_lower_half(self) -> bool:
        return self.close < self.midpoint()

    def is_outside_bar(self, prev: Bar) -> bool:
        """Whether this bar's range strictly engulfs ``prev``."""
        return self.high > prev.high and self.low < prev.low

    def is_inside_bar(self, prev: Bar) -> bool:
        """Whether this bar's range lies within ``prev``."""
        return self.high <= prev.high and self.low >= prev.low