"""Trading signals produced by the strategy."""

from __future__ import annotations

import uuid
from dataclasses import dataclass, field
from datetime import datetime
from decimal import Decimal
from enum import Enum

from brookspa.market import Direction, SecurityId
from brookspa.timeframe import Timeframe

_ZERO = Decimal(0)


class SignalType(Enum):
    """Kind of price-action setup behind a signal."""

    TREND_CONTINUATION = "TrendContinuation"
    TREND_REVERSAL = "TrendReversal"
    BREAKOUT_ENTRY = "BreakoutEntry"
    FAILED_BREAKOUT_ENTRY = "FailedBreakoutEntry"
    PULLBACK_ENTRY = "PullbackEntry"
    TRADING_RANGE_BREAKOUT = "TradingRangeBreakout"
    WITH_TREND_SCALP = "WithTrendScalp"
    COUNTER_TREND_SWING = "CounterTrendSwing"


@dataclass
class SignalContext:
    """Higher-timeframe context attached to a signal."""

    htf_trend_direction: Direction | None = None
    htf_aligned: bool = False
    htf_key_levels: list[Decimal] = field(default_factory=list)
    description: str = ""


@dataclass
class Signal:
    """A trading signal."""

    timestamp: datetime
    security: SecurityId
    direction: Direction
    signal_type: SignalType
    entry_price: Decimal
    stop_price: Decimal
    target_price: Decimal | None
    confidence: float
    timeframe: Timeframe
    context: SignalContext = field(default_factory=SignalContext)
    id: uuid.UUID = field(default_factory=uuid.uuid4)

    def risk_per_unit(self) -> Decimal:
        """Distance from entry to stop."""
        return abs(self.entry_price - self.stop_price)

    def reward_risk_ratio(self) -> Decimal | None:
        """Reward divided by risk, or None without a target."""
        if self.target_price is None:
            return None
        risk = self.risk_per_unit()
        if risk == _ZERO:
            return _ZERO
        return abs(self.target_price - self.entry_price) / risk