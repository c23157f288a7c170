"""Market-data and trading events."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal
from typing import Union

from brookspa.bar import Bar
from brookspa.market import Exchange, SecurityId
from brookspa.order import Order
from brookspa.position import Position
from brookspa.signal import Signal
from brookspa.timeframe import Timeframe


@dataclass(frozen=True)
class BarUpdate:
    """A new bar has been completed."""

    security: SecurityId
    bar: Bar
    timeframe: Timeframe


@dataclass(frozen=True)
class TickUpdate:
    """A real-time price change."""

    security: SecurityId
    price: Decimal
    volume: int
    timestamp: datetime


@dataclass(frozen=True)
class SessionOpen:
    """The trading session has opened."""

    exchange: Exchange


@dataclass(frozen=True)
class SessionClose:
    """The trading session has closed."""

    exchange: Exchange


@dataclass(frozen=True)
class SessionBreakStart:
    """The lunch break has started."""

    exchange: Exchange


@dataclass(frozen=True)
class SessionBreakEnd:
    """The lunch break has ended."""

    exchange: Exchange


MarketEvent = Union[
    BarUpdate, TickUpdate, SessionOpen, SessionClose, SessionBreakStart, SessionBreakEnd
]


@dataclass(frozen=True)
class SignalGenerated:
    """A new trading signal was generated."""

    signal: Signal


@dataclass(frozen=True)
class OrderSubmitted:
    """An order was submitted."""

    order: Order


@dataclass(frozen=True)
class OrderFilled:
    """An order was filled."""

    order: Order


@dataclass(frozen=True)
class OrderCancelled:
    """An order was cancelled."""

    order: Order


@dataclass(frozen=True)
class PositionOpened:
    """A new position was opened."""

    position: Position


@dataclass(frozen=True)
class PositionClosed:
    """A position was closed with a realized profit or loss."""

    position: Position
    realized_pnl: Decimal


TradingEvent = Union[
    SignalGenerated,
    OrderSubmitted,
    OrderFilled,
    OrderCancelled,
    PositionOpened,
    PositionClosed,
]