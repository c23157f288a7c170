"""Bar timeframes."""

from __future__ import annotations

from enum import Enum

from brookspa.errors import InvalidTimeframeError


class Timeframe(Enum):
    """Timeframe for price bars; ordered from shortest to longest."""

    MINUTE1 = "1min"
    MINUTE5 = "5min"
    MINUTE15 = "15min"
    MINUTE30 = "30min"
    MINUTE60 = "60min"
    DAILY = "daily"
    WEEKLY = "weekly"

    def __str__(self) -> str:
        return self.value

    def _rank(self) -> int:
        return list(type(self)).index(self)

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Timeframe):
            return NotImplemented
        return self._rank() < other._rank()

    def __le__(self, other: object) -> bool:
        if not isinstance(other, Timeframe):
            return NotImplemented
        return self._rank() <= other._rank()

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, Timeframe):
            return NotImplemented
        return self._rank() > other._rank()

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, Timeframe):
            return NotImplemented
        return self._rank() >= other._rank()

    def duration_secs(self) -> int:
        """Length of one bar in seconds."""
        return _DURATIONS[self]

    def as_futu_kl_type(self) -> int:
        """The matching Futu OpenAPI KLType value."""
        return _FUTU_KL_TYPES[self]

    def is_intraday(self) -> bool:
        """Whether bars are shorter than a day."""
        return self not in (Timeframe.DAILY, Timeframe.WEEKLY)

    @classmethod
    def parse(cls, text: str) -> Timeframe:
        """Parse a timeframe name or alias, ignoring case."""
        try:
            return _ALIASES[text.lower()]
        except KeyError:
            raise InvalidTimeframeError(
                f"invalid timeframe '{text}': expected one of "
                "1min, 5min, 15min, 30min, 60min, daily, weekly"
            ) from None


_DURATIONS = {
    Timeframe.MINUTE1: 60,
    Timeframe.MINUTE5: 300,
    Timeframe.MINUTE15: 900,
    Timeframe.MINUTE30: 1800,
    Timeframe.MINUTE60: 3600,
    Timeframe.DAILY: 86400,
    Timeframe.WEEKLY: 604800,
}

_FUTU_KL_TYPES = {
    Timeframe.MINUTE1: 1,
    Timeframe.MINUTE5: 6,
    Timeframe.MINUTE15: 7,
    Timeframe.MINUTE30: 8,
    Timeframe.MINUTE60: 9,
    Timeframe.DAILY: 2,
    Timeframe.WEEKLY: 3,
}

_ALIASES = {
    "1min": Timeframe.MINUTE1,
    "1m": Timeframe.MINUTE1,
    "5min": Timeframe.MINUTE5,
    "5m": Timeframe.MINUTE5,
    "15min": Timeframe.MINUTE15,
    "15m": Timeframe.MINUTE15,
    "30min": Timeframe.MINUTE30,
    "30m": Timeframe.MINUTE30,
    "60min": Timeframe.MINUTE60,
    "60m": Timeframe.MINUTE60,
    "1h": Timeframe.MINUTE60,
    "daily": Timeframe.DAILY,
    "1d": Timeframe.DAILY,
    "day": Timeframe.DAILY,
    "weekly": Timeframe.WEEKLY,
    "1w": Timeframe.WEEKLY,
    "week": Timeframe.WEEKLY,
}