"""Exchanges, security identifiers and trade direction."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class Exchange(Enum):
    """Stock exchange identifier."""

    SH = "SH"  # Shanghai Stock Exchange
    SZ = "SZ"  # Shenzhen Stock Exchange

    def __str__(self) -> str:
        return self.value

    @classmethod
    def parse(cls, text: str) -> Exchange:
        """Parse an exchange code, ignoring case."""
        try:
            return cls(text.upper())
        except ValueError:
            raise ValueError(
                f"unknown exchange '{text}': expected SH or SZ"
            ) from None


class SecurityType(Enum):
    """Type of security."""

    ETF = "ETF"
    STOCK = "Stock"


@dataclass(frozen=True)
class SecurityId:
    """Unique identifier for a security."""

    code: str
    exchange: Exchange
    security_type: SecurityType

    @classmethod
    def etf(cls, code: str, exchange: Exchange) -> SecurityId:
        """Create an ETF security identifier."""
        return cls(code, exchange, SecurityType.ETF)

    @classmethod
    def stock(cls, code: str, exchange: Exchange) -> SecurityId:
        """Create a stock security identifier."""
        return cls(code, exchange, SecurityType.STOCK)

    def __str__(self) -> str:
        return f"{self.code}.{self.exchange}"


class Direction(Enum):
    """Trade direction."""

    LONG = "Long"
    SHORT = "Short"

    def opposite(self) -> Direction:
        """The other direction."""
        return Direction.SHORT if self is Direction.LONG else Direction.LONG