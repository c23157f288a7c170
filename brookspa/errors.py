"""Errors raised when core trading data is invalid."""


class CoreError(ValueError):
    """Base class for invalid core data."""

    prefix = "Invalid data"

    def __init__(self, detail: str) -> None:
        self.detail = detail
        super().__init__(f"{self.prefix}: {detail}")


class InvalidBarError(CoreError):
    """A price bar holds inconsistent or unreadable data."""

    prefix = "Invalid bar data"


class InvalidOrderError(CoreError):
    """An order cannot be built or processed."""

    prefix = "Invalid order"


class InvalidSecurityError(CoreError):
    """A security identifier is malformed or unknown."""

    prefix = "Invalid security"


class InvalidTimeframeError(CoreError):
    """A timeframe name is not recognised."""

    prefix = "Invalid timeframe"