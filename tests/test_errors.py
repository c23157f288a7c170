import pytest

from brookspa.errors import (
    CoreError,
    InvalidBarError,
    InvalidOrderError,
    InvalidSecurityError,
    InvalidTimeframeError,
)


@pytest.mark.parametrize(
    "cls, prefix",
    [
        (InvalidBarError, "Invalid bar data"),
        (InvalidOrderError, "Invalid order"),
        (InvalidSecurityError, "Invalid security"),
        (InvalidTimeframeError, "Invalid timeframe"),
    ],
)
def test_message_format(cls, prefix):
    err = cls("something wrong")
    assert str(err) == f"{prefix}: something wrong"


@pytest.mark.parametrize(
    "cls",
    [InvalidBarError, InvalidOrderError, InvalidSecurityError, InvalidTimeframeError],
)
def test_detail_round_trip(cls):
    err = cls("detail text")
    assert err.detail == "detail text"
    assert str(err).endswith("detail text")


@pytest.mark.parametrize(
    "cls",
    [InvalidBarError, InvalidOrderError, InvalidSecurityError, InvalidTimeframeError],
)
def test_caught_as_core_error(cls):
    err = cls("x")
    assert isinstance(err, CoreError)
    assert err.detail == "x"
    assert str(err).endswith(": x")


def test_caught_as_value_error():
    err = InvalidOrderError("quantity is zero")
    assert isinstance(err, ValueError)
    assert str(err) == "Invalid order: quantity is zero"