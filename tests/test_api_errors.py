from datetime import datetime, timezone

import pytest

from brookspa.api_errors import (
    ApiError,
    BadRequestError,
    ConflictError,
    InternalError,
    NotFoundError,
)

NOW = datetime(2024, 6, 10, 2, 0, tzinfo=timezone.utc)


@pytest.mark.parametrize(
    "cls, status, error_type, prefix",
    [
        (BadRequestError, 400, "Bad Request", "bad request"),
        (NotFoundError, 404, "Not Found", "not found"),
        (ConflictError, 409, "Conflict", "conflict"),
        (InternalError, 500, "Internal Server Error", "internal error"),
    ],
)
def test_response_shape(cls, status, error_type, prefix):
    status_code, body = cls("boom").to_response(NOW)
    assert status_code == status
    assert body["error"] == error_type
    assert body["message"] == f"{prefix}: boom"
    assert set(body) == {"error", "message", "timestamp"}


def test_message_matches_str():
    err = NotFoundError("backtest session 'abc' not found")
    _, body = err.to_response(NOW)
    assert body["message"] == str(err)
    assert err.detail == "backtest session 'abc' not found"


def test_timestamp_round_trips():
    _, body = ConflictError("busy").to_response(NOW)
    assert datetime.fromisoformat(body["timestamp"]) == NOW


def test_default_timestamp_is_now():
    before = datetime.now(timezone.utc)
    _, body = InternalError("x").to_response()
    after = datetime.now(timezone.utc)
    assert before <= datetime.fromisoformat(body["timestamp"]) <= after


def test_errors_are_catchable_as_api_error():
    err = BadRequestError("data file not found: missing.csv")
    assert isinstance(err, ApiError)
    assert str(err) == "bad request: data file not found: missing.csv"
    assert err.to_response(NOW)[0] == 400