import pytest

from brookspa.errors import InvalidTimeframeError
from brookspa.timeframe import Timeframe


def test_timeframe_duration():
    assert Timeframe.MINUTE1.duration_secs() == 60
    assert Timeframe.MINUTE5.duration_secs() == 300
    assert Timeframe.DAILY.duration_secs() == 86400


def test_timeframe_display():
    assert str(Timeframe.parse("5m")) == "5min"
    assert str(Timeframe.parse("1d")) == "daily"


def test_timeframe_is_intraday():
    assert Timeframe.MINUTE5.is_intraday()
    assert Timeframe.MINUTE60.is_intraday()
    assert not Timeframe.DAILY.is_intraday()
    assert not Timeframe.WEEKLY.is_intraday()


def test_timeframe_ordering():
    assert Timeframe.parse("1min") < Timeframe.parse("5min")
    assert Timeframe.parse("5min") < Timeframe.parse("daily")
    assert Timeframe.parse("daily") < Timeframe.parse("weekly")
    assert sorted(
        [Timeframe.parse("1w"), Timeframe.parse("1m"), Timeframe.parse("day")]
    ) == [
        Timeframe.MINUTE1,
        Timeframe.DAILY,
        Timeframe.WEEKLY,
    ]


def test_futu_kl_types():
    assert Timeframe.MINUTE1.as_futu_kl_type() == 1
    assert Timeframe.MINUTE5.as_futu_kl_type() == 6
    assert Timeframe.DAILY.as_futu_kl_type() == 2
    assert Timeframe.WEEKLY.as_futu_kl_type() == 3


@pytest.mark.parametrize(
    "text, expected",
    [
        ("1m", Timeframe.MINUTE1),
        ("5MIN", Timeframe.MINUTE5),
        ("15m", Timeframe.MINUTE15),
        ("30min", Timeframe.MINUTE30),
        ("1h", Timeframe.MINUTE60),
        ("Day", Timeframe.DAILY),
        ("1w", Timeframe.WEEKLY),
    ],
)
def test_parse_aliases(text, expected):
    assert Timeframe.parse(text) is expected


@pytest.mark.parametrize("tf", list(Timeframe))
def test_display_parse_round_trip(tf):
    assert Timeframe.parse(str(tf)) is tf


def test_parse_invalid():
    with pytest.raises(InvalidTimeframeError, match="invalid timeframe '2h'"):
        Timeframe.parse("2h")