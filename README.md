# brookspa

Building blocks for price-action trading on China A-share ETFs. The package has no dependencies beyond the standard library. It contains:

- `brookspa.bar`: OHLCV bars and the measures used to read price action (body, range, tails, doji, inside bars and outside bars).
- `brookspa.market`, `brookspa.timeframe`: exchanges, security identifiers, trade direction and bar timeframes.
- `brookspa.order`, `brookspa.position`, `brookspa.signal`: orders, open positions and trading signals.
- `brookspa.events`: market-data and trading events, as frozen dataclasses.
- `brookspa.errors`, `brookspa.api_errors`: errors for invalid core data, and API errors that map onto HTTP responses.
- `brookspa.csvbars`: reading and writing bar data as CSV.

Every price is a `decimal.Decimal`. Floats are not used for prices.

## Installation

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Bars

```python
from datetime import datetime, timezone
from decimal import Decimal

from brookspa.bar import Bar
from brookspa.market import Exchange, SecurityId
from brookspa.timeframe import Timeframe

bar = Bar(
    timestamp=datetime(2024, 6, 10, 2, 0, tzinfo=timezone.utc),
    open=Decimal("3.00"),
    high=Decimal("3.10"),
    low=Decimal("2.95"),
    close=Decimal("3.08"),
    volume=1000,
    timeframe=Timeframe.parse("5min"),
    security=SecurityId.etf("510050", Exchange.SH),
)

bar.is_bull()                 # True
bar.body_size()               # Decimal("0.08")
bar.range()                   # Decimal("0.15")
bar.upper_tail()              # Decimal("0.02")
bar.is_doji(Decimal("0.1"))   # False
```

A bar with zero range always counts as a doji, and its ratio methods (`body_ratio`, `upper_tail_ratio`, `lower_tail_ratio`) return zero for it. `is_outside_bar(prev)` needs a strictly higher high and a strictly lower low. `is_inside_bar(prev)` allows the two bars to share the same high or low.

## Securities and timeframes

- `str(SecurityId.etf("510050", Exchange.SH))` gives `"510050.SH"`.
- `Exchange.parse("sh")` ignores case. It raises `ValueError` for any code other than SH or SZ.
- `Direction.LONG.opposite()` gives `Direction.SHORT`.

`Timeframe.parse` ignores case and accepts these forms:

- `1min` or `1m`
- `5min` or `5m`
- `15min` or `15m`
- `30min` or `30m`
- `60min`, `60m` or `1h`
- `daily`, `1d` or `day`
- `weekly`, `1w` or `week`

Any other text raises `brookspa.errors.InvalidTimeframeError`.

Timeframes compare from shortest to longest. Each timeframe also provides:

- `duration_secs()`
- `is_intraday()`
- `as_futu_kl_type()`, the Futu OpenAPI KLType number.

## Orders, positions and signals

**Orders.** `Order.market`, `Order.limit` and `Order.stop` create orders in the `PENDING` state. Each new order gets a random UUID and a UTC creation time. The state checks are:

- `is_active()`
- `is_terminal()`
- `remaining_quantity()`, which never goes below zero.

**Positions.** `Position` gives:

- `unrealized_pnl()` and `unrealized_pnl_pct()`, signed by direction.
- `update_price(price)`.
- `is_stop_hit(price)` and `is_target_hit(price)`.
- `notional_value()` and `entry_value()`.
- `is_t1_settled(as_of)`. It is true only when the China Standard Time (UTC+8) date of `as_of` comes strictly after the CST date the position was opened.

**Signals.** `Signal` gives:

- `risk_per_unit()`.
- `reward_risk_ratio()`. It returns `None` when the signal has no target, and zero when the risk is zero.

## API errors

`brookspa.api_errors` defines four `ApiError` subclasses: `BadRequestError`, `NotFoundError`, `ConflictError` and `InternalError`.

`to_response(now=None)` returns an `HTTPStatus` and a JSON-ready body:

```python
from brookspa.api_errors import NotFoundError

status, body = NotFoundError("backtest session 'x' not found").to_response()
# status == HTTPStatus.NOT_FOUND
# body == {"error": "Not Found",
#          "message": "not found: backtest session 'x' not found",
#          "timestamp": "<ISO 8601 time>"}
```

## CSV bar files

`brookspa.csvbars` reads and writes files with the columns `timestamp,open,high,low,close,volume`.

**Reading.** `load_bars_from_csv(path, security, timeframe)` reads a file. `parse_bars(lines, security, timeframe)` reads an iterable of lines. Both follow these rules:

- A first line that contains `timestamp` is treated as a header and skipped.
- Blank lines are skipped.
- Columns after the sixth are ignored.
- Timestamps are ISO 8601 / RFC 3339 with a UTC offset (`Z` is accepted) and are converted to UTC.
- Volume must be an unsigned integer.
- Missing columns, bad values or an unreadable file raise `BarFileError`. For a bad line, the error's `line` attribute holds the 1-based line number.

**Writing.** `format_bars_csv(bars)` renders bars as CSV text with a header line. Timestamps are written in UTC ISO format and prices in plain decimal notation. `write_bars_csv(path, bars)` writes that text to a file and returns the number of bars written.

## What this package does not do

The package holds data types and file handling only. It has none of the following:

- a price-action analyzer, trading strategy or backtest engine;
- a connection to a market-data provider;
- an HTTP server;
- a command-line program.

The API error classes describe responses, but nothing here serves them.