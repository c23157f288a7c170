"""Reading and writing price bars as CSV files."""

from __future__ import annotations

import re
from collections.abc import Iterable
from datetime import datetime, timezone
from decimal import Decimal, InvalidOperation
from pathlib import Path

from brookspa.bar import Bar
from brookspa.market import SecurityId
from brookspa.timeframe import Timeframe

HEADER = "timestamp,open,high,low,close,volume"

_COLUMNS = 6
_VOLUME_RE = re.compile(r"\+?[0-9]+")


class BarFileError(ValueError):
    """A bar file could not be read or holds malformed data."""

    def __init__(self, message: str, line: int | None = None) -> None:
        self.line = line
        super().__init__(message)


def _parse_timestamp(text: str) -> datetime:
    raw = text.strip()
    if raw.endswith(("Z", "z")):
        raw = raw[:-1] + "+00:00"
    value = datetime.fromisoformat(raw)
    if value.tzinfo is None:
        raise ValueError("timestamp has no UTC offset")
    return value.astimezone(timezone.utc)


def _parse_decimal(text: str) -> Decimal:
    value = Decimal(text.strip())
    if not value.is_finite():
        raise ValueError("not a finite number")
    return value


def _parse_volume(text: str) -> int:
    raw = text.strip()
    if not _VOLUME_RE.fullmatch(raw):
        raise ValueError("not an unsigned integer")
    return int(raw)


def _field(line_no: int, name: str, text: str, parse):
    try:
        return parse(text)
    except (ValueError, InvalidOperation):
        raise BarFileError(
            f"line {line_no}: invalid {name} '{text}'", line=line_no
        ) from None


def parse_bars(
    lines: Iterable[str], security: SecurityId, timeframe: Timeframe
) -> list[Bar]:
    """Parse CSV lines into bars; a header on the first line is skipped."""
    bars: list[Bar] = []
    for line_no, line in enumerate(lines, start=1):
        if line_no == 1 and "timestamp" in line:
            continue
        stripped = line.strip()
        if not stripped:
            continue

        fields = stripped.split(",")
        if len(fields) < _COLUMNS:
            raise BarFileError(
                f"line {line_no}: expected {_COLUMNS} columns, got {len(fields)}",
                line=line_no,
            )

        timestamp = _field(line_no, "timestamp", fields[0], _parse_timestamp)
        open_, high, low, close = (
            _field(line_no, name, text, _parse_decimal)
            for name, text in zip(("open", "high", "low", "close"), fields[1:5])
        )
        volume = _field(line_no, "volume", fields[5], _parse_volume)

        bars.append(
            Bar(
                timestamp=timestamp,
                open=open_,
                high=high,
                low=low,
                close=close,
                volume=volume,
                timeframe=timeframe,
                security=security,
            )
        )
    return bars


def load_bars_from_csv(
    path: str | Path, security: SecurityId, timeframe: Timeframe
) -> list[Bar]:
    """Load bars for one security from a CSV file."""
    try:
        contents = Path(path).read_text(encoding="utf-8")
    except OSError as exc:
        raise BarFileError(f"cannot read file: {path}") from exc
    return parse_bars(contents.splitlines(), security, timeframe)


def _format_decimal(value: Decimal) -> str:
    return format(value, "f")


def format_bars_csv(bars: Iterable[Bar]) -> str:
    """Render bars as CSV text with a header line."""
    rows = [HEADER]
    rows.extend(
        ",".join(
            (
                bar.timestamp.astimezone(timezone.utc).isoformat(),
                _format_decimal(bar.open),
                _format_decimal(bar.high),
                _format_decimal(bar.low),
                _format_decimal(bar.close),
                str(bar.volume),
            )
        )
        for bar in bars
    )
    return "\n".join(rows) + "\n"


def write_bars_csv(path: str | Path, bars: Iterable[Bar]) -> int:
    """Write bars to a CSV file and return how many were written."""
    bar_list = list(bars)
    try:
        Path(path).write_text(format_bars_csv(bar_list), encoding="utf-8")
    except OSError as exc:
        raise BarFileError(f"failed to write {path}") from exc
    return len(bar_list)