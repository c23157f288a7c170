"""Price-action trading types: bars, securities, timeframes, orders, positions, signals, events, errors and CSV bar files."""

__version__ = "0.1.0"