[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "brookspa"
version = "0.1.0"
description = "Core types for price-action trading of China A-share ETFs: bars, orders, positions, signals, events, API errors and CSV bar files."
requires-python = ">=3.10"
dependencies = []
keywords = ["trading", "price action", "ohlcv", "etf", "a-share", "decimal"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Intended Audience :: Financial and Insurance Industry",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Office/Business :: Financial :: Investment",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["brookspa"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
