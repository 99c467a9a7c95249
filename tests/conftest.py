"""Shared fixtures for stock-chart tests."""

from collections.abc import Callable
from pathlib import Path

import polars as pl
import pytest

from stock_chart.models import Dataset

RAW_HEADER = ["Date", "Open", "High", "Low", "Close", "Volume"]


@pytest.fixture
def fixtures_dir() -> Path:
    """tests/fixtures ディレクトリ."""
    return Path(__file__).parent / "fixtures"


@pytest.fixture
def data_dir(fixtures_dir: Path) -> Path:
    """サンプルCSV（AAPL, GOOG, AMZN, IBM, MSFT）のディレクトリ."""
    return fixtures_dir / "data"


@pytest.fixture
def make_raw_dataset() -> Callable[..., Dataset]:
    """Loader出力相当（全カラムUtf8）のDatasetを作るファクトリ.

    rows は (Date, Close) または (Date, Open, High, Low, Close, Volume) のタプル。
    """

    def _make(name: str, rows: list[tuple[str | None, ...]]) -> Dataset:
        full_rows = []
        for row in rows:
            if len(row) == 2:
                date, close = row
                full_rows.append((date, close, close, close, close, "1000"))
            else:
                full_rows.append(row)
        values = pl.DataFrame(full_rows, schema={c: pl.Utf8 for c in RAW_HEADER}, orient="row")
        return Dataset(name=name, values=values)

    return _make
