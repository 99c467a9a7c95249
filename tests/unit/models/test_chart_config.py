"""Unit tests for chart configuration models."""

from pathlib import Path

import pytest
from pydantic import ValidationError

from stock_chart.models import CATEGORY10, DEFAULT_SYMBOLS, ChartConfig, ChartLayout, DataPointRow, SeriesSource


@pytest.mark.unit
class TestSeriesSource:
    """SeriesSourceのテスト."""

    def test_strips_name(self) -> None:
        assert SeriesSource(name=" AAPL ", location="AAPL.csv").name == "AAPL"

    def test_blank_name_rejected(self) -> None:
        with pytest.raises(ValidationError):
            SeriesSource(name="   ", location="AAPL.csv")

    @pytest.mark.parametrize(
        ("location", "expected"),
        [
            ("data/AAPL.csv", False),
            ("/abs/AAPL.csv", False),
            ("http://example.com/AAPL.csv", True),
            ("https://example.com/AAPL.csv", True),
        ],
    )
    def test_is_remote(self, location: str, expected: bool) -> None:
        assert SeriesSource(name="AAPL", location=location).is_remote is expected


@pytest.mark.unit
class TestChartLayout:
    """ChartLayoutのテスト."""

    def test_default_plot_area(self) -> None:
        layout = ChartLayout()

        assert layout.width == 1000 - 100 - 160
        assert layout.height == 800 - 50 - 50

    def test_margins_must_leave_plot_area(self) -> None:
        with pytest.raises(ValidationError, match="no plot area"):
            ChartLayout(canvas_width=200)


@pytest.mark.unit
class TestChartConfig:
    """ChartConfigのテスト."""

    def test_default_five_symbols(self) -> None:
        config = ChartConfig.default(Path("data"))

        assert [s.name for s in config.series] == list(DEFAULT_SYMBOLS)
        assert config.series[0].location == str(Path("data") / "AAPL.csv")
        assert config.title == "Historical Stock Prices: AAPL, GOOG, AMZN, IBM, MSFT"
        assert config.palette == list(CATEGORY10)
        assert config.curve == "monotone"
        assert config.strict is False

    def test_default_custom_symbols(self) -> None:
        config = ChartConfig.default(Path("data"), ["IBM"])

        assert [s.name for s in config.series] == ["IBM"]

    def test_series_required(self) -> None:
        with pytest.raises(ValidationError):
            ChartConfig(series=[])

    def test_duplicate_names_rejected(self) -> None:
        with pytest.raises(ValidationError, match="duplicate series names"):
            ChartConfig(
                series=[
                    SeriesSource(name="AAPL", location="a.csv"),
                    SeriesSource(name="AAPL", location="b.csv"),
                ]
            )

    def test_invalid_curve(self) -> None:
        with pytest.raises(ValidationError):
            ChartConfig(curve="step", series=[SeriesSource(name="AAPL", location="a.csv")])


@pytest.mark.unit
def test_data_point_row_allows_nan() -> None:
    """DataPointRowはNaNとnull timestampを表現できること."""
    row = DataPointRow(timestamp=None, open=float("nan"), high=1.0, low=1.0, close=1.0, volume=0.0)

    assert row.timestamp is None
    assert row.open != row.open
