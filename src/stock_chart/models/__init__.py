"""Models package for stock-chart."""

from stock_chart.models.chart_config import CATEGORY10, DEFAULT_SYMBOLS, ChartConfig, ChartLayout, Margin
from stock_chart.models.data_rows import (
    DATE_COLUMN,
    NUMERIC_COLUMNS,
    PRICE_COLUMN_MAPPING,
    DataPointRow,
)
from stock_chart.models.dataset import Dataset
from stock_chart.models.series_source import SeriesSource

__all__ = [
    # Configuration models
    "ChartConfig",
    "ChartLayout",
    "Margin",
    "SeriesSource",
    "CATEGORY10",
    "DEFAULT_SYMBOLS",
    # Data containers
    "Dataset",
    # Data row models (reference schemas)
    "DataPointRow",
    "DATE_COLUMN",
    "NUMERIC_COLUMNS",
    "PRICE_COLUMN_MAPPING",
]
