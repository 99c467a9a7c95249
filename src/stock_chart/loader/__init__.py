"""Loader package for stock-chart.

This package provides:
- BaseCsvSource: Abstract base class for CSV source adapters
- LocalCsvSource: Read CSV files from the local filesystem
- HttpCsvSource: Fetch CSV files over HTTP(S)
- load_datasets: Fetch all series concurrently
"""

from stock_chart.loader.base_source import BaseCsvSource
from stock_chart.loader.http_source import HttpCsvSource
from stock_chart.loader.loader import load_datasets, select_source
from stock_chart.loader.local_source import LocalCsvSource

__all__ = [
    "BaseCsvSource",
    "HttpCsvSource",
    "LocalCsvSource",
    "load_datasets",
    "select_source",
]
