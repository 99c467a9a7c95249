"""Data row reference models for stock-chart.

These models serve as reference schemas for Polars DataFrames.
They are primarily used for type hints and documentation purposes.
"""

from datetime import datetime as dt

from pydantic import BaseModel, Field

# CSVカラムマッピング (ソースCSV → 正規化スキーマ)
PRICE_COLUMN_MAPPING: dict[str, str] = {
    "Date": "timestamp",
    "Open": "open",
    "High": "high",
    "Low": "low",
    "Close": "close",
    "Volume": "volume",
}

DATE_COLUMN = "Date"
NUMERIC_COLUMNS: tuple[str, ...] = ("Open", "High", "Low", "Close", "Volume")


class DataPointRow(BaseModel):
    """Normalized price row schema.

    Reference model for a row of ``Dataset.values`` after normalization.
    Numeric fields may be NaN when the source text was malformed, and
    ``timestamp`` is None when the date could not be parsed.
    """

    timestamp: dt | None = Field(
        ...,
        description="Trading date",
    )
    open: float = Field(
        ...,
        description="Opening price",
    )
    high: float = Field(
        ...,
        description="High price",
    )
    low: float = Field(
        ...,
        description="Low price",
    )
    close: float = Field(
        ...,
        description="Closing price",
    )
    volume: float = Field(
        ...,
        description="Trading volume",
    )
