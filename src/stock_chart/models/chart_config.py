"""Chart configuration models for stock-chart."""

from pathlib import Path
from typing import Self

from pydantic import BaseModel, Field, model_validator

from stock_chart.models.series_source import SeriesSource

DEFAULT_SYMBOLS: tuple[str, ...] = ("AAPL", "GOOG", "AMZN", "IBM", "MSFT")

# d3.schemeCategory10
CATEGORY10: tuple[str, ...] = (
    "#1f77b4",
    "#ff7f0e",
    "#2ca02c",
    "#d62728",
    "#9467bd",
    "#8c564b",
    "#e377c2",
    "#7f7f7f",
    "#bcbd22",
    "#17becf",
)


class Margin(BaseModel):
    """Canvas margins in logical units."""

    top: int = Field(default=50, ge=0)
    right: int = Field(default=160, ge=0)
    bottom: int = Field(default=50, ge=0)
    left: int = Field(default=100, ge=0)


class ChartLayout(BaseModel):
    """Canvas size and margins ([chart.layout] section).

    ``width`` and ``height`` are the inner plot area, i.e. the canvas
    minus the margins.
    """

    canvas_width: int = Field(default=1000, gt=0, description="Total canvas width")
    canvas_height: int = Field(default=800, gt=0, description="Total canvas height")
    margin: Margin = Field(default_factory=Margin)

    @model_validator(mode="after")
    def validate_plot_area(self) -> Self:
        """Margins must leave a non-empty plot area."""
        if self.width <= 0 or self.height <= 0:
            msg = (
                f"margins leave no plot area: canvas {self.canvas_width}x{self.canvas_height}, "
                f"margin {self.margin.model_dump()}"
            )
            raise ValueError(msg)
        return self

    @property
    def width(self) -> int:
        """Inner plot width."""
        return self.canvas_width - self.margin.left - self.margin.right

    @property
    def height(self) -> int:
        """Inner plot height."""
        return self.canvas_height - self.margin.top - self.margin.bottom


class ChartConfig(BaseModel):
    """Chart configuration ([chart] section).

    Defines the input series and how the chart is drawn.
    """

    title: str = Field(
        default="Historical Stock Prices",
        description="Chart title, centered in the top margin",
    )
    x_label: str = Field(default="Year", description="Horizontal axis label")
    y_label: str = Field(default="Stock Price (USD)", description="Vertical axis label")
    curve: str = Field(
        default="monotone",
        pattern=r"^(monotone|linear)$",
        description="Line interpolation: monotone (smoothed) or linear",
    )
    palette: list[str] = Field(
        default_factory=lambda: list(CATEGORY10),
        min_length=1,
        description="Categorical colors assigned to series in first-seen order",
    )
    strict: bool = Field(
        default=False,
        description="Raise on malformed numeric/date values instead of coercing to NaN",
    )
    layout: ChartLayout = Field(default_factory=ChartLayout)
    series: list[SeriesSource] = Field(
        ...,
        min_length=1,
        description="Input series, drawn and listed in the legend in this order",
    )

    @model_validator(mode="after")
    def validate_unique_names(self) -> Self:
        """Series names must be unique."""
        names = [s.name for s in self.series]
        duplicates = sorted({n for n in names if names.count(n) > 1})
        if duplicates:
            raise ValueError(f"duplicate series names: {duplicates}")
        return self

    @classmethod
    def default(cls, data_dir: Path, symbols: tuple[str, ...] | list[str] = DEFAULT_SYMBOLS) -> "ChartConfig":
        """Build the default configuration: one ``{data_dir}/{SYMBOL}.csv`` per symbol."""
        return cls(
            title=f"Historical Stock Prices: {', '.join(symbols)}",
            series=[SeriesSource(name=s, location=str(data_dir / f"{s}.csv")) for s in symbols],
        )
