"""Global domains and the ordinal color scale for one chart."""

from collections.abc import Sequence
from dataclasses import dataclass
from datetime import datetime

import polars as pl

from stock_chart.models import CATEGORY10, Dataset

TimeDomain = tuple[datetime, datetime]
PriceDomain = tuple[float, float]


def _all_points(datasets: Sequence[Dataset], column: str) -> pl.Series:
    """全Datasetの指定カラムを連結（null/NaNを除外）."""
    frames = [d.values.select(column) for d in datasets if column in d.values.columns]
    if not frames:
        return pl.Series(column, [], dtype=pl.Float64)
    series = pl.concat(frames, how="vertical_relaxed").get_column(column).drop_nulls()
    if series.dtype.is_float():
        series = series.filter(series.is_not_nan())
    return series


def time_domain(datasets: Sequence[Dataset]) -> TimeDomain | None:
    """全Datasetのtimestampの [min, max]. 有効な点がなければNone."""
    points = _all_points(datasets, "timestamp")
    if points.is_empty():
        return None
    lo, hi = points.min(), points.max()
    assert isinstance(lo, datetime) and isinstance(hi, datetime)
    return lo, hi


def price_domain(datasets: Sequence[Dataset], field: str = "close") -> PriceDomain | None:
    """全Datasetの価格（デフォルトはclose）の [min, max]. 有効な点がなければNone."""
    points = _all_points(datasets, field)
    if points.is_empty():
        return None
    return float(points.min()), float(points.max())  # type: ignore[arg-type]


class ColorScale:
    """Ordinal color scale.

    Names get colors in first-seen order, cycling through the palette once it
    runs out. A name keeps its color for the life of the scale.
    """

    def __init__(self, palette: Sequence[str] = CATEGORY10, domain: Sequence[str] = ()) -> None:
        if not palette:
            raise ValueError("palette must not be empty")
        self.palette = tuple(palette)
        self._assigned: dict[str, str] = {}
        for name in domain:
            self(name)

    def __call__(self, name: str) -> str:
        color = self._assigned.get(name)
        if color is None:
            color = self.palette[len(self._assigned) % len(self.palette)]
            self._assigned[name] = color
        return color

    @property
    def domain(self) -> list[str]:
        return list(self._assigned)


@dataclass
class Scales:
    """描画1回分のスケール一式.

    Attributes:
        time_domain: 全Datasetのtimestamp範囲（有効な点がなければNone）
        price_domain: 全Datasetのclose範囲（有効な点がなければNone）
        color: シリーズ名 → 色
    """

    time_domain: TimeDomain | None
    price_domain: PriceDomain | None
    color: ColorScale


def build_scales(
    datasets: Sequence[Dataset],
    palette: Sequence[str] = CATEGORY10,
) -> Scales:
    """正規化済みDatasetからスケール一式を構築.

    Args:
        datasets: 正規化済みDataset
        palette: カテゴリカルカラーパレット

    Returns:
        Scales: ドメインと色
    """
    return Scales(
        time_domain=time_domain(datasets),
        price_domain=price_domain(datasets),
        color=ColorScale(palette, domain=[d.name for d in datasets]),
    )
