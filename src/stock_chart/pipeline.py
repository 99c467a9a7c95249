"""Chart pipeline: load, normalize, build scales, render.

Usage:
    from stock_chart.pipeline import ChartPipeline

    pipeline = ChartPipeline(ChartConfig.default(Path("data")))
    await pipeline.run(Path("charts/stocks.svg"))
"""

from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass
from datetime import datetime as dt
from pathlib import Path

import polars as pl

from stock_chart.loader import load_datasets
from stock_chart.models import ChartConfig, Dataset
from stock_chart.normalizer import normalize_datasets
from stock_chart.renderer import render_chart
from stock_chart.scales import Scales, build_scales

logger = logging.getLogger(__name__)


@dataclass
class SeriesSummary:
    """Per-series overview used by ``stock-chart summary``."""

    name: str
    rows: int
    first: dt | None
    last: dt | None
    close_min: float | None
    close_max: float | None
    invalid_rows: int


def summarize(dataset: Dataset) -> SeriesSummary:
    """正規化済みDatasetの概要を計算."""
    values = dataset.values
    timestamps = values.get_column("timestamp").drop_nulls()
    closes = values.get_column("close").drop_nulls().drop_nans()
    invalid = values.filter(pl.col("timestamp").is_null() | ~pl.col("close").is_finite()).height
    return SeriesSummary(
        name=dataset.name,
        rows=values.height,
        first=timestamps.min() if not timestamps.is_empty() else None,  # type: ignore[arg-type]
        last=timestamps.max() if not timestamps.is_empty() else None,  # type: ignore[arg-type]
        close_min=float(closes.min()) if not closes.is_empty() else None,  # type: ignore[arg-type]
        close_max=float(closes.max()) if not closes.is_empty() else None,  # type: ignore[arg-type]
        invalid_rows=invalid,
    )


class ChartPipeline:
    """CSV → 正規化 → スケール → 描画 の直列パイプライン.

    非同期なのは最初のCSV一括取得のみ。以降はすべて同期処理。
    """

    def __init__(self, config: ChartConfig) -> None:
        self.config = config
        self.datasets: list[Dataset] = []
        self.scales: Scales | None = None

    async def load(self) -> list[Dataset]:
        """全シリーズを並行取得（最初の失敗で全体が失敗）."""
        logger.info("Loading %d series...", len(self.config.series))
        self.datasets = await load_datasets(self.config.series)
        return self.datasets

    def normalize(self) -> list[Dataset]:
        """全Datasetを型変換・時系列ソート."""
        self.datasets = normalize_datasets(self.datasets, strict=self.config.strict)
        return self.datasets

    def build_scales(self) -> Scales:
        self.scales = build_scales(self.datasets, self.config.palette)
        logger.info(
            "Scales: time domain=%s, price domain=%s",
            self.scales.time_domain,
            self.scales.price_domain,
        )
        return self.scales

    def render(self, output: Path, fmt: str | None = None) -> None:
        if self.scales is None:
            self.build_scales()
        assert self.scales is not None
        render_chart(self.datasets, self.scales, self.config, output, fmt=fmt)

    async def prepare(self) -> Scales:
        """load → normalize → build_scales."""
        await self.load()
        self.normalize()
        return self.build_scales()

    async def run(self, output: Path, fmt: str | None = None) -> None:
        """パイプライン全体を実行してチャートを書き出す."""
        await self.prepare()
        self.render(output, fmt=fmt)

    def summaries(self) -> list[SeriesSummary]:
        return [summarize(d) for d in self.datasets]


def run_chart(config: ChartConfig, output: Path, fmt: str | None = None) -> ChartPipeline:
    """同期版のエントリポイント."""
    pipeline = ChartPipeline(config)
    asyncio.run(pipeline.run(output, fmt=fmt))
    return pipeline
