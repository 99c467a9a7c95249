"""Concurrent loading of named price datasets."""

import asyncio
import logging
from collections.abc import Sequence

import httpx

from stock_chart.exceptions import DataLoadError
from stock_chart.loader.base_source import BaseCsvSource
from stock_chart.loader.http_source import HttpCsvSource
from stock_chart.loader.local_source import LocalCsvSource
from stock_chart.models import Dataset, SeriesSource

logger = logging.getLogger(__name__)


def select_source(series: SeriesSource, client: httpx.AsyncClient | None = None) -> BaseCsvSource:
    """locationのスキームから取得アダプタを選択.

    Args:
        series: 対象シリーズ
        client: HTTP取得に使うクライアント（remoteの場合は必須）

    Returns:
        BaseCsvSource: 選択されたアダプタ
    """
    if series.is_remote:
        if client is None:
            raise ValueError(f"HTTP client required for remote series {series.name}")
        return HttpCsvSource(client)
    return LocalCsvSource()


async def _load_one(series: SeriesSource, source: BaseCsvSource) -> Dataset:
    try:
        values = await source.fetch(series)
    except DataLoadError as e:
        # 名前を補完して再送出
        if e.name is None:
            raise DataLoadError(str(e), name=series.name, location=series.location) from e
        raise
    logger.debug("Loaded %s: %d rows from %s", series.name, values.height, series.location)
    return Dataset(name=series.name, values=values)


async def load_datasets(
    sources: Sequence[SeriesSource],
    client: httpx.AsyncClient | None = None,
) -> list[Dataset]:
    """全シリーズのCSVを並行取得.

    全取得を ``asyncio.gather`` で同時に実行し、全完了を待ってから返す。
    いずれかが失敗した時点で例外を送出する（部分結果なし、リトライなし）。

    Args:
        sources: 取得対象シリーズ
        client: 共有HTTPクライアント。Noneかつremoteシリーズがある場合は内部で生成する

    Returns:
        list[Dataset]: 入力と同じ順序のDataset

    Raises:
        DataLoadError: いずれかの取得に失敗した場合
    """
    if not sources:
        return []

    needs_http = any(s.is_remote for s in sources)
    owns_client = client is None and needs_http
    if owns_client:
        client = httpx.AsyncClient(timeout=None, follow_redirects=True)

    try:
        tasks = [asyncio.ensure_future(_load_one(s, select_source(s, client))) for s in sources]
        try:
            datasets = await asyncio.gather(*tasks)
        except BaseException:
            # 最初の失敗でバッチ全体を中断
            for task in tasks:
                task.cancel()
            await asyncio.gather(*tasks, return_exceptions=True)
            raise
    finally:
        if owns_client:
            assert client is not None
            await client.aclose()

    logger.info("Loaded datasets: %s", ", ".join(f"{d.name}({len(d)})" for d in datasets))
    return list(datasets)
