"""Base CSV source adapter for fetching raw price data."""

from abc import ABC, abstractmethod

import polars as pl

from stock_chart.exceptions import DataLoadError
from stock_chart.models import SeriesSource


class BaseCsvSource(ABC):
    """CSVリソース取得アダプタの基底クラス.

    ローカルファイル・HTTPなど、取得元ごとに差し替え可能なアダプタパターンで実装。
    サブクラスは ``fetch_text`` のみ実装すればよい。
    """

    @abstractmethod
    async def fetch_text(self, location: str) -> str:
        """CSVテキストを取得.

        Args:
            location: ファイルパスまたはURL

        Returns:
            str: CSVファイルの内容
        """
        ...

    def parse(self, text: str, source: SeriesSource) -> pl.DataFrame:
        """CSVテキストをDataFrameに変換.

        全カラムをUtf8として読み込む（型変換はNormalizerの責務）。

        Args:
            text: CSVテキスト
            source: 対象シリーズ（エラーメッセージ用）

        Returns:
            pl.DataFrame: 全カラムがUtf8のDataFrame

        Raises:
            DataLoadError: CSVとして解釈できない場合
        """
        try:
            return pl.read_csv(text.encode("utf-8"), infer_schema_length=0)
        except pl.exceptions.PolarsError as e:
            raise DataLoadError(
                f"Failed to parse CSV for {source.name} ({source.location}): {e}",
                name=source.name,
                location=source.location,
            ) from e

    async def fetch(self, source: SeriesSource) -> pl.DataFrame:
        """シリーズのCSVを取得してDataFrameを返す.

        Raises:
            DataLoadError: 取得または解析に失敗した場合
        """
        text = await self.fetch_text(source.location)
        return self.parse(text, source)
