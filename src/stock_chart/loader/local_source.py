"""Local filesystem CSV source."""

import asyncio
from pathlib import Path

from stock_chart.exceptions import DataLoadError
from stock_chart.loader.base_source import BaseCsvSource


class LocalCsvSource(BaseCsvSource):
    """ローカルファイルからCSVを読み込むアダプタ.

    同期I/Oは ``asyncio.to_thread`` で別スレッドに退避する。
    """

    def __init__(self, encoding: str = "utf-8") -> None:
        self.encoding = encoding

    async def fetch_text(self, location: str) -> str:
        path = Path(location)

        def _read() -> str:
            try:
                return path.read_text(encoding=self.encoding)
            except OSError as e:
                raise DataLoadError(f"Failed to read {path}: {e}", location=location) from e

        return await asyncio.to_thread(_read)
