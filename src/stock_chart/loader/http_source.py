"""HTTP CSV source."""

import httpx

from stock_chart.exceptions import DataLoadError
from stock_chart.loader.base_source import BaseCsvSource


class HttpCsvSource(BaseCsvSource):
    """HTTP(S)経由でCSVを取得するアダプタ.

    リトライ・タイムアウトなし。クライアントは呼び出し側で共有・クローズする。
    """

    def __init__(self, client: httpx.AsyncClient) -> None:
        self._client = client

    async def fetch_text(self, location: str) -> str:
        try:
            response = await self._client.get(location)
            response.raise_for_status()
        except httpx.HTTPStatusError as e:
            raise DataLoadError(
                f"Failed to fetch {location}: HTTP {e.response.status_code}",
                location=location,
            ) from e
        except httpx.RequestError as e:
            raise DataLoadError(f"Failed to fetch {location}: {e}", location=location) from e
        return response.text
