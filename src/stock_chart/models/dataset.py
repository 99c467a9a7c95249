"""Dataset container for stock-chart."""

from dataclasses import dataclass, field

import polars as pl


@dataclass
class Dataset:
    """名前付きの価格系列.

    Loaderが生成し（全カラムUtf8）、Normalizerが ``values`` を型付き・
    時系列順のDataFrameに置き換える。それ以降は読み取り専用。

    Attributes:
        name: シリーズ名（例: AAPL）
        values: 価格データ
        normalized: Normalizer適用済みならTrue
    """

    name: str
    values: pl.DataFrame
    normalized: bool = field(default=False)

    def __len__(self) -> int:
        return self.values.height
