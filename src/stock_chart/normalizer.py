"""Type coercion and chronological sorting of raw price datasets."""

import logging
from collections.abc import Iterable

import polars as pl

from stock_chart.exceptions import DataValidationError
from stock_chart.models import DATE_COLUMN, NUMERIC_COLUMNS, PRICE_COLUMN_MAPPING, Dataset

logger = logging.getLogger(__name__)

# Date.parse が受け付ける株価CSVの日付形式
DATE_FORMATS: tuple[str, ...] = ("%Y-%m-%d", "%m/%d/%Y")
DATETIME_FORMATS: tuple[str, ...] = tuple(
    f"%Y-%m-%d{sep}{time}" for sep in ("T", " ") for time in ("%H:%M", "%H:%M:%S", "%H:%M:%S%.f")
)
# オフセット付き（Z / ±hh:mm）はUTCに変換してからタイムゾーンを外す
OFFSET_DATETIME_FORMATS: tuple[str, ...] = tuple(f"{fmt}%#z" for fmt in DATETIME_FORMATS)


def _timestamp_expr() -> pl.Expr:
    """日付カラムをDatetimeに変換する式（解析不能ならnull）."""
    raw = pl.col(DATE_COLUMN).str.strip_chars()
    candidates = [raw.str.to_date(fmt, strict=False).cast(pl.Datetime("us")) for fmt in DATE_FORMATS]
    candidates += [raw.str.to_datetime(fmt, strict=False, time_unit="us") for fmt in DATETIME_FORMATS]
    candidates += [
        raw.str.to_datetime(fmt, strict=False, time_unit="us", time_zone="UTC").dt.replace_time_zone(None)
        for fmt in OFFSET_DATETIME_FORMATS
    ]
    return pl.coalesce(candidates)


def _numeric_expr(column: str) -> pl.Expr:
    """数値カラムをFloat64に変換する式（解析不能ならNaN）."""
    return pl.col(column).str.strip_chars().cast(pl.Float64, strict=False).fill_null(float("nan"))


def _check_columns(dataset: Dataset) -> None:
    missing = [c for c in PRICE_COLUMN_MAPPING if c not in dataset.values.columns]
    if missing:
        msg = f"{dataset.name}: missing required columns {missing} (found {dataset.values.columns})"
        raise DataValidationError(msg, column=missing[0])


def _check_strict(dataset: Dataset, raw: pl.DataFrame, typed: pl.DataFrame) -> None:
    """strictモード: 解析に失敗した値があればエラー."""
    bad_dates = typed.get_column(DATE_COLUMN).null_count()
    if bad_dates:
        msg = f"{dataset.name}: {bad_dates} unparseable value(s) in column {DATE_COLUMN}"
        raise DataValidationError(msg, column=DATE_COLUMN, count=bad_dates)

    for column in NUMERIC_COLUMNS:
        # ソースに "NaN" と書かれている行は不正値として扱わない
        literal_nan = raw.get_column(column).str.strip_chars().str.to_lowercase() == "nan"
        parsed_nan = typed.get_column(column).is_nan()
        bad = int((parsed_nan & ~literal_nan.fill_null(False)).sum())
        if bad:
            msg = f"{dataset.name}: {bad} non-numeric value(s) in column {column}"
            raise DataValidationError(msg, column=column, count=bad)


def normalize_dataset(dataset: Dataset, *, strict: bool = False) -> Dataset:
    """Datasetを型変換し、時系列順にソート.

    - Date: Datetimeへ変換（解析不能ならnull）
    - Open/High/Low/Close/Volume: Float64へ変換（解析不能ならNaN、エラーなし）
    - カラム名を正規化スキーマ（timestamp, open, ...）に変更
    - timestamp昇順で安定ソート（nullは末尾）

    ``dataset.values`` をその場で置き換える。正規化済みのDatasetは変更しない。

    Args:
        dataset: Loaderが生成したDataset
        strict: Trueの場合、解析不能な値をDataValidationErrorとして報告する

    Returns:
        Dataset: 引数と同じオブジェクト

    Raises:
        DataValidationError: 必須カラムが欠けている場合、またはstrictモードで不正値がある場合
    """
    if dataset.normalized:
        return dataset

    _check_columns(dataset)
    raw = dataset.values

    typed = raw.with_columns(
        _timestamp_expr().alias(DATE_COLUMN),
        *[_numeric_expr(c).alias(c) for c in NUMERIC_COLUMNS],
    )
    if strict:
        _check_strict(dataset, raw, typed)

    extra_columns = [c for c in typed.columns if c not in PRICE_COLUMN_MAPPING]
    typed = (
        typed.rename(PRICE_COLUMN_MAPPING)
        .select([*PRICE_COLUMN_MAPPING.values(), *extra_columns])
        .sort("timestamp", maintain_order=True, nulls_last=True)
    )

    dataset.values = typed
    dataset.normalized = True

    if typed.height:
        logger.debug("Processed %s, first row: %s", dataset.name, typed.row(0, named=True))
    return dataset


def normalize_datasets(datasets: Iterable[Dataset], *, strict: bool = False) -> list[Dataset]:
    """全Datasetに ``normalize_dataset`` を適用."""
    return [normalize_dataset(d, strict=strict) for d in datasets]
